"""Pytest configuration and shared fixtures for touchcal tests

This module provides common fixtures and test utilities used across
unit tests.
"""

import logging

import pytest

from touchcal.common.types import Rotation, ScreenGeometry, Touchscreen


@pytest.fixture
def full_hd() -> ScreenGeometry:
    """1920x1080 screen, the default and preset 1"""
    return ScreenGeometry(width=1920, height=1080)


@pytest.fixture
def touchscreen_factory():
    """Build Touchscreen records with sensible defaults

    Returns:
        Callable accepting Touchscreen field overrides
    """
    def _make(**overrides) -> Touchscreen:
        fields = {
            "name": "touchscreen0",
            "vendor_id": 0x1234,
            "product_id": 0xABCD,
            "x_offset": 0,
            "y_offset": 0,
            "width": 1920,
            "height": 1080,
            "rotation": Rotation.NORMAL,
        }
        fields.update(overrides)
        return Touchscreen(**fields)

    return _make


@pytest.fixture(autouse=True)
def setup_logging(caplog):
    """Setup logging for tests"""
    caplog.set_level(logging.DEBUG)
