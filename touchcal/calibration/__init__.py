"""Calibration matrix derivation and udev rule rendering."""

from touchcal.calibration.matrix import calibrationMatrix_compute
from touchcal.calibration.rules import rules_render

__all__ = [
    "calibrationMatrix_compute",
    "rules_render",
]
