"""Application settings singleton - single source of truth for constants

This module provides a singleton Settings class that consolidates:
1. Screen presets and the fallback screen geometry
2. Touchscreen descriptor parsing limits
3. udev rule output format
4. Logging defaults

Usage:
    from touchcal.common.settings import settings

    preset = settings.SCREEN_PRESETS.get("1")
    line = settings.RULE_TEMPLATE.format(...)
"""

from typing import Optional

from touchcal.common.types import ScreenGeometry


class Settings:
    """Singleton settings manager for touchcal constants

    touchcal has no configuration file; every tunable lives here so the
    parser, calculator and CLI agree on the same values.
    """

    _instance: Optional["Settings"] = None

    def __new__(cls) -> "Settings":
        """Ensure only one Settings instance exists"""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    # =========================================================================
    # Screen Constants
    # =========================================================================

    SCREEN_PRESETS: dict[str, ScreenGeometry] = {
        "1": ScreenGeometry(width=1920, height=1080),
        "2": ScreenGeometry(width=1280, height=800),
    }
    """Named shorthands accepted by --screen"""

    DEFAULT_SCREEN: ScreenGeometry = ScreenGeometry(width=1920, height=1080)
    """Screen used when --screen is never given (a warning is logged)"""

    # =========================================================================
    # Touchscreen Constants
    # =========================================================================

    TOUCHSCREEN_REQUIRED_TOKENS: int = 6
    """vendor product x_offset y_offset width height"""

    MAX_DEVICE_ID: int = 0xFFFF
    """USB vendor/product ids are 16-bit"""

    TOUCHSCREEN_NAME_PREFIX: str = "touchscreen"

    # =========================================================================
    # Output Constants
    # =========================================================================

    RULE_HEADER: str = "# udev rules for touchscreen calibration"

    RULE_TEMPLATE: str = (
        'SUBSYSTEM=="input", KERNEL=="event*", '
        'ATTRS{{idVendor}}=="{vendor:04x}", ATTRS{{idProduct}}=="{product:04x}", '
        'ENV{{LIBINPUT_CALIBRATION_MATRIX}}="{matrix} 0 0 1"'
    )
    """One udev rule per touchscreen; `matrix` is the six formatted coefficients"""

    COEFFICIENT_FORMAT: str = "{:.6f}"

    # =========================================================================
    # Logging Constants
    # =========================================================================

    LOG_FORMAT: str = "%(levelname)s: %(message)s"

    DEFAULT_LOG_LEVEL: str = "WARNING"
    """Warnings such as the missing-screen fallback must reach stderr by default"""


# Global singleton instance
settings = Settings()
"""Global settings singleton instance

Import this anywhere in the application:
    from touchcal.common.settings import settings
"""
