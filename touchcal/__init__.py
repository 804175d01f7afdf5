"""
touchcal: touchscreen calibration rule generator
Emits udev LIBINPUT_CALIBRATION_MATRIX rules from screen/touchscreen geometry
"""

from importlib.metadata import PackageNotFoundError, version


def _get_installed_version() -> str:
    """Get installed distribution version, or 'dev' when running from a checkout"""
    try:
        return version("touchcal")
    except PackageNotFoundError:
        return "dev"


__version__ = _get_installed_version()
__author__ = "touchcal contributors"
