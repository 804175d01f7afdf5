"""
udev rule rendering for calibrated touchscreens.

Each touchscreen becomes one `ENV{LIBINPUT_CALIBRATION_MATRIX}` rule keyed
on its USB vendor/product ids.
"""

from __future__ import annotations

from touchcal.calibration.matrix import calibrationMatrix_compute
from touchcal.common.settings import settings
from touchcal.common.types import CalibrationMatrix, ParseResult, Touchscreen

__all__ = [
    "coefficients_format",
    "rule_format",
    "rules_render",
]


def coefficients_format(matrix: CalibrationMatrix) -> str:
    """
    Format the six coefficients as fixed-point text.

    Args:
        matrix:
            Calibration matrix to format.

    Returns:
        Space-separated coefficients with six decimal digits each.
    """
    return " ".join(
        settings.COEFFICIENT_FORMAT.format(value) for value in matrix.coefficients_get()
    )


def rule_format(touchscreen: Touchscreen, matrix: CalibrationMatrix) -> str:
    """
    Render one udev rule line.

    Args:
        touchscreen:
            Device the rule matches.
        matrix:
            Calibration matrix for the device.

    Returns:
        Rule line without trailing newline.
    """
    return settings.RULE_TEMPLATE.format(
        vendor=touchscreen.vendor_id,
        product=touchscreen.product_id,
        matrix=coefficients_format(matrix),
    )


def rules_render(parse_result: ParseResult) -> list[str]:
    """
    Render the header and one rule per touchscreen, in command-line order.

    Args:
        parse_result:
            Fully validated parser output.

    Returns:
        Output lines, header first.
    """
    lines: list[str] = [settings.RULE_HEADER]
    for touchscreen in parse_result.touchscreens:
        matrix: CalibrationMatrix = calibrationMatrix_compute(
            parse_result.screen, touchscreen
        )
        lines.append(rule_format(touchscreen, matrix))
    return lines
