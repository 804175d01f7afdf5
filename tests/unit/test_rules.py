"""Unit tests for udev rule rendering"""

from touchcal.calibration.rules import coefficients_format, rule_format, rules_render
from touchcal.common.types import CalibrationMatrix, ParseResult, Rotation


class TestCoefficientsFormat:
    """Test fixed-point coefficient text"""

    def test_six_decimal_places(self):
        """Every coefficient gets exactly six decimals"""
        matrix = CalibrationMatrix(1.0, 0.0, 0.25, -0.5, 1 / 3, 0.0)
        assert coefficients_format(matrix) == (
            "1.000000 0.000000 0.250000 -0.500000 0.333333 0.000000"
        )


class TestRuleFormat:
    """Test single rule line rendering"""

    def test_rule_line_layout(self, touchscreen_factory):
        """Ids are 4-digit lowercase hex and matrix ends with 0 0 1"""
        ts = touchscreen_factory(vendor_id=0x12, product_id=0xABCD)
        matrix = CalibrationMatrix(1.0, 0.0, 0.0, 0.0, 1.0, 0.0)

        assert rule_format(ts, matrix) == (
            'SUBSYSTEM=="input", KERNEL=="event*", '
            'ATTRS{idVendor}=="0012", ATTRS{idProduct}=="abcd", '
            'ENV{LIBINPUT_CALIBRATION_MATRIX}='
            '"1.000000 0.000000 0.000000 0.000000 1.000000 0.000000 0 0 1"'
        )


class TestRulesRender:
    """Test full output rendering"""

    def test_header_only_without_touchscreens(self, full_hd):
        """No touchscreens still emits the header"""
        lines = rules_render(ParseResult(screen=full_hd))
        assert lines == ["# udev rules for touchscreen calibration"]

    def test_rotated_half_screen(self, full_hd, touchscreen_factory):
        """Left half rotated 90 on 1920x1080"""
        ts = touchscreen_factory(width=960, height=1080, rotation=Rotation.CW_90)
        lines = rules_render(ParseResult(screen=full_hd, touchscreens=[ts]))

        assert len(lines) == 2
        assert lines[1].endswith(
            '="0.000000 1.000000 0.000000 -0.500000 0.000000 0.500000 0 0 1"'
        )

    def test_lines_follow_touchscreen_order(self, full_hd, touchscreen_factory):
        """One rule per touchscreen, in order"""
        touchscreens = [
            touchscreen_factory(vendor_id=0x5678, product_id=0xEF01),
            touchscreen_factory(vendor_id=0x1234, product_id=0xABCD),
        ]
        lines = rules_render(ParseResult(screen=full_hd, touchscreens=touchscreens))

        assert 'ATTRS{idVendor}=="5678", ATTRS{idProduct}=="ef01"' in lines[1]
        assert 'ATTRS{idVendor}=="1234", ATTRS{idProduct}=="abcd"' in lines[2]
