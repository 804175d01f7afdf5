"""Common types and data structures for touchcal"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Rotation(Enum):
    """Clockwise orientation of a touchscreen's input space, in degrees"""
    NORMAL = 0
    CW_90 = 90
    INVERTED = 180
    CW_270 = 270


@dataclass(frozen=True)
class ScreenGeometry:
    """Total screen dimensions in pixels"""
    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class Touchscreen:
    """Touch surface and the sub-region of the screen it maps onto"""
    name: str
    vendor_id: int
    product_id: int
    x_offset: int
    y_offset: int
    width: int
    height: int
    rotation: Rotation = Rotation.NORMAL

    def usbId_get(self) -> str:
        """Return `vvvv:pppp` id string used in diagnostics"""
        return f"{self.vendor_id:04x}:{self.product_id:04x}"


@dataclass(frozen=True)
class CalibrationMatrix:
    """
    Affine transform stored as the top two rows of a 3x3 matrix.

    The full matrix is `[[c0, c1, c2], [c3, c4, c5], [0, 0, 1]]` and is
    applied to normalized touch coordinates.
    """
    c0: float
    c1: float
    c2: float
    c3: float
    c4: float
    c5: float

    def coefficients_get(self) -> tuple[float, float, float, float, float, float]:
        """Return the six coefficients in row-major order"""
        return (self.c0, self.c1, self.c2, self.c3, self.c4, self.c5)

    def point_transform(self, x: float, y: float) -> tuple[float, float]:
        """
        Apply the matrix to a normalized touch point

        Args:
            x: Normalized raw touch x (0.0 - 1.0)
            y: Normalized raw touch y (0.0 - 1.0)

        Returns:
            Normalized screen coordinates as `(x, y)`
        """
        return (
            self.c0 * x + self.c1 * y + self.c2,
            self.c3 * x + self.c4 * y + self.c5,
        )


@dataclass(frozen=True)
class TouchscreenParse:
    """Touchscreen record plus the number of argument tokens it consumed"""
    touchscreen: Touchscreen
    tokens_consumed: int


@dataclass
class ParseResult:
    """Everything the input parser collected from the command line"""
    screen: ScreenGeometry
    touchscreens: list[Touchscreen] = field(default_factory=list)
    screen_defaulted: bool = False
