"""Affine calibration matrix derivation per touchscreen rotation"""

from __future__ import annotations

import logging

from touchcal.common.types import CalibrationMatrix, Rotation, ScreenGeometry, Touchscreen

__all__ = ["calibrationMatrix_compute"]

logger = logging.getLogger(__name__)


def calibrationMatrix_compute(
    screen: ScreenGeometry, touchscreen: Touchscreen
) -> CalibrationMatrix:
    """
    Derive the libinput calibration matrix for one touchscreen

    The touch surface covers the screen region starting at
    (x_offset, y_offset) with size (width, height). Rotation 0 is a direct
    scale plus offset; 90/180/270 first rotate the unit square, then apply
    the same scale and offset so rotated input still lands on the right
    logical point.

    Args:
        screen: Total screen geometry shared by all touchscreens
        touchscreen: Touch surface geometry and rotation

    Returns:
        Six-coefficient affine transform
    """
    sx = touchscreen.width / screen.width
    sy = touchscreen.height / screen.height
    ox = touchscreen.x_offset / screen.width
    oy = touchscreen.y_offset / screen.height

    rotation = touchscreen.rotation
    if rotation is Rotation.CW_90:
        matrix = CalibrationMatrix(
            c0=0.0, c1=sy, c2=oy,
            c3=-sx, c4=0.0, c5=1.0 - ox - sx,
        )
    elif rotation is Rotation.INVERTED:
        matrix = CalibrationMatrix(
            c0=-sx, c1=0.0, c2=1.0 - ox - sx,
            c3=0.0, c4=-sy, c5=1.0 - oy - sy,
        )
    elif rotation is Rotation.CW_270:
        matrix = CalibrationMatrix(
            c0=0.0, c1=-sy, c2=1.0 - oy - sy,
            c3=sx, c4=0.0, c5=ox,
        )
    else:
        matrix = CalibrationMatrix(
            c0=sx, c1=0.0, c2=ox,
            c3=0.0, c4=sy, c5=oy,
        )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "%s: sx=%.6f sy=%.6f ox=%.6f oy=%.6f, origin -> %s, far corner -> %s",
            touchscreen.name,
            sx,
            sy,
            ox,
            oy,
            matrix.point_transform(0.0, 0.0),
            matrix.point_transform(1.0, 1.0),
        )
    return matrix
