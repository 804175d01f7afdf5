"""
Screen and touchscreen descriptor parsing.

This module turns raw command-line tokens into validated `ScreenGeometry`
and `Touchscreen` records and assembles them into a single `ParseResult`.
Every validation failure raises a `CalibrationError` subclass; nothing here
writes to stdout.
"""

from __future__ import annotations

import logging
import re
from typing import Sequence

from touchcal.common.errors import (
    InvalidRotationError,
    InvalidScreenFormatError,
    InvalidTouchscreenArityError,
    InvalidTouchscreenParametersError,
)
from touchcal.common.settings import settings
from touchcal.common.types import (
    ParseResult,
    Rotation,
    ScreenGeometry,
    Touchscreen,
    TouchscreenParse,
)

__all__ = [
    "screen_parse",
    "touchscreen_parse",
    "rotation_parse",
    "rotationToken_isPresent",
    "parseResult_build",
]

logger = logging.getLogger(__name__)

_SCREEN_PATTERN = re.compile(r"([0-9]+)x([0-9]+)")
_DEVICE_ID_PATTERN = re.compile(r"(0[xX])?[0-9a-fA-F]+")
_PIXEL_PATTERN = re.compile(r"[+-]?[0-9]+")


def screen_parse(value: str) -> ScreenGeometry:
    """
    Parse a `--screen` value.

    Args:
        value:
            Preset token (`1`, `2`) or a literal `WxH` resolution.

    Returns:
        Parsed screen geometry.

    Raises:
        InvalidScreenFormatError:
            Raised when value is neither a known preset nor a positive `WxH`.
    """
    preset: ScreenGeometry | None = settings.SCREEN_PRESETS.get(value)
    if preset is not None:
        return preset

    match = _SCREEN_PATTERN.fullmatch(value)
    if match is None:
        raise InvalidScreenFormatError(value)

    width: int = int(match.group(1))
    height: int = int(match.group(2))
    # Zero dimensions would divide by zero in the matrix
    if width <= 0 or height <= 0:
        raise InvalidScreenFormatError(value)
    return ScreenGeometry(width=width, height=height)


def rotationToken_isPresent(token: str) -> bool:
    """
    Decide whether a trailing token is meant as a rotation.

    Args:
        token:
            Candidate seventh descriptor token.

    Returns:
        True when the token is purely ASCII digits.
    """
    return token.isascii() and token.isdigit()


def rotation_parse(token: str) -> Rotation:
    """
    Parse a numeric rotation token.

    Args:
        token:
            Purely numeric rotation in degrees.

    Returns:
        Matching `Rotation` member.

    Raises:
        InvalidRotationError:
            Raised when the angle is not 0, 90, 180 or 270.
    """
    degrees: int = int(token)
    try:
        return Rotation(degrees)
    except ValueError:
        raise InvalidRotationError(degrees) from None


def touchscreen_parse(tokens: Sequence[str], index: int) -> TouchscreenParse:
    """
    Parse one touchscreen descriptor from the tokens following `--touchscreen`.

    The descriptor is six mandatory tokens
    (`vendor product x_offset y_offset width height`) and an optional
    seventh purely numeric rotation. A non-numeric seventh token is left
    unconsumed for the caller to deal with.

    Args:
        tokens:
            Plain argument tokens available after the flag.
        index:
            Zero-based position of this touchscreen on the command line.

    Returns:
        Parsed record and the number of tokens consumed (6 or 7).

    Raises:
        InvalidTouchscreenArityError:
            Raised when fewer than six tokens are available.
        InvalidRotationError:
            Raised when the rotation token is numeric but unsupported.
        InvalidTouchscreenParametersError:
            Raised when an id or pixel value is not a valid number.
    """
    required: int = settings.TOUCHSCREEN_REQUIRED_TOKENS
    if len(tokens) < required:
        raise InvalidTouchscreenArityError(given=len(tokens), required=required)

    consumed: int = required
    rotation: Rotation = Rotation.NORMAL
    if len(tokens) > required and rotationToken_isPresent(tokens[required]):
        rotation = rotation_parse(tokens[required])
        consumed += 1

    touchscreen = Touchscreen(
        name=f"{settings.TOUCHSCREEN_NAME_PREFIX}{index}",
        vendor_id=_deviceId_parse("vendor_id", tokens[0]),
        product_id=_deviceId_parse("product_id", tokens[1]),
        x_offset=_pixel_parse("x_offset", tokens[2]),
        y_offset=_pixel_parse("y_offset", tokens[3]),
        width=_pixel_parse("width", tokens[4]),
        height=_pixel_parse("height", tokens[5]),
        rotation=rotation,
    )
    logger.debug(
        "Parsed %s (%s) at %d,%d size %dx%d rotation %d",
        touchscreen.name,
        touchscreen.usbId_get(),
        touchscreen.x_offset,
        touchscreen.y_offset,
        touchscreen.width,
        touchscreen.height,
        touchscreen.rotation.value,
    )
    return TouchscreenParse(touchscreen=touchscreen, tokens_consumed=consumed)


def parseResult_build(
    screens: Sequence[ScreenGeometry],
    touchscreens: Sequence[Touchscreen],
) -> ParseResult:
    """
    Assemble the final parse result, applying the screen fallback.

    Args:
        screens:
            Every screen parsed, in command-line order. The last one wins.
        touchscreens:
            Every touchscreen parsed, in command-line order.

    Returns:
        ParseResult with exactly one screen.
    """
    if not screens:
        logger.warning(
            "No screen size provided, defaulting to %s", settings.DEFAULT_SCREEN
        )
        return ParseResult(
            screen=settings.DEFAULT_SCREEN,
            touchscreens=list(touchscreens),
            screen_defaulted=True,
        )

    if len(screens) > 1:
        logger.debug(
            "Screen given %d times, using last value %s", len(screens), screens[-1]
        )
    return ParseResult(screen=screens[-1], touchscreens=list(touchscreens))


def _deviceId_parse(field_name: str, token: str) -> int:
    """Parse a 16-bit hex id, with or without `0x` prefix"""
    if _DEVICE_ID_PATTERN.fullmatch(token) is None:
        raise InvalidTouchscreenParametersError(field_name, token)
    value: int = int(token, 16)
    if value > settings.MAX_DEVICE_ID:
        raise InvalidTouchscreenParametersError(field_name, token)
    return value


def _pixel_parse(field_name: str, token: str) -> int:
    """Parse a signed decimal pixel value"""
    if _PIXEL_PATTERN.fullmatch(token) is None:
        raise InvalidTouchscreenParametersError(field_name, token)
    return int(token, 10)
