"""Command-line input parsing for screen and touchscreen descriptors."""

from touchcal.input.parser import parseResult_build, screen_parse, touchscreen_parse

__all__ = [
    "parseResult_build",
    "screen_parse",
    "touchscreen_parse",
]
