"""Validation errors raised while parsing calibration input"""


class CalibrationError(ValueError):
    """Base class for all fatal touchcal input errors"""


class InvalidScreenFormatError(CalibrationError):
    """Screen value is neither a preset nor `WxH`"""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid screen format or preset: {value}")


class InvalidTouchscreenArityError(CalibrationError):
    """Fewer than the mandatory touchscreen tokens were supplied"""

    def __init__(self, given: int, required: int) -> None:
        self.given = given
        self.required = required
        super().__init__(
            f"Not enough touchscreen arguments: got {given}, need at least {required}"
        )


class InvalidRotationError(CalibrationError):
    """Rotation token is numeric but not one of the supported angles"""

    def __init__(self, rotation: int) -> None:
        self.rotation = rotation
        super().__init__(
            f"Invalid rotation value: {rotation} (must be 0, 90, 180, or 270)"
        )


class InvalidTouchscreenParametersError(CalibrationError):
    """A touchscreen token could not be converted to its numeric field"""

    def __init__(self, field_name: str, token: str) -> None:
        self.field_name = field_name
        self.token = token
        super().__init__(f"Invalid touchscreen parameters: {field_name}={token!r}")


class UnknownOptionError(CalibrationError):
    """Unrecognized flag or stray argument on the command line"""
