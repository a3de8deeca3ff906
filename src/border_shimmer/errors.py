"""
Domain errors

Startup errors (config, colors, track lengths) are fatal and end the process.
SinkInvocationError is raised per frame and only ever logged by FrameDriver.
"""

from typing import Optional


class ShimmerError(Exception):
    """Base class for domain-specific errors"""
    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict] = None
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigParseError(ShimmerError):
    """Malformed or unreadable configuration"""
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(
            code="CONFIG_PARSE_ERROR",
            message=message,
            details={"path": path} if path else None
        )


class ColorFormatError(ShimmerError):
    """Base class for color string errors"""


class InvalidColorFormatError(ColorFormatError):
    """Color string is not 8 hex digits long"""
    def __init__(self, value: str):
        super().__init__(
            code="INVALID_FORMAT",
            message=f"invalid color format: {value}",
            details={"value": value}
        )


class InvalidColorValueError(ColorFormatError):
    """Color string has the right length but is not hexadecimal"""
    def __init__(self, value: str):
        super().__init__(
            code="INVALID_VALUE",
            message=f"invalid color value: {value}",
            details={"value": value}
        )


class TrackLengthMismatchError(ShimmerError):
    """Active and inactive tracks differ in length"""
    def __init__(self, active_count: int, inactive_count: int):
        super().__init__(
            code="TRACK_LENGTH_MISMATCH",
            message="the number of inactive colors must match the number of active colors",
            details={"active": active_count, "inactive": inactive_count}
        )


class SinkInvocationError(ShimmerError):
    """External border command failed or could not be started"""
    def __init__(self, command: str, message: str, returncode: Optional[int] = None):
        super().__init__(
            code="SINK_INVOCATION_ERROR",
            message=message,
            details={"command": command, "returncode": returncode}
        )
        self.returncode = returncode
