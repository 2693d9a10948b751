"""Typed exceptions for configuration and I/O formats."""


class ConfigError(ValueError):
    """Base class for configuration related errors."""


class UnknownOptionError(ConfigError):
    """Raised when an option is set by a name the converter does not know."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown option name: '{name}'")
        self.name = name


class IOFormatError(ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no reader or writer is registered for a file format."""


class SpanError(ValueError):
    """Base class for span related errors."""


class OverlapError(SpanError):
    """Raised when two replacement spans overlap."""


class SpanOutOfBoundsError(SpanError):
    """Raised when span coordinates are invalid or out of bounds."""
