"""Exception classes for robofont."""

from typing import Iterable, Optional


class RobofontError(Exception):
    """Base exception class for robofont."""
    pass


class FontParseError(RobofontError):
    """Raised when a font definition cannot be turned into a glyph table."""

    def __init__(self, message: str, line_number: Optional[int] = None, token: Optional[str] = None):
        self.line_number = line_number
        self.token = token
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class FontNotFoundError(RobofontError, LookupError):
    """Raised when a named font or a font file does not exist."""

    def __init__(self, name: str, available: Optional[Iterable[str]] = None):
        self.name = name
        message = f"Font not found: {name}"
        if available:
            message += f" (available: {', '.join(available)})"
        super().__init__(message)


class ConfigError(RobofontError):
    """Raised when there is a configuration error."""
    pass
