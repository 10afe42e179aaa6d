"""Configuration error types."""

from __future__ import annotations

from pathlib import Path


class ConfigError(ValueError):
    """A configuration value could not be parsed.

    Attributes:
        value: The raw value as given by the user
        expected: Human-readable description of the accepted forms
        field: Name of the offending field ("" when not known)
    """

    def __init__(self, value: str, expected: str, field: str = "") -> None:
        self.value = value
        self.expected = expected
        self.field = field
        super().__init__(self._format())

    def _format(self) -> str:
        message = f"invalid value {self.value!r}, expected {self.expected}"
        if self.field:
            return f"{self.field}: {message}"
        return message


class InvalidBoolValue(ConfigError):
    """Value is not one of 0, false, 1, true."""


class InvalidColorValue(ConfigError):
    """Value is not a named color, hex color or ANSI number."""


class InvalidHexDigit(ConfigError):
    """A correctly shaped hex color contains a non-hex digit."""


class NumericOverflow(ConfigError):
    """An ANSI color number does not fit in 0..255."""


class ConfigFileError(ConfigError):
    """A configuration file could not be turned into raw key/value pairs."""

    def __init__(self, path: Path, reason: str, field: str = "") -> None:
        self.path = path
        super().__init__(str(path), reason, field=field)

    def _format(self) -> str:
        if self.field:
            return f"{self.path}: {self.field}: {self.expected}"
        return f"{self.path}: {self.expected}"
