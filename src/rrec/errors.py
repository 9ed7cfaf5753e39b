"""
Errors raised by the rrec package.

I/O failures are never wrapped: whatever the line source raises
(OSError and friends) reaches the caller unchanged.
"""


class RecError(Exception):
    """Base error for this package."""


class RecParseError(RecError):
    """
    Raised when a logical line cannot be placed into a record.

    Properties:
        line: The offending logical line (leading spaces already stripped)
    """

    message = "Error parsing records"

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"{self.message}: {line}")


class BadContLineError(RecParseError):
    """Raised when a `+` continuation line has no field to continue."""

    message = "Found cont line in nonsensical place"


class InvalidLineError(RecParseError):
    """Raised when a line is not a comment, blank, continuation or field."""

    message = "Invalid line"


class MissingFieldError(RecError, KeyError):
    """Raised by Record.get when no field has the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"No field named {self.name!r}"


class TemplateError(RecError):
    """Raised when a template cannot be loaded or rendered."""
