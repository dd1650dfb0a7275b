# -*- coding: utf-8 -*-
"""
Common exceptions for the business objects layer.
"""


class SchemaError(ValueError):
    """Raised when the food database file cannot be turned into a catalog."""


class DatabaseIOError(SchemaError):
    """Raised when the food database file cannot be opened or read."""


class MalformedDatabaseError(SchemaError):
    """
    Raised when a data line does not have exactly three fields.

    Attributes
    ----------
    line_number : int
        1-based line number in the source file.
    field_count : int
        Number of fields found on that line.
    line : str
        The offending line, without its line terminator.
    """

    def __init__(self, path: str, line_number: int, field_count: int, line: str) -> None:
        super().__init__(
            f"{path}:{line_number}: invalid field count; want 3 but got {field_count} "
            f"(line: {line!r})"
        )
        self.line_number = line_number
        self.field_count = field_count
        self.line = line


class StateValidationError(ValueError):
    """Raised when the in-memory state violates domain constraints."""


class PreconditionViolation(StateValidationError):
    """Raised when a solver is called with input it is not defined for."""
