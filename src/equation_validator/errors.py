"""Exceptions raised by the engine and the constraint driver."""

from pathlib import Path


class EquationValidatorError(Exception):
    """Base class for every error this package raises."""


class UnknownElementError(EquationValidatorError, KeyError):
    """Raised when a query names an element that was never created.

    A verdict cannot be computed once this is raised: it is neither
    "valid" nor "invalid".
    """

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"unknown identifier {self.name!r}"


class MalformedConstraintError(EquationValidatorError, ValueError):
    """Raised when a line does not split into exactly two operands."""

    def __init__(self, line: str, operator: str, line_number: int | None = None) -> None:
        self.line = line
        self.operator = operator
        self.line_number = line_number
        super().__init__(line)

    def __str__(self) -> str:
        where = f"line {self.line_number}: " if self.line_number is not None else ""
        return f"{where}expected 'left{self.operator}right', got {self.line!r}"


class ConstraintFileError(EquationValidatorError):
    """Raised when a constraint file cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read {path}: {reason}")
