"""Pydantic models for constraints and verdicts."""

from enum import StrEnum
from typing import Final

from pydantic import BaseModel, ConfigDict, Field


class ConstraintKind(StrEnum):
    """The two relations a constraint can assert."""

    EQUAL = "equal"
    NOT_EQUAL = "not_equal"

    @property
    def default_operator(self) -> str:
        """Operator used in constraint files unless overridden by settings."""
        return DEFAULT_OPERATORS[self]


DEFAULT_OPERATORS: Final[dict[ConstraintKind, str]] = {
    ConstraintKind.EQUAL: "=",
    ConstraintKind.NOT_EQUAL: "!=",
}


class Verdict(StrEnum):
    """Outcome of checking a constraint set."""

    VALID = "valid"
    INVALID = "invalid"


class Constraint(BaseModel):
    """A single equality or inequality between two identifiers."""

    model_config = ConfigDict(frozen=True)

    left: str = Field(min_length=1)
    right: str = Field(min_length=1)
    kind: ConstraintKind
    line_number: int | None = Field(default=None, ge=1, description="1-based source line")

    @property
    def operands(self) -> tuple[str, str]:
        return (self.left, self.right)

    def render(self, operator: str | None = None) -> str:
        """Render back to constraint-file syntax, e.g. ``A!=C``."""
        return f"{self.left}{operator or self.kind.default_operator}{self.right}"

    def __str__(self) -> str:
        return self.render()


class ValidationReport(BaseModel):
    """Result of a full verdict pass."""

    model_config = ConfigDict(frozen=True)

    verdict: Verdict
    violations: tuple[Constraint, ...] = Field(
        default=(),
        description="Inequalities contradicted by the equalities, in input order",
    )
    element_count: int = Field(default=0, ge=0)
    class_count: int = Field(default=0, ge=0)

    @property
    def is_valid(self) -> bool:
        return self.verdict is Verdict.VALID
