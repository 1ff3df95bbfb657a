"""Application configuration using pydantic-settings."""

import codecs
from typing import Self

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from equation_validator.models import ConstraintKind


class Settings(BaseSettings):
    """Settings for reading constraint files, loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EQUATION_VALIDATOR_",
        extra="ignore",
    )

    # Constraint file syntax
    equality_operator: str = Field(
        default="=",
        min_length=1,
        description="Separator between operands in the equalities file",
    )
    inequality_operator: str = Field(
        default="!=",
        min_length=1,
        description="Separator between operands in the inequalities file",
    )
    strip_whitespace: bool = Field(
        default=True,
        description="Trim whitespace around each operand",
    )
    skip_malformed: bool = Field(
        default=False,
        description="Log and skip lines that do not split into two operands instead of failing",
    )
    comment_prefix: str = Field(
        default="#",
        description="Lines starting with this prefix are skipped; empty disables comments",
    )
    file_encoding: str = Field(default="utf-8")

    # Logging
    json_logs: bool = Field(
        default=False,
        description="Emit JSON logs on stderr instead of console output",
    )

    def operator_for(self, kind: ConstraintKind) -> str:
        """Return the operator that separates operands for ``kind``."""
        if kind is ConstraintKind.EQUAL:
            return self.equality_operator
        return self.inequality_operator

    @field_validator("file_encoding")
    @classmethod
    def check_encoding(cls, v: str) -> str:
        """Reject encodings Python has no codec for."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"unknown encoding: {v}") from None
        return v

    @model_validator(mode="after")
    def check_operators_differ(self) -> Self:
        """Ensure the two files cannot be parsed with the same operator."""
        if self.equality_operator == self.inequality_operator:
            raise ValueError("equality_operator and inequality_operator must differ")
        return self
