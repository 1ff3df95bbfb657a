"""Satisfiability of equality and inequality constraints via a disjoint-set forest."""

from equation_validator.checker import check_constraints, is_satisfiable
from equation_validator.disjoint_set import DisjointSet, ElementRef
from equation_validator.errors import (
    ConstraintFileError,
    EquationValidatorError,
    MalformedConstraintError,
    UnknownElementError,
)
from equation_validator.models import Constraint, ConstraintKind, ValidationReport, Verdict

__all__ = [
    "Constraint",
    "ConstraintFileError",
    "ConstraintKind",
    "DisjointSet",
    "ElementRef",
    "EquationValidatorError",
    "MalformedConstraintError",
    "UnknownElementError",
    "ValidationReport",
    "Verdict",
    "check_constraints",
    "is_satisfiable",
]
