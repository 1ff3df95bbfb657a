"""Satisfiability check of equality and inequality constraints."""

from collections.abc import Iterable, Sequence

from equation_validator.disjoint_set import DisjointSet
from equation_validator.logging import get_logger
from equation_validator.models import Constraint, ConstraintKind, ValidationReport, Verdict

logger = get_logger(__name__)

Pair = tuple[str, str] | Constraint


def _as_constraint(pair: Pair, kind: ConstraintKind) -> Constraint:
    if isinstance(pair, Constraint):
        return pair
    left, right = pair
    return Constraint(left=left, right=right, kind=kind)


def build_classes(equalities: Iterable[Pair], *, declared: Iterable[str] = ()) -> DisjointSet:
    """Build the forest induced by ``equalities``.

    Names in ``declared`` are created as singletons first, so they can be
    queried even if no equality mentions them.

    Raises:
        pydantic.ValidationError: If an equality operand is empty or not a string.
    """
    classes = DisjointSet()
    for name in declared:
        classes.find_or_create(name)
    for pair in equalities:
        left, right = _as_constraint(pair, ConstraintKind.EQUAL).operands
        classes.union(classes.find_or_create(left), classes.find_or_create(right))
    return classes


def find_violations(classes: DisjointSet, inequalities: Iterable[Pair]) -> list[Constraint]:
    """Return every inequality whose operands are in the same class.

    Raises:
        UnknownElementError: If an operand was never created in ``classes``.
    """
    violations: list[Constraint] = []
    for pair in inequalities:
        constraint = _as_constraint(pair, ConstraintKind.NOT_EQUAL)
        left = classes.lookup(constraint.left)
        right = classes.lookup(constraint.right)
        if classes.same_class(left, right):
            logger.info(
                "inequality_contradicted",
                constraint=str(constraint),
                line_number=constraint.line_number,
            )
            violations.append(constraint)
    return violations


def check_constraints(
    equalities: Sequence[Pair],
    inequalities: Sequence[Pair],
    *,
    declared: Iterable[str] = (),
) -> ValidationReport:
    """Decide whether the constraints can all hold at once.

    Every equality is merged before any inequality is queried.

    Args:
        equalities: Pairs declared equal.
        inequalities: Pairs declared unequal. Both operands must appear in
            ``equalities`` or ``declared``.
        declared: Extra names to create as singleton classes.

    Returns:
        Report whose verdict is INVALID iff at least one inequality is
        contradicted by the transitive closure of the equalities.

    Raises:
        UnknownElementError: If an inequality names an unknown identifier.
            No verdict is produced in that case.
    """
    logger.info(
        "check_started",
        equalities=len(equalities),
        inequalities=len(inequalities),
    )
    classes = build_classes(equalities, declared=declared)
    violations = find_violations(classes, inequalities)

    report = ValidationReport(
        verdict=Verdict.INVALID if violations else Verdict.VALID,
        violations=tuple(violations),
        element_count=len(classes),
        class_count=classes.class_count,
    )
    logger.info(
        "check_complete",
        verdict=report.verdict.value,
        violations=len(report.violations),
        elements=report.element_count,
        classes=report.class_count,
    )
    return report


def is_satisfiable(
    equalities: Sequence[Pair],
    inequalities: Sequence[Pair],
    *,
    declared: Iterable[str] = (),
) -> bool:
    """Return True if no inequality contradicts the equalities."""
    return check_constraints(equalities, inequalities, declared=declared).is_valid
