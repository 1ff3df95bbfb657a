"""Parsing of constraint lines and constraint files."""

from collections.abc import Iterable
from pathlib import Path

from equation_validator.config import Settings
from equation_validator.errors import ConstraintFileError, MalformedConstraintError
from equation_validator.logging import get_logger
from equation_validator.models import Constraint, ConstraintKind

logger = get_logger(__name__)


def parse_constraint(
    line: str,
    kind: ConstraintKind,
    *,
    operator: str | None = None,
    shadowing: Iterable[str] = (),
    strip_whitespace: bool = True,
    line_number: int | None = None,
) -> Constraint:
    """Split one line into a two-operand constraint.

    Args:
        line: Raw line without its trailing newline (e.g. "A=B").
        kind: Relation the line asserts.
        operator: Separator to split on. Defaults to the kind's default operator.
        shadowing: Longer operators that contain ``operator``; a line holding
            one of them belongs to another relation and is rejected
            (so "A!=B" is never read as the equality "A!" = "B").
        strip_whitespace: Trim whitespace around each operand.
        line_number: 1-based position of the line, for error messages.

    Returns:
        The parsed constraint.

    Raises:
        MalformedConstraintError: If the line does not yield exactly two
            non-empty operands.
    """
    op = operator or kind.default_operator
    if any(other in line for other in shadowing):
        raise MalformedConstraintError(line, op, line_number)

    parts = line.split(op)
    if len(parts) != 2:
        raise MalformedConstraintError(line, op, line_number)

    left, right = parts
    if strip_whitespace:
        left, right = left.strip(), right.strip()
    if not left or not right:
        raise MalformedConstraintError(line, op, line_number)

    return Constraint(left=left, right=right, kind=kind, line_number=line_number)


def parse_constraints(
    lines: Iterable[str],
    kind: ConstraintKind,
    *,
    settings: Settings | None = None,
) -> list[Constraint]:
    """Parse every constraint line, skipping blank lines and comments.

    A line whose first non-blank text is ``settings.comment_prefix`` is a
    comment, so with the default ``#`` no identifier can start with ``#``.
    Set an empty prefix to read every non-blank line as a constraint.

    Malformed lines raise unless ``settings.skip_malformed`` is set, in which
    case they are logged and dropped.
    """
    settings = settings or Settings()
    comment_prefix = settings.comment_prefix
    operator = settings.operator_for(kind)
    shadowing = [
        other
        for other in (settings.equality_operator, settings.inequality_operator)
        if other != operator and operator in other
    ]

    constraints: list[Constraint] = []
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        stripped = line.strip()
        if not stripped or (comment_prefix and stripped.startswith(comment_prefix)):
            continue
        try:
            constraint = parse_constraint(
                line,
                kind,
                operator=operator,
                shadowing=shadowing,
                strip_whitespace=settings.strip_whitespace,
                line_number=line_number,
            )
        except MalformedConstraintError as e:
            if not settings.skip_malformed:
                raise
            logger.warning("malformed_constraint_skipped", kind=kind.value, error=str(e))
            continue
        constraints.append(constraint)

    logger.debug("constraints_parsed", kind=kind.value, count=len(constraints))
    return constraints


def read_constraint_file(
    path: str | Path,
    kind: ConstraintKind,
    *,
    settings: Settings | None = None,
) -> list[Constraint]:
    """Read and parse a constraint file.

    Raises:
        ConstraintFileError: If the file is missing, unreadable or not valid text.
        MalformedConstraintError: If a line is malformed and skipping is disabled.
    """
    settings = settings or Settings()
    path = Path(path)
    try:
        text = path.read_text(encoding=settings.file_encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise ConstraintFileError(path, str(e)) from e

    logger.info("reading_constraints", path=str(path), kind=kind.value)
    return parse_constraints(text.split("\n"), kind, settings=settings)
