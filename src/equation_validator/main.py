"""Command-line entry point: check an equalities file against an inequalities file."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import Final

from pydantic import ValidationError

from equation_validator.checker import check_constraints
from equation_validator.config import Settings
from equation_validator.errors import (
    ConstraintFileError,
    MalformedConstraintError,
    UnknownElementError,
)
from equation_validator.logging import configure_logging, get_logger
from equation_validator.models import ConstraintKind
from equation_validator.parsing import read_constraint_file

logger = get_logger(__name__)

EXIT_OK: Final = 0
EXIT_INPUT_ERROR: Final = 1
EXIT_UNDETERMINED: Final = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="equation-validator",
        description="Check whether = and != constraints over identifiers are jointly satisfiable",
    )
    parser.add_argument("equalities", help="File with one 'A=B' constraint per line")
    parser.add_argument("inequalities", help="File with one 'A!=B' constraint per line")
    parser.add_argument(
        "--declare",
        action="append",
        default=[],
        metavar="NAME",
        help="Declare an identifier that no equality mentions (repeatable)",
    )
    parser.add_argument(
        "--skip-malformed",
        action="store_true",
        help="Skip lines that do not split into two operands instead of failing",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit JSON logs on stderr",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug-level logging, including every union decision",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point. Prints the verdict on stdout and returns the exit code."""
    args = build_parser().parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as e:
        print(f"error: invalid settings. {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    if args.skip_malformed:
        settings = settings.model_copy(update={"skip_malformed": True})

    configure_logging(
        json_output=args.json_logs or settings.json_logs,
        level=logging.DEBUG if args.debug else logging.INFO,
    )

    try:
        equalities = read_constraint_file(args.equalities, ConstraintKind.EQUAL, settings=settings)
        inequalities = read_constraint_file(
            args.inequalities, ConstraintKind.NOT_EQUAL, settings=settings
        )
    except (ConstraintFileError, MalformedConstraintError) as e:
        logger.error("constraint_input_failed", error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    try:
        report = check_constraints(equalities, inequalities, declared=args.declare)
    except UnknownElementError as e:
        logger.error("verdict_undetermined", error=str(e))
        print(f"could not determine validity: {e}", file=sys.stderr)
        return EXIT_UNDETERMINED

    print(report.verdict.value)
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
