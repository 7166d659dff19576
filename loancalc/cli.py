# loancalc/cli.py
"""
Command-line entry point.

    loan -p 39000 -i 7.0 -t 60     # monthly payment for one loan
    loan -p 39000 -i 7.0           # ... for every term 12..360 months
    loan -m 500 -t 60              # principal a 500/month payment retires at rates 1..25%
    loan -m 500                    # ... for every term and every rate

Exit status: 0 when rows were printed, 1 for a missing or conflicting -p/-m
or figures too large to compute, 2 when a flag's value is not a finite number.
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from collections.abc import Sequence

from loancalc.core.debug_log import configure_logging
from loancalc.core.errors import USAGE_ERRORS, ConflictingTargetsError, LoanCalcError
from loancalc.core.solver import solve
from loancalc.reports.table import definitions_text, render, usage_text
from loancalc.schemas.models import LoanInputs

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1


def _number(val: str) -> float:
    try:
        out = float(val)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {val!r}") from None
    if not math.isfinite(out):
        raise argparse.ArgumentTypeError(f"not a finite number: {val!r}")
    return out


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="loan",
        description="Amortized loan calculator: solves for whichever inputs are not given.",
        add_help=False,
    )
    p.add_argument("-p", dest="principal", type=_number, default=None, metavar="AMOUNT", help="Principal amount of the loan.")
    p.add_argument("-m", dest="payment", type=_number, default=None, metavar="AMOUNT", help="Monthly payment.")
    p.add_argument(
        "-i", dest="rate", type=_number, default=None, metavar="PERCENT", help="Simple yearly interest rate in percent."
    )
    p.add_argument(
        "-t", dest="term", type=_number, default=None, metavar="MONTHS", help="Loan period in months (number of payments)."
    )
    p.add_argument("-h", "--help", dest="definitions", action="store_true", help="Print column definitions.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr.")
    return p


def inputs_from_args(args: argparse.Namespace) -> LoanInputs:
    return LoanInputs(
        principal=args.principal,
        payment=args.payment,
        annual_rate_percent=args.rate,
        term_months=args.term,
    )


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        print(usage_text())
        return EXIT_USAGE

    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    if args.definitions:
        print(definitions_text())

    inputs = inputs_from_args(args)
    logger.debug("inputs: %s", inputs.model_dump())

    try:
        solution = solve(inputs)
    except USAGE_ERRORS as exc:
        logger.debug("usage error: %s", exc)
        print(usage_text())
        if isinstance(exc, ConflictingTargetsError):
            print(exc)
        return EXIT_USAGE
    except LoanCalcError as exc:
        logger.debug("cannot compute: %s", exc)
        print(f"loan: error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    sys.stdout.write(render(solution))
    logger.debug("%s: %d rows", solution.mode.value, solution.row_count)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
