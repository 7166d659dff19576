# loancalc/reports/table.py
from __future__ import annotations

from collections.abc import Iterator

from loancalc.schemas.models import LoanResult, Solution, SolveMode

FIELD_WIDTH = 12
SEPARATOR = "\t"


def _field(label: str, value: float) -> str:
    """
    Render one labeled value: left-justified, FIELD_WIDTH wide, two decimals.

    Example:
        ("Monthly", 772.2467) -> "Monthly: 772.25      "
    """
    return f"{label}: {value:<{FIELD_WIDTH}.2f}"


def format_row(result: LoanResult, mode: SolveMode) -> str:
    """
    Render one result as a tab-separated line.

    The leading field is the solved amount ("Monthly" or "Principal"). "Num Payments"
    appears only when the term was swept and "Rate" only when the rate was swept.
    """
    if mode.solves_payment:
        fields = [_field("Monthly", result.monthly_payment)]
    else:
        fields = [_field("Principal", result.principal)]

    # in the two-dimensional sweep the term is printed once per group instead
    if mode.sweeps_term and not mode.sweeps_rate:
        fields.append(_field("Num Payments", result.term_months))
    if mode.sweeps_rate:
        fields.append(_field("Rate", result.annual_rate_percent))

    fields += [
        _field("Interest", result.interest_paid),
        _field("Total", result.total_paid),
        _field("Interest%", result.interest_paid_percent),
        _field("Breakeven", result.break_even_years),
    ]
    return SEPARATOR.join(fields)


def format_term_header(term_months: float) -> str:
    return _field("Num Payments", term_months)


def render_lines(solution: Solution) -> Iterator[str]:
    """Yield every output line for a solution; groups get a header and a trailing blank line."""
    for row in solution.rows:
        yield format_row(row, solution.mode)
    for group in solution.groups:
        yield format_term_header(group.term_months)
        for row in group.rows:
            yield format_row(row, solution.mode)
        yield ""


def render(solution: Solution) -> str:
    return "\n".join(render_lines(solution)) + "\n"


def usage_text() -> str:
    return (
        "\n"
        "Usage: loan -p principal [-i interest_rate | -t loan_period]\n"
        "       loan -m payment [-i interest_rate | -t loan_period]\n"
        "Example: loan -i 7.0 -p 39000.00 -t 60\n"
        "\n"
        "-i  simple yearly interest rate (percent)\n"
        "-p  principal amount of loan\n"
        "-t  loan period in months (ie. number of payments)\n"
        "-m  monthly payment\n"
        "-h  print definitions of the output columns\n"
        "-v  verbose (debug) logging on stderr\n"
        "\n"
        "Ordering of arguments does not matter.\n"
        "Unspecified arguments will be solved if possible.\n"
    )


def definitions_text() -> str:
    return (
        "Definitions:\n"
        "Break Even Years = number of years to pay off principal if payment went to principal alone.\n"
        "Interest% = Total interest paid as a percentage of Principal.\n"
    )
