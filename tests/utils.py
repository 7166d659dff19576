# tests/utils.py
"""
Single source of truth for test data and factories.
Update values here to cascade across the test suite.
"""

from __future__ import annotations

from typing import Any

from loancalc.schemas.models import LoanInputs

# -----------------------------
# Global defaults (edit once)
# -----------------------------

# The classic example from the usage text: loan -i 7.0 -p 39000.00 -t 60
EXAMPLE_PRINCIPAL = 39_000.0
EXAMPLE_RATE = 7.0
EXAMPLE_TERM = 60.0
EXAMPLE_PAYMENT = 772.246743  # 39000 * r / (1 - (1 + r) ** -60), r = 7 / 1200
EXAMPLE_TOTAL = 46_334.80
EXAMPLE_INTEREST = 7_334.80

TERM_COUNT = 30  # 12..360 step 12
RATE_COUNT = 25  # 1..25 step 1


def make_inputs(**overrides: Any) -> LoanInputs:
    """LoanInputs with every field unset unless overridden."""
    base: dict[str, Any] = {
        "principal": None,
        "payment": None,
        "annual_rate_percent": None,
        "term_months": None,
    }
    base.update(overrides)
    return LoanInputs(**base)


def reference_payment(principal: float, annual_rate_percent: float, term_months: float) -> float:
    """Growth-factor form of the annuity payment, independent of the code under test."""
    r = annual_rate_percent / 1200.0
    if r == 0:
        return principal / term_months
    g = (1 + r) ** term_months
    return principal * r * g / (g - 1)
