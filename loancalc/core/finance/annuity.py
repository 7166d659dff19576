# loancalc/core/finance/annuity.py

from __future__ import annotations

import math

from loancalc.core.errors import InvalidLoanTermsError
from loancalc.schemas.models import LoanResult

MONTHS_PER_YEAR = 12


def monthly_rate(annual_rate_percent: float) -> float:
    """Nominal yearly percent -> monthly fraction (percent-to-fraction and annual-to-monthly in one step)."""
    return annual_rate_percent / 1200.0


def amortized_fraction(rate: float, term_months: float) -> float:
    """
    1 - (1 + r) ** -n, evaluated as -expm1(-n * log1p(r)).

    Stays accurate for rates so small that 1 + r rounds to 1.0, where the
    direct form collapses to 0.

    Raises:
        InvalidLoanTermsError: if 1 + r is not positive (the power is undefined for fractional n).
    """
    if 1.0 + rate <= 0:
        raise InvalidLoanTermsError(f"monthly rate {rate!r} is not above -100%")
    return -math.expm1(-term_months * math.log1p(rate))


def _check_terms(amount: float, term_months: float, what: str) -> None:
    if amount <= 0:
        raise InvalidLoanTermsError(f"{what} must be > 0")
    if term_months <= 0:
        raise InvalidLoanTermsError("term_months must be > 0")


def _result(principal: float, payment: float, annual_rate_percent: float, term_months: float) -> LoanResult:
    total_paid = payment * term_months
    interest_paid = total_paid - principal
    if not all(math.isfinite(v) for v in (principal, payment, total_paid, interest_paid)):
        raise InvalidLoanTermsError(
            f"amount too large: {annual_rate_percent!r}% over {term_months!r} months overflows a float"
        )
    return LoanResult(
        principal=principal,
        monthly_payment=payment,
        annual_rate_percent=annual_rate_percent,
        term_months=term_months,
        total_paid=total_paid,
        interest_paid=interest_paid,
        interest_paid_percent=interest_paid / principal * 100.0,
        break_even_years=(principal / payment) / MONTHS_PER_YEAR,
    )


def payment_from_principal(principal: float, annual_rate_percent: float, term_months: float) -> LoanResult:
    """
    Constant monthly payment for a fully-amortizing fixed-rate loan.

    Formula (annuity, discount-factor form):
        PMT = P * r / (1 - (1 + r) ** -n)

    Where:
        P = principal
        r = monthly rate = annual_rate_percent / 1200
        n = term in months

    Args:
        principal: Loan amount (> 0).
        annual_rate_percent: Nominal yearly rate in percent (7.0 = 7%).
        term_months: Number of monthly payments (> 0).

    Returns:
        LoanResult with the payment and the totals derived from it.

    Raises:
        InvalidLoanTermsError: non-positive amount or term, a rate at or below -1200%,
            or figures that overflow a float.

    Notes:
        - If the rate is 0 the closed form is 0/0; the payment is principal / n instead.
    """
    _check_terms(principal, term_months, "principal")

    r = monthly_rate(annual_rate_percent)
    if r == 0:
        payment = principal / term_months
    else:
        frac = amortized_fraction(r, term_months)
        if frac == 0:
            raise InvalidLoanTermsError(f"rate {annual_rate_percent!r}% does not amortize over {term_months!r} months")
        payment = principal * r / frac

    return _result(principal, payment, annual_rate_percent, term_months)


def principal_from_payment(payment: float, term_months: float, annual_rate_percent: float) -> LoanResult:
    """
    Loan amount a constant monthly payment retires; the inverse of payment_from_principal().

        P = PMT * (1 - (1 + r) ** -n) / r

    A zero rate reduces to P = PMT * n.
    """
    _check_terms(payment, term_months, "payment")

    r = monthly_rate(annual_rate_percent)
    if r == 0:
        principal = payment * term_months
    else:
        principal = payment * amortized_fraction(r, term_months) / r
    if principal <= 0:
        raise InvalidLoanTermsError(f"rate {annual_rate_percent!r}% does not amortize over {term_months!r} months")

    return _result(principal, payment, annual_rate_percent, term_months)
