# tests/unit/test_annuity.py
import pytest

from loancalc.core.errors import InvalidLoanTermsError
from loancalc.core.finance.annuity import (
    amortized_fraction,
    monthly_rate,
    payment_from_principal,
    principal_from_payment,
)
from tests.utils import (
    EXAMPLE_INTEREST,
    EXAMPLE_PAYMENT,
    EXAMPLE_PRINCIPAL,
    EXAMPLE_RATE,
    EXAMPLE_TERM,
    EXAMPLE_TOTAL,
    reference_payment,
)


def test_monthly_rate_is_percent_over_1200():
    assert monthly_rate(12.0) == pytest.approx(0.01)
    assert monthly_rate(0.0) == 0.0


def test_amortized_fraction_basic():
    assert amortized_fraction(0.01, 12) == pytest.approx(1 - 1.01**-12, rel=1e-12)
    assert amortized_fraction(0.0, 360) == 0.0


def test_amortized_fraction_keeps_precision_for_tiny_rates():
    r = 1e-14 / 1200
    assert 1.0 + r == 1.0
    assert amortized_fraction(r, 12) == pytest.approx(12 * r, rel=1e-9)


def test_amortized_fraction_rejects_rate_at_or_below_minus_one():
    with pytest.raises(InvalidLoanTermsError):
        amortized_fraction(-1.0, 12)


def test_example_loan_39000_at_7_for_60_months():
    res = payment_from_principal(EXAMPLE_PRINCIPAL, EXAMPLE_RATE, EXAMPLE_TERM)
    assert res.monthly_payment == pytest.approx(EXAMPLE_PAYMENT, abs=1e-3)
    assert round(res.monthly_payment, 2) == 772.25
    assert res.total_paid == pytest.approx(EXAMPLE_TOTAL, abs=0.01)
    assert res.interest_paid == pytest.approx(EXAMPLE_INTEREST, abs=0.01)
    assert res.interest_paid_percent == pytest.approx(EXAMPLE_INTEREST / EXAMPLE_PRINCIPAL * 100, abs=1e-3)
    assert res.break_even_years == pytest.approx(EXAMPLE_PRINCIPAL / res.monthly_payment / 12, rel=1e-12)


def test_derived_totals_are_consistent():
    res = payment_from_principal(250_000, 6.5, 360)
    assert res.total_paid == pytest.approx(res.monthly_payment * 360, rel=1e-12)
    assert res.interest_paid == pytest.approx(res.total_paid - 250_000, rel=1e-12)
    assert res.principal == 250_000
    assert res.annual_rate_percent == 6.5
    assert res.term_months == 360


@pytest.mark.parametrize(
    "principal,rate,term",
    [(300_000, 6.0, 360), (12_000, 1.0, 12), (5_000, 25.0, 24), (80_000, 3.25, 180)],
)
def test_matches_growth_factor_formula(principal, rate, term):
    res = payment_from_principal(principal, rate, term)
    assert res.monthly_payment == pytest.approx(reference_payment(principal, rate, term), rel=1e-10)


def test_zero_rate_is_linear():
    res = payment_from_principal(12_000, 0, 12)
    assert res.monthly_payment == 1000.00
    assert res.interest_paid == 0.0
    assert res.interest_paid_percent == 0.0
    assert res.break_even_years == pytest.approx(1.0)


def test_zero_rate_principal_from_payment():
    res = principal_from_payment(500, 60, 0)
    assert res.principal == pytest.approx(30_000)
    assert res.interest_paid == pytest.approx(0.0)


@pytest.mark.parametrize("rate", [0.5, 1.0, 7.0, 12.5, 25.0, 30.0])
@pytest.mark.parametrize("term", [1, 12, 60, 360, 480])
def test_round_trip_recovers_principal(rate, term):
    principal = 123_456.78
    pay = payment_from_principal(principal, rate, term)
    back = principal_from_payment(pay.monthly_payment, term, rate)
    assert back.principal == pytest.approx(principal, rel=1e-6)
    assert back.total_paid == pytest.approx(pay.total_paid, rel=1e-9)


def test_payment_strictly_increasing_in_rate():
    payments = [payment_from_principal(100_000, r / 2, 360).monthly_payment for r in range(0, 61)]
    assert all(a < b for a, b in zip(payments, payments[1:]))


@pytest.mark.parametrize("rate", [0.0, 4.0, 18.0])
def test_payment_strictly_decreasing_in_term(rate):
    payments = [payment_from_principal(100_000, rate, n).monthly_payment for n in range(12, 361, 12)]
    assert all(a > b for a, b in zip(payments, payments[1:]))


def test_principal_strictly_increasing_in_term():
    principals = [principal_from_payment(500, n, 6.0).principal for n in range(12, 361, 12)]
    assert all(a < b for a, b in zip(principals, principals[1:]))


@pytest.mark.parametrize(
    "call",
    [
        lambda: payment_from_principal(0, 5.0, 12),
        lambda: payment_from_principal(-100, 5.0, 12),
        lambda: payment_from_principal(1000, 5.0, 0),
        lambda: principal_from_payment(0, 12, 5.0),
        lambda: principal_from_payment(100, -12, 5.0),
    ],
)
def test_invalid_terms_raise_value_error(call):
    with pytest.raises(ValueError):
        call()


@pytest.mark.parametrize("rate", [1e-14, 1e-9, 1e-6])
def test_tiny_positive_rate_approaches_linear(rate):
    pay = payment_from_principal(12_000, rate, 12)
    assert pay.monthly_payment == pytest.approx(1000.0, rel=1e-6)
    back = principal_from_payment(1000, 12, rate)
    assert back.principal == pytest.approx(12_000.0, rel=1e-6)
    assert back.interest_paid >= -1e-6


def test_overflowing_amount_raises_instead_of_printing_inf():
    with pytest.raises(InvalidLoanTermsError, match="too large"):
        principal_from_payment(1e308, 360, 1.0)
    with pytest.raises(InvalidLoanTermsError, match="too large"):
        payment_from_principal(1e308, 25.0, 360)
