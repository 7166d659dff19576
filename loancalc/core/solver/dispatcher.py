# loancalc/core/solver/dispatcher.py
"""
Solve-for-missing-inputs dispatcher.

Given which of {principal, payment, rate, term} were supplied, pick one of eight
modes and run it:

    target     term   rate   mode
    ---------  -----  -----  --------------------------
    principal  yes    yes    PAYMENT                   (1 row)
    principal  no     yes    PAYMENT_BY_TERM           (30 rows)
    principal  yes    no     PAYMENT_BY_RATE           (25 rows)
    principal  no     no     PAYMENT_BY_TERM_AND_RATE  (30 groups x 25 rows)

The payment branch mirrors this with the inverse formula (PRINCIPAL_*).
Sweep ranges are fixed: terms 12..360 step 12, rates 1..25 step 1 (both inclusive).
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from loancalc.core.errors import ConflictingTargetsError, MissingTargetError
from loancalc.core.finance import payment_from_principal, principal_from_payment
from loancalc.schemas.models import LoanInputs, LoanResult, Solution, SolveMode, TermGroup

logger = logging.getLogger(__name__)

TERM_SWEEP: tuple[float, ...] = tuple(float(n) for n in range(12, 361, 12))
RATE_SWEEP: tuple[float, ...] = tuple(float(r) for r in range(1, 26))

# (amount, rate_percent, term_months) -> LoanResult
Evaluator = Callable[[float, float, float], LoanResult]

_MODES: dict[tuple[bool, bool, bool], SolveMode] = {
    # (solve payment, term known, rate known)
    (True, True, True): SolveMode.PAYMENT,
    (True, False, True): SolveMode.PAYMENT_BY_TERM,
    (True, True, False): SolveMode.PAYMENT_BY_RATE,
    (True, False, False): SolveMode.PAYMENT_BY_TERM_AND_RATE,
    (False, True, True): SolveMode.PRINCIPAL,
    (False, False, True): SolveMode.PRINCIPAL_BY_TERM,
    (False, True, False): SolveMode.PRINCIPAL_BY_RATE,
    (False, False, False): SolveMode.PRINCIPAL_BY_TERM_AND_RATE,
}


def validate(inputs: LoanInputs) -> None:
    """
    Gate run before dispatch: exactly one of principal/payment must be strictly positive.

    Raises:
        MissingTargetError: neither was supplied (or both were non-positive).
        ConflictingTargetsError: both were supplied.
    """
    if inputs.target is not None:
        return
    if inputs.has_principal:
        raise ConflictingTargetsError()
    raise MissingTargetError("a principal (-p) or a monthly payment (-m) is required")


def select_mode(inputs: LoanInputs) -> SolveMode:
    """Map the supplied fields to one of the eight modes (after validate())."""
    validate(inputs)
    return _MODES[(inputs.target == "principal", inputs.term_known, inputs.rate_known)]


def _evaluator(mode: SolveMode) -> Evaluator:
    if mode.solves_payment:
        return payment_from_principal
    return lambda amount, rate, term: principal_from_payment(amount, term, rate)


def _warn_ignored(inputs: LoanInputs) -> None:
    if inputs.annual_rate_percent is not None and not inputs.rate_known:
        logger.warning("ignoring non-positive -i %s; sweeping rates instead", inputs.annual_rate_percent)
    if inputs.term_months is not None and not inputs.term_known:
        logger.warning("ignoring non-positive -t %s; sweeping terms instead", inputs.term_months)


def solve(inputs: LoanInputs) -> Solution:
    """
    Run the single dispatch transition for ``inputs``.

    Returns:
        Solution with flat ``rows`` for the single and one-dimensional modes, or
        ``groups`` (one TermGroup per swept term) for the two-dimensional modes.

    Raises:
        MissingTargetError / ConflictingTargetsError from validate().
    """
    mode = select_mode(inputs)
    _warn_ignored(inputs)

    evaluate = _evaluator(mode)
    amount = inputs.principal if mode.solves_payment else inputs.payment
    assert amount is not None

    terms = TERM_SWEEP if mode.sweeps_term else (inputs.term_months,)
    rates = RATE_SWEEP if mode.sweeps_rate else (inputs.annual_rate_percent,)
    logger.debug("mode=%s amount=%s terms=%d rates=%d", mode.value, amount, len(terms), len(rates))

    if mode.sweeps_term and mode.sweeps_rate:
        groups = [TermGroup(term_months=t, rows=[evaluate(amount, r, t) for r in rates]) for t in terms]
        return Solution(mode=mode, groups=groups)

    rows = [evaluate(amount, r, t) for t in terms for r in rates]
    return Solution(mode=mode, rows=rows)
