# loancalc/core/errors.py
"""
Typed errors for the loan calculator.

Exports
-------
- LoanCalcError, UsageError, MissingTargetError, ConflictingTargetsError,
  InvalidLoanTermsError
- USAGE_ERRORS
"""

from __future__ import annotations

# =========================
# Exception types
# =========================


class LoanCalcError(RuntimeError):
    """Base class for loan calculator failures."""


class UsageError(LoanCalcError):
    """The supplied flags do not describe a solvable loan."""


class MissingTargetError(UsageError):
    """Neither a principal (-p) nor a monthly payment (-m) was supplied."""


class ConflictingTargetsError(UsageError):
    """Both a principal (-p) and a monthly payment (-m) were supplied."""

    def __init__(self, msg: str = "Cannot specify BOTH -m and -p arguments at the same time") -> None:
        super().__init__(msg)


class InvalidLoanTermsError(LoanCalcError, ValueError):
    """Formula preconditions violated (non-positive amount or term, degenerate rate)."""


# Selector tuple for grouped exception handling
USAGE_ERRORS = (
    MissingTargetError,
    ConflictingTargetsError,
)

__all__ = [
    "LoanCalcError",
    "UsageError",
    "MissingTargetError",
    "ConflictingTargetsError",
    "InvalidLoanTermsError",
    "USAGE_ERRORS",
]
