# loancalc/schemas/models.py

from __future__ import annotations

import math
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Target = Literal["principal", "payment"]

# =========================
# Inputs
# =========================


class LoanInputs(BaseModel):
    """
    Values supplied on the command line for a single run.

    Every field is optional. A value counts as *known* only when it was supplied
    and is strictly positive; anything else is solved for (principal/payment) or
    swept (rate/term) by the dispatcher.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    principal: float | None = Field(None, description="Loan amount (-p). Solve for the monthly payment.")
    payment: float | None = Field(None, description="Monthly payment (-m). Solve for the principal.")
    annual_rate_percent: float | None = Field(
        None, description="Nominal yearly interest rate in percent (-i), e.g. 7.0 for 7%."
    )
    term_months: float | None = Field(None, description="Number of monthly payments (-t).")

    @field_validator("principal", "payment", "annual_rate_percent", "term_months")
    @classmethod
    def _finite(cls, v: float | None) -> float | None:
        if v is not None and not math.isfinite(v):
            raise ValueError("must be a finite number")
        return v

    @property
    def has_principal(self) -> bool:
        return self.principal is not None and self.principal > 0

    @property
    def has_payment(self) -> bool:
        return self.payment is not None and self.payment > 0

    @property
    def rate_known(self) -> bool:
        return self.annual_rate_percent is not None and self.annual_rate_percent > 0

    @property
    def term_known(self) -> bool:
        return self.term_months is not None and self.term_months > 0

    @property
    def target(self) -> Target | None:
        """Which amount the run starts from, or None when it is missing or ambiguous."""
        if self.has_principal == self.has_payment:
            return None
        return "principal" if self.has_principal else "payment"


# =========================
# Results
# =========================


class LoanResult(BaseModel):
    """One fully-resolved (principal, rate, term) triple and the figures derived from it."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    principal: float = Field(..., description="Loan amount.")
    monthly_payment: float = Field(..., description="Constant monthly payment.")
    annual_rate_percent: float = Field(..., description="Nominal yearly rate in percent.")
    term_months: float = Field(..., description="Number of monthly payments.")
    total_paid: float = Field(..., description="monthly_payment * term_months.")
    interest_paid: float = Field(..., description="total_paid - principal.")
    interest_paid_percent: float = Field(..., description="interest_paid as a percentage of principal.")
    break_even_years: float = Field(
        ..., description="Years to repay the principal if every payment went to principal alone."
    )

    @field_validator("*")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("must be a finite number")
        return v

    def summary(self) -> str:
        return (
            f"[LoanResult] P={self.principal:,.2f} @ {self.annual_rate_percent:.2f}% x {self.term_months:g} "
            f"-> {self.monthly_payment:,.2f}/mo, interest {self.interest_paid:,.2f}"
        )

    def __str__(self) -> str:
        return self.summary()


class TermGroup(BaseModel):
    """Rate-sweep rows sharing one term; produced when both rate and term are swept."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    term_months: float = Field(..., description="Term shared by every row in the group.")
    rows: list[LoanResult] = Field(default_factory=list, description="One row per swept rate.")


class SolveMode(str, Enum):
    """The eight terminal actions of the dispatcher."""

    PAYMENT = "payment"
    PAYMENT_BY_TERM = "payment_by_term"
    PAYMENT_BY_RATE = "payment_by_rate"
    PAYMENT_BY_TERM_AND_RATE = "payment_by_term_and_rate"
    PRINCIPAL = "principal"
    PRINCIPAL_BY_TERM = "principal_by_term"
    PRINCIPAL_BY_RATE = "principal_by_rate"
    PRINCIPAL_BY_TERM_AND_RATE = "principal_by_term_and_rate"

    @property
    def solves_payment(self) -> bool:
        return self.value.startswith("payment")

    @property
    def sweeps_term(self) -> bool:
        return "term" in self.value

    @property
    def sweeps_rate(self) -> bool:
        return "rate" in self.value


class Solution(BaseModel):
    """Output of one dispatch: the mode taken and either flat rows or term groups."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    mode: SolveMode
    rows: list[LoanResult] = Field(default_factory=list, description="Rows for single and one-dimensional modes.")
    groups: list[TermGroup] = Field(default_factory=list, description="Term groups for two-dimensional modes.")

    @property
    def row_count(self) -> int:
        return len(self.rows) + sum(len(g.rows) for g in self.groups)
