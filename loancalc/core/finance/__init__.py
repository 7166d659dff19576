# loancalc/core/finance/__init__.py

from .annuity import (
    amortized_fraction,
    monthly_rate,
    payment_from_principal,
    principal_from_payment,
)

__all__ = [
    "payment_from_principal",
    "principal_from_payment",
    "monthly_rate",
    "amortized_fraction",
]
