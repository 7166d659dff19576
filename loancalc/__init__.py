"""Amortized-loan calculator: solve for payment or principal, sweeping unknown rate/term."""

__version__ = "0.1.0"
