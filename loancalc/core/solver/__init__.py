# loancalc/core/solver/__init__.py

from .dispatcher import RATE_SWEEP, TERM_SWEEP, select_mode, solve, validate

__all__ = [
    "solve",
    "select_mode",
    "validate",
    "TERM_SWEEP",
    "RATE_SWEEP",
]
