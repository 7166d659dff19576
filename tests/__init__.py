# tests/__init__.py
"""
Expose common test utilities so tests can import directly:
    from tests import make_inputs, reference_payment
"""

from .utils import make_inputs, reference_payment

__all__ = ["make_inputs", "reference_payment"]
