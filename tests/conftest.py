# tests/conftest.py
from __future__ import annotations

import logging

import pytest

from tests.utils import EXAMPLE_PRINCIPAL, EXAMPLE_RATE, EXAMPLE_TERM, make_inputs


# -------- Logging isolation --------
@pytest.fixture(autouse=True)
def _reset_loancalc_logger():
    """Drop handlers the CLI attached so each test starts from a bare logger."""
    yield
    logger = logging.getLogger("loancalc")
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()


@pytest.fixture(autouse=True)
def _no_debug_env(monkeypatch):
    monkeypatch.delenv("LOANCALC_DEBUG", raising=False)


# -------- Input fixtures --------
@pytest.fixture
def inputs_factory():
    """Factory for LoanInputs (all fields unset unless overridden)."""

    def _factory(**overrides):
        return make_inputs(**overrides)

    return _factory


@pytest.fixture
def example_inputs():
    return make_inputs(principal=EXAMPLE_PRINCIPAL, annual_rate_percent=EXAMPLE_RATE, term_months=EXAMPLE_TERM)


# -------- Pytest markers --------
def pytest_configure(config):
    config.addinivalue_line("markers", "integration: marks end-to-end CLI tests")
