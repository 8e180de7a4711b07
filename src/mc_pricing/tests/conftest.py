"""Shared pytest fixtures for mc_pricing tests."""

import pytest

from mc_pricing.products import UpAndOutCall


# ---------------------------------------------------------------------------
# Scalar constants
# ---------------------------------------------------------------------------

SPOT = 100.0
STRIKE = 100.0
BARRIER = 120.0
MATURITY = 1.0
MONTHLY = 1.0 / 12.0


@pytest.fixture()
def strike() -> float:
    return STRIKE


@pytest.fixture()
def barrier() -> float:
    return BARRIER


@pytest.fixture()
def maturity() -> float:
    return MATURITY


@pytest.fixture()
def monitor_freq() -> float:
    return MONTHLY


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------


@pytest.fixture()
def uoc(strike: float, barrier: float, maturity: float, monitor_freq: float) -> UpAndOutCall:
    """Monthly-monitored 1y up-and-out call, K=100, H=120."""
    return UpAndOutCall(
        strike=strike,
        barrier=barrier,
        maturity=maturity,
        monitor_freq=monitor_freq,
    )
