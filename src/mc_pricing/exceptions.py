"""Custom exception hierarchy for the mc_pricing library.

All library-specific exceptions inherit from :class:`McPricingError`,
enabling callers to catch *any* library error with a single ``except`` clause::

    try:
        product = UpAndOutCall(strike=100.0, barrier=120.0, maturity=1.0, monitor_freq=0.0)
    except McPricingError as exc:
        log.error("Library error: %s", exc)

The Monte Carlo hot path (payoff evaluation, Gaussian approximations) never
raises: its preconditions belong to the caller. Only construction-time and
analytical entry points validate their inputs.
"""

from __future__ import annotations


class McPricingError(Exception):
    """Base exception for all library errors."""


# ── Input validation ────────────────────────────────────────────────


class ValidationError(McPricingError):
    """Invalid input values (non-positive times, volatilities, prices, etc.)."""
