"""Closed-form reference prices built on :mod:`mc_pricing.gaussians`.

Used to check Monte Carlo estimates and for quick analytic valuation:

1. **Black-Scholes-Merton** European call/put with continuous dividend yield.
2. **Up-and-out call, continuous monitoring** — Rubinstein & Reiner (1991),
   as presented in Hull Chapter 26 (price = vanilla call − up-and-in call).
3. **Discrete monitoring shift** — Broadie, Glasserman & Kou (1997): a
   discretely monitored barrier ``H`` is priced as a continuous one at
   ``H · exp(β σ √Δt)`` with ``β = −ζ(1/2)/√(2π) ≈ 0.5826``.

References
----------
Rubinstein, M. and Reiner, E. (1991). "Breaking down the barriers",
*Risk*, 4(8), 28–35.

Broadie, M., Glasserman, P. and Kou, S. (1997). "A Continuity Correction for
Discrete Barrier Options", *Mathematical Finance*, 7(4), 325–349.

Hull, J. C. *Options, Futures, and Other Derivatives*, Chapter 26.
"""

from __future__ import annotations

import logging

import numpy as np

from .enums import OptionType
from .exceptions import ValidationError
from .gaussians import normal_cdf

__all__ = [
    "BGK_BETA",
    "black_scholes_price",
    "up_and_out_call_analytical",
    "discrete_barrier_shift",
]

logger = logging.getLogger(__name__)

BGK_BETA = 0.5826  # Broadie-Glasserman-Kou continuity-correction constant


def _check_positive(**values: float) -> None:
    for name, value in values.items():
        if not value > 0.0:
            raise ValidationError(f"{name} must be positive, got {value}")


def black_scholes_price(
    *,
    spot: float,
    strike: float,
    time_to_maturity: float,
    volatility: float,
    risk_free_rate: float,
    dividend_yield: float = 0.0,
    option_type: OptionType = OptionType.CALL,
) -> float:
    """Black-Scholes-Merton price of a European call or put.

    Parameters
    ----------
    spot
        Current spot price.
    strike
        Strike price.
    time_to_maturity
        Time to maturity in years.
    volatility
        Volatility (annualized).
    risk_free_rate
        Continuously compounded risk-free rate.
    dividend_yield
        Continuously compounded dividend yield.
    option_type
        ``OptionType.CALL`` or ``OptionType.PUT``.

    Returns
    -------
    float
        Present value of the option.
    """
    _check_positive(
        spot=spot, strike=strike, time_to_maturity=time_to_maturity, volatility=volatility
    )
    if not isinstance(option_type, OptionType):
        raise ValidationError(
            f"option_type must be OptionType enum, got {type(option_type).__name__}"
        )

    std_dev = volatility * np.sqrt(time_to_maturity)
    d1 = (
        np.log(spot / strike)
        + (risk_free_rate - dividend_yield + 0.5 * volatility**2) * time_to_maturity
    ) / std_dev
    d2 = d1 - std_dev

    df_r = np.exp(-risk_free_rate * time_to_maturity)
    df_q = np.exp(-dividend_yield * time_to_maturity)

    if option_type is OptionType.CALL:
        price = spot * df_q * normal_cdf(d1) - strike * df_r * normal_cdf(d2)
    else:
        price = strike * df_r * normal_cdf(-d2) - spot * df_q * normal_cdf(-d1)

    logger.debug(
        "BSM %s price=%.6g d1=%.6g d2=%.6g", option_type.value, price, d1, d2
    )
    return float(price)


def up_and_out_call_analytical(
    *,
    spot: float,
    strike: float,
    barrier: float,
    time_to_maturity: float,
    volatility: float,
    risk_free_rate: float,
    dividend_yield: float = 0.0,
) -> float:
    """Up-and-out call under continuous barrier monitoring.

    With ``λ = (r − q + σ²/2)/σ²`` and ``s = σ√T``::

        x1 = ln(S/H)/s + λs
        y  = ln(H²/(S K))/s + λs
        y1 = ln(H/S)/s + λs

        c_ui = S e^{−qT} N(x1) − K e^{−rT} N(x1 − s)
               − S e^{−qT} (H/S)^{2λ} [N(−y) − N(−y1)]
               + K e^{−rT} (H/S)^{2λ−2} [N(−y + s) − N(−y1 + s)]

        c_uo = c − c_ui

    Returns 0 when the spot is already at or above the barrier, or when the
    barrier is at or below the strike (the call can never pay while alive).
    """
    _check_positive(
        spot=spot,
        strike=strike,
        barrier=barrier,
        time_to_maturity=time_to_maturity,
        volatility=volatility,
    )
    if spot >= barrier or barrier <= strike:
        return 0.0

    vanilla = black_scholes_price(
        spot=spot,
        strike=strike,
        time_to_maturity=time_to_maturity,
        volatility=volatility,
        risk_free_rate=risk_free_rate,
        dividend_yield=dividend_yield,
        option_type=OptionType.CALL,
    )

    S = spot
    K = strike
    H = barrier
    T = time_to_maturity
    sigma = volatility

    s = sigma * np.sqrt(T)
    lam = (risk_free_rate - dividend_yield + 0.5 * sigma**2) / sigma**2
    df_r = np.exp(-risk_free_rate * T)
    df_q = np.exp(-dividend_yield * T)

    x1 = np.log(S / H) / s + lam * s
    y = np.log(H * H / (S * K)) / s + lam * s
    y1 = np.log(H / S) / s + lam * s

    up_and_in = (
        S * df_q * normal_cdf(x1)
        - K * df_r * normal_cdf(x1 - s)
        - S * df_q * (H / S) ** (2.0 * lam) * (normal_cdf(-y) - normal_cdf(-y1))
        + K * df_r * (H / S) ** (2.0 * lam - 2.0) * (normal_cdf(-y + s) - normal_cdf(-y1 + s))
    )

    price = max(vanilla - float(up_and_in), 0.0)
    logger.debug(
        "Up-and-out call price=%.6g vanilla=%.6g up_and_in=%.6g barrier=%.6g",
        price,
        vanilla,
        up_and_in,
        H,
    )
    return price


def discrete_barrier_shift(*, barrier: float, volatility: float, monitor_freq: float) -> float:
    """Continuous-equivalent level of a discretely monitored upper barrier.

    Parameters
    ----------
    barrier
        Barrier level observed every ``monitor_freq`` years.
    volatility
        Volatility (annualized).
    monitor_freq
        Interval between observations, in years.

    Returns
    -------
    float
        ``barrier * exp(BGK_BETA * volatility * sqrt(monitor_freq))``; pass it
        to :func:`up_and_out_call_analytical` to approximate the discrete price.
    """
    _check_positive(barrier=barrier, volatility=volatility, monitor_freq=monitor_freq)
    return float(barrier * np.exp(BGK_BETA * volatility * np.sqrt(monitor_freq)))
