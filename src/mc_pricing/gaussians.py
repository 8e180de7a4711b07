"""Closed-form Gaussian approximations.

Three scalar functions used throughout the Monte Carlo engine:

1. **Density** — the standard normal pdf, saturated to 0 beyond |x| > 10.
2. **CDF** — Zelen & Severo (1964) polynomial approximation, absolute error
   below ~1.5e-7, no iteration.
3. **Inverse CDF** — Beasley-Springer-Moro, the standard way of turning a
   uniform draw into a normal draw without rejection.  The path generator
   calls it once per time step per path, so it is kept branch-light and O(1).

These operate on plain floats only.  Payoffs that must also run on
differentiable number types live in :mod:`mc_pricing.products`; the variate
generation done here is never differentiated.

References
----------
Zelen, M. and Severo, N. C. (1964). "Probability Functions", in Abramowitz &
Stegun, *Handbook of Mathematical Functions*, 26.2.17.

Moro, B. (1995). "The Full Monte", *Risk*, 8(2), 57–58.

Glasserman, P. (2003). *Monte Carlo Methods in Financial Engineering*, p. 68.
"""

from __future__ import annotations

from math import exp, log

__all__ = [
    "normal_dens",
    "normal_cdf",
    "inv_normal_cdf",
]

# sqrt(2 * pi)
_SQRT_TWO_PI = 2.506628274631

# Beyond this many standard deviations the density and CDF saturate
_TAIL_CUTOFF = 10.0


def normal_dens(x: float) -> float:
    """Standard normal probability density, 0 outside [-10, 10]."""
    if x < -_TAIL_CUTOFF or x > _TAIL_CUTOFF:
        return 0.0
    return exp(-0.5 * x * x) / _SQRT_TWO_PI


def normal_cdf(x: float) -> float:
    """Standard normal cumulative distribution N(x).

    Parameters
    ----------
    x : float
        Point at which to evaluate the CDF.

    Returns
    -------
    float
        Approximation of P(Z <= x).  Exactly 0.0 below -10 and 1.0 above 10;
        negative arguments are handled through N(x) = 1 - N(-x), so the
        polynomial only ever sees x >= 0.
    """
    if x < -_TAIL_CUTOFF:
        return 0.0
    if x > _TAIL_CUTOFF:
        return 1.0
    if x < 0.0:
        return 1.0 - normal_cdf(-x)

    p = 0.2316419
    b1 = 0.319381530
    b2 = -0.356563782
    b3 = 1.781477937
    b4 = -1.821255978
    b5 = 1.330274429

    t = 1.0 / (1.0 + p * x)
    pol = t * (b1 + t * (b2 + t * (b3 + t * (b4 + t * b5))))

    return 1.0 - normal_dens(x) * pol


def inv_normal_cdf(p: float) -> float:
    """Inverse standard normal CDF (quantile function) for p in (0, 1).

    Two regimes:

    - central, |p - 0.5| < 0.42: rational function of (p - 0.5)²
    - tails: polynomial in log(-log(min(p, 1 - p)))

    The result is antisymmetric around p = 0.5.  Inputs outside (0, 1) are a
    caller error and produce undefined results (no exception is raised).
    """
    sup = p > 0.5
    up = 1.0 - p if sup else p

    a0 = 2.50662823884
    a1 = -18.61500062529
    a2 = 41.39119773534
    a3 = -25.44106049637

    b0 = -8.47351093090
    b1 = 23.08336743743
    b2 = -21.06224101826
    b3 = 3.13082909833

    c0 = 0.3374754822726147
    c1 = 0.9761690190917186
    c2 = 0.1607979714918209
    c3 = 0.0276438810333863
    c4 = 0.0038405729373609
    c5 = 0.0003951896511919
    c6 = 0.0000321767881768
    c7 = 0.0000002888167364
    c8 = 0.0000003960315187

    x = up - 0.5

    if abs(x) < 0.42:
        r = x * x
        num = x * (((a3 * r + a2) * r + a1) * r + a0)
        den = (((b3 * r + b2) * r + b1) * r + b0) * r + 1.0
        r = num / den
        return -r if sup else r

    r = log(-log(up))
    r = c0 + r * (c1 + r * (c2 + r * (c3 + r * (c4 + r * (c5 + r * (c6 + r * (c7 + r * c8)))))))

    return r if sup else -r
