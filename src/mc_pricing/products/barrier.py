"""Discretely monitored up-and-out barrier call.

The knock-out indicator ``1{S_t <= H}`` is replaced by a linear ramp of
half-width ``SMOOTHING_FRACTION * S_0`` around the barrier ``H``:

- spot above ``H + half``: knocked out, payoff 0
- spot inside ``(H - half, H + half]``: survival factor multiplied by
  ``(H + half - spot) / (2 * half)``
- spot at or below ``H - half``: unaffected

The payoff is then continuous in every observed spot, so pathwise
sensitivities (finite differences with common random numbers, or AAD) stay
well defined at the barrier.  The price carries a small bias that vanishes as
the band narrows.

References
----------
Savine, A. (2016). "Stabilise risks of discontinuous payoffs with fuzzy logic",
Global Derivatives.

Savine, A. (2018). *Modern Computational Finance: AAD and Parallel
Simulations*, Wiley.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace as dc_replace
import logging

from ..exceptions import ValidationError
from .base import SYSTEM_TIME, Path, Product, T, Time, convert

__all__ = [
    "ONE_HOUR",
    "SMOOTHING_FRACTION",
    "build_timeline",
    "UpAndOutCall",
]

logger = logging.getLogger(__name__)

# One hour as a year fraction; dates closer than this to maturity are dropped
ONE_HOUR: Time = 0.000114469

# Half-width of the smoothing band, as a fraction of the initial spot
SMOOTHING_FRACTION = 0.01


def build_timeline(maturity: Time, monitor_freq: Time) -> tuple[Time, ...]:
    """Monitoring dates from ``SYSTEM_TIME`` to ``maturity``.

    Dates are generated by repeatedly adding ``monitor_freq``.  A generated
    date within ``ONE_HOUR`` of maturity is dropped and maturity itself closes
    the timeline, so the last entry is always exactly ``maturity``.

    Parameters
    ==========
    maturity:
        option maturity (year fraction), strictly after ``SYSTEM_TIME``
    monitor_freq:
        interval between monitoring dates (year fraction), strictly positive.
        Callers should keep it materially larger than ``ONE_HOUR``.

    Returns
    =======
    timeline: tuple[Time, ...]
        strictly increasing dates, first ``SYSTEM_TIME``, last ``maturity``
    """
    if monitor_freq <= 0.0:
        raise ValidationError(f"monitor_freq must be positive, got {monitor_freq}")
    if maturity <= SYSTEM_TIME:
        raise ValidationError(f"maturity must be after {SYSTEM_TIME}, got {maturity}")
    if monitor_freq < ONE_HOUR:
        logger.warning(
            "monitor_freq=%.6g is below one hour (%.6g); monitoring dates may be skipped",
            monitor_freq,
            ONE_HOUR,
        )

    timeline = [SYSTEM_TIME]
    t = SYSTEM_TIME + monitor_freq

    while maturity - t > ONE_HOUR:
        timeline.append(t)
        t += monitor_freq

    if timeline[-1] < maturity:
        timeline.append(maturity)

    logger.debug(
        "Built timeline: %d dates, maturity=%.6g monitor_freq=%.6g",
        len(timeline),
        maturity,
        monitor_freq,
    )
    return tuple(timeline)


@dataclass(frozen=True)
class UpAndOutCall(Product[T]):
    """Up-and-out call with smoothed discrete barrier monitoring.

    Parameters
    ----------
    strike : float
        Strike price.
    barrier : float
        Upper knock-out barrier.  Not validated against ``strike``.
    maturity : float
        Maturity as a year fraction from ``SYSTEM_TIME``.
    monitor_freq : float
        Interval between barrier observations, as a year fraction.

    Notes
    -----
    The timeline is built once at construction.  ``payoff`` keeps no state
    between calls, so one instance can price any number of paths, from any
    number of threads.
    """

    strike: float
    barrier: float
    maturity: Time
    monitor_freq: Time
    _timeline: tuple[Time, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Coerce terms to float and build the monitoring timeline."""
        object.__setattr__(self, "strike", float(self.strike))
        object.__setattr__(self, "barrier", float(self.barrier))
        object.__setattr__(self, "maturity", float(self.maturity))
        object.__setattr__(self, "monitor_freq", float(self.monitor_freq))
        object.__setattr__(self, "_timeline", build_timeline(self.maturity, self.monitor_freq))

    @property
    def timeline(self) -> tuple[Time, ...]:
        return self._timeline

    def clone(self) -> Product[T]:
        return dc_replace(self)

    def payoff(self, path: Path[T]) -> T:
        # band width is a plain float: the payoff is differentiated through the ramp,
        # not through the width of the band
        smooth = float(path[0].spot * SMOOTHING_FRACTION)
        upper = self.barrier + smooth
        lower = self.barrier - smooth

        alive = convert(1.0, path[0].spot)

        for scenario in path:
            spot = scenario.spot
            if spot > upper:
                return convert(0.0, spot)
            if spot > lower:
                alive *= (upper - spot) / (2.0 * smooth)

        final = path[-1].spot
        return alive * max(final - self.strike, convert(0.0, final))
