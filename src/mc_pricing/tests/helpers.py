"""Test doubles for the collaborators a product sees at runtime.

- :class:`Dual` plays the differentiable number type (forward mode, one
  tangent direction).
- :func:`simulate_gbm_paths` plays the path simulator, turning uniforms into
  normals with :func:`~mc_pricing.gaussians.inv_normal_cdf`.
"""

from __future__ import annotations

import numpy as np

from mc_pricing.gaussians import inv_normal_cdf
from mc_pricing.products import Scenario


class Dual:
    """Forward-mode dual number ``value + deriv·ε``."""

    __slots__ = ("value", "deriv")

    def __init__(self, value: float, deriv: float = 0.0):
        self.value = float(value)
        self.deriv = float(deriv)

    @staticmethod
    def _lift(other) -> "Dual":
        return other if isinstance(other, Dual) else Dual(other)

    def __add__(self, other):
        o = self._lift(other)
        return Dual(self.value + o.value, self.deriv + o.deriv)

    __radd__ = __add__

    def __sub__(self, other):
        o = self._lift(other)
        return Dual(self.value - o.value, self.deriv - o.deriv)

    def __rsub__(self, other):
        return self._lift(other) - self

    def __mul__(self, other):
        o = self._lift(other)
        return Dual(self.value * o.value, self.deriv * o.value + self.value * o.deriv)

    __rmul__ = __mul__

    def __truediv__(self, other: float):
        return Dual(self.value / other, self.deriv / other)

    def __gt__(self, other) -> bool:
        return self.value > self._lift(other).value

    def __lt__(self, other) -> bool:
        return self.value < self._lift(other).value

    def __float__(self) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"Dual({self.value!r}, {self.deriv!r})"


def make_path(spots, seed_deriv_index: int | None = None) -> list[Scenario]:
    """Build a path from spot values.

    With ``seed_deriv_index`` set, spots become :class:`Dual` numbers and the
    spot at that index carries a unit tangent.
    """
    if seed_deriv_index is None:
        return [Scenario(spot=float(s)) for s in spots]
    return [
        Scenario(spot=Dual(s, 1.0 if i == seed_deriv_index else 0.0)) for i, s in enumerate(spots)
    ]


def simulate_gbm_paths(
    *,
    timeline: tuple[float, ...],
    spot: float,
    volatility: float,
    drift: float,
    num_paths: int,
    random_seed: int,
) -> np.ndarray:
    """Simulate GBM spots on ``timeline``, shape ``(num_paths, len(timeline))``."""
    rng = np.random.default_rng(random_seed)
    dt = np.diff(np.asarray(timeline, dtype=float))

    uniforms = rng.random((num_paths, dt.size))
    # keep away from 0, where inv_normal_cdf is undefined
    uniforms = np.clip(uniforms, 1.0e-12, 1.0 - 1.0e-12)
    z = np.vectorize(inv_normal_cdf, otypes=[float])(uniforms)

    log_increments = (drift - 0.5 * volatility**2) * dt + volatility * np.sqrt(dt) * z
    log_paths = np.concatenate(
        [np.zeros((num_paths, 1)), np.cumsum(log_increments, axis=1)], axis=1
    )
    return spot * np.exp(log_paths)
