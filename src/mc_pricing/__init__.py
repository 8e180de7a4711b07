"""mc_pricing

Numerical core of a Monte Carlo pricing engine: Gaussian approximations for
variate generation and analytic checks, and path-dependent products whose
payoffs run unchanged on floats and on differentiable number types.
"""

from .analytical import black_scholes_price, discrete_barrier_shift, up_and_out_call_analytical
from .gaussians import inv_normal_cdf, normal_cdf, normal_dens
from .products import Product, Scenario, UpAndOutCall, build_timeline

__all__ = [
    "normal_dens",
    "normal_cdf",
    "inv_normal_cdf",
    "Product",
    "Scenario",
    "UpAndOutCall",
    "build_timeline",
    "black_scholes_price",
    "up_and_out_call_analytical",
    "discrete_barrier_shift",
]
