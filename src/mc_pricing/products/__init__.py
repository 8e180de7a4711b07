"""Monte Carlo products.

Public API
----------
Contract:
    Product: abstract product (timeline, payoff, clone)
    Scenario: one observation of the underlying on a timeline date
    Numeric: capabilities required from the payoff number type
    convert: lift a plain float into a path's number type

Products:
    UpAndOutCall: up-and-out call with smoothed barrier monitoring
"""

from .base import SYSTEM_TIME, Numeric, Path, Product, Scenario, Time, convert
from .barrier import ONE_HOUR, SMOOTHING_FRACTION, UpAndOutCall, build_timeline

__all__ = [
    # Contract
    "Time",
    "SYSTEM_TIME",
    "Numeric",
    "Scenario",
    "Path",
    "Product",
    "convert",
    # Barrier
    "ONE_HOUR",
    "SMOOTHING_FRACTION",
    "build_timeline",
    "UpAndOutCall",
]
