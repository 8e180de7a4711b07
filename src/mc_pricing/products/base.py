"""Product contract shared by every Monte Carlo instrument.

A product is "what is being priced": it publishes the dates on which it needs
the underlying simulated (its *timeline*) and turns one simulated path into
one payoff.  Everything else (path generation, discounting, averaging over
paths) is the simulation driver's job.

Payoffs are written once and evaluated on any numeric type ``T`` that
satisfies :class:`Numeric`: ``float`` for valuation, or a differentiable
number (dual / tape-recorded) for sensitivities.  Products therefore never
call ``numpy`` or ``math`` on path values; they only use arithmetic,
comparisons, ``max`` and :func:`convert`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

__all__ = [
    "Time",
    "SYSTEM_TIME",
    "Numeric",
    "Scenario",
    "Path",
    "Product",
    "convert",
]

# Calendar time as a year fraction from the simulation reference date
Time = float

SYSTEM_TIME: Time = 0.0


class Numeric(Protocol):
    """Capabilities a payoff needs from its number type.

    Construction from a plain float (``type(x)(1.0)``) is also required; see
    :func:`convert`.
    """

    def __add__(self, other: Any) -> Any: ...

    def __radd__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __rsub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __rmul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: float) -> Any: ...

    def __gt__(self, other: Any) -> bool: ...

    def __lt__(self, other: Any) -> bool: ...

    def __float__(self) -> float: ...


T = TypeVar("T", bound=Numeric)


def convert(value: float, like: T) -> T:
    """Lift the plain constant ``value`` into the number type of ``like``."""
    return type(like)(value)


@dataclass(frozen=True, slots=True)
class Scenario(Generic[T]):
    """State of the world on one timeline date.

    Attributes
    ==========
    spot:
        Underlying spot price observed on that date.
    """

    spot: T


Path = Sequence[Scenario[T]]


class Product(ABC, Generic[T]):
    """Abstract Monte Carlo product.

    Methods
    =======
    timeline:
        dates (year fractions) on which the product observes the underlying
    payoff:
        payoff for one simulated path, index-aligned with ``timeline``
    clone:
        independently owned copy, usable wherever a ``Product`` is expected
    """

    @property
    @abstractmethod
    def timeline(self) -> tuple[Time, ...]:
        """Observation dates, strictly increasing, ending at maturity."""

    @abstractmethod
    def payoff(self, path: Path[T]) -> T:
        """Evaluate the payoff of one path.

        Parameters
        ==========
        path:
            one scenario per timeline date, in timeline order

        Returns
        =======
        payoff: T
            payoff in the number type of the path
        """

    @abstractmethod
    def clone(self) -> Product[T]:
        """Return an equivalent, independently owned product."""
