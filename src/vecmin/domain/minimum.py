"""Minimum capability — the pairwise ordering contract used by the reducer.

A type is usable with :func:`vecmin.domain.reducer.vec_min` only when a
``Minimum`` implementation is supplied or registered for it.  The reducer
never falls back to ``min()`` or ``<`` on the elements themselves.

INVARIANT: every capability in this module keeps the earlier operand on
a tie.  The reducer always passes the accumulator as ``a``, so the first
element seen wins among equals.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, Protocol, TypeVar

T = TypeVar("T")
K = TypeVar("K")


class MissingCapabilityError(TypeError):
    """Raised when no Minimum capability is registered for an element type."""

    def __init__(self, element_type: type) -> None:
        self.element_type = element_type
        super().__init__(f"No Minimum capability registered for {element_type.__qualname__}")


class Minimum(Protocol[T]):
    """Pick the smaller of two values.

    Implementations must be deterministic, total over the values they
    receive, and side-effect free.  Misbehaving implementations are not
    detected; the reducer's result is then unspecified.
    """

    def pick_smaller(self, a: T, b: T) -> T: ...


class IntMinimum:
    """Signed integer comparison. No arithmetic, so no overflow."""

    def pick_smaller(self, a: int, b: int) -> int:
        return a if a <= b else b

    def __repr__(self) -> str:
        return "IntMinimum()"


class OrderedMinimum(Generic[T]):
    """Capability for any totally ordered type (str, Decimal, date, ...)."""

    def pick_smaller(self, a: T, b: T) -> T:
        return a if a <= b else b  # type: ignore[operator]

    def __repr__(self) -> str:
        return "OrderedMinimum()"


class KeyMinimum(Generic[T, K]):
    """Compare values by a derived key.

    Example::

        by_price = KeyMinimum(lambda item: item.price)
        vec_min(items, by_price)
    """

    def __init__(self, key: Callable[[T], K]) -> None:
        self.key = key

    def pick_smaller(self, a: T, b: T) -> T:
        return a if self.key(a) <= self.key(b) else b  # type: ignore[operator]

    def __repr__(self) -> str:
        return f"KeyMinimum(key={self.key!r})"


INT_MINIMUM = IntMinimum()

_REGISTRY: dict[type, Minimum[Any]] = {
    int: INT_MINIMUM,
    str: OrderedMinimum[str](),
}


def register_minimum(element_type: type[T], capability: Minimum[T]) -> None:
    """Declare *capability* as the Minimum implementation for *element_type*."""
    _REGISTRY[element_type] = capability


def minimum_for(element_type: type[T]) -> Minimum[T]:
    """Return the registered capability for *element_type*.

    Lookup is by exact type: ``bool`` does not inherit ``int``'s capability.

    Raises:
        MissingCapabilityError: If the type has not declared support.
    """
    try:
        return _REGISTRY[element_type]
    except KeyError:
        raise MissingCapabilityError(element_type) from None
