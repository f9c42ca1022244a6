"""Minimum of a collection, folded left to right into an OptionalValue."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from vecmin.domain.minimum import INT_MINIMUM, Minimum
from vecmin.domain.optional import Nothing, OptionalValue, Something

T = TypeVar("T")


def vec_min(
    sequence: Iterable[T],
    minimum: Minimum[T] = INT_MINIMUM,  # type: ignore[assignment]
) -> OptionalValue[T]:
    """Return the smallest element of *sequence*, or Nothing when it is empty.

    Single pass, constant extra space.  The accumulator is always passed
    to ``minimum.pick_smaller`` as the first argument, so with the shipped
    capabilities the earliest of several equal elements is the one kept.

    Args:
        sequence: Elements to reduce.  Consumed once; never mutated.
        minimum: Pairwise comparison capability for the element type.
            Defaults to signed integer comparison.

    Examples:
        >>> vec_min([18, 5, 7, 9, 27])
        Something(value=5)
        >>> vec_min([])
        Nothing()
    """
    acc: OptionalValue[T] = Nothing()
    for element in sequence:
        match acc:
            case Nothing():
                acc = Something(element)
            case Something(current):
                acc = Something(minimum.pick_smaller(current, element))
    return acc
