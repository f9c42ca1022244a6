"""OptionalValue — a value of some type, or the absence of one.

Two variants and no third state:

- ``Something(value)`` carries a payload.
- ``Nothing()`` carries none. All instances compare equal.

Both are frozen, so a result never changes after the reducer hands it out.
Python's native optional is ``T | None``; :func:`from_optional` and
:meth:`to_optional` convert between the two. ``None`` is the native
"absent" marker, so it can never be carried as a payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

DISPLAY_PREFIX = "The number is: "
NOTHING_LABEL = "<nothing>"


@dataclass(frozen=True)
class Something(Generic[T]):
    """A present value."""

    value: T

    @property
    def is_something(self) -> bool:
        return True

    @property
    def is_nothing(self) -> bool:
        return False

    def to_optional(self) -> T | None:
        return self.value

    def display(self) -> str:
        """Render as ``The number is: <value>``."""
        return f"{DISPLAY_PREFIX}{_render(self.value)}"


@dataclass(frozen=True)
class Nothing:
    """No value. Produced for an empty sequence."""

    @property
    def is_something(self) -> bool:
        return False

    @property
    def is_nothing(self) -> bool:
        return True

    def to_optional(self) -> None:
        return None

    def display(self) -> str:
        """Render as ``The number is: <nothing>``."""
        return f"{DISPLAY_PREFIX}{NOTHING_LABEL}"


OptionalValue = Something[T] | Nothing


def from_optional(o: T | None) -> OptionalValue[T]:
    """Wrap a native optional: ``None`` becomes Nothing, anything else Something.

    Examples:
        >>> from_optional(5)
        Something(value=5)
        >>> from_optional(None)
        Nothing()
    """
    if o is None:
        return Nothing()
    return Something(o)


def _render(value: object) -> str:
    # bool is an int subclass but has no decimal rendering
    if isinstance(value, int) and not isinstance(value, bool):
        return int.__str__(value)
    return str(value)
