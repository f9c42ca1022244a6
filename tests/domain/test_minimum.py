"""Tests for Minimum capabilities and the capability registry."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

import pytest

from vecmin.domain.minimum import (
    INT_MINIMUM,
    IntMinimum,
    KeyMinimum,
    MissingCapabilityError,
    OrderedMinimum,
    minimum_for,
    register_minimum,
)


@dataclass(frozen=True)
class Tagged:
    """Equal by ``n`` for ordering, but distinguishable by ``tag``."""

    n: int
    tag: str


class TestIntMinimum:
    @pytest.mark.parametrize(
        "a,b,expected",
        [
            (1, 2, 1),
            (2, 1, 1),
            (-5, 3, -5),
            (-2147483648, 2147483647, -2147483648),
            (7, 7, 7),
        ],
    )
    def test_pick_smaller(self, a: int, b: int, expected: int) -> None:
        assert IntMinimum().pick_smaller(a, b) == expected

    def test_deterministic(self) -> None:
        results = {INT_MINIMUM.pick_smaller(4, 9) for _ in range(10)}
        assert results == {4}


class TestTiePolicy:
    def test_ordered_keeps_first_on_tie(self) -> None:
        a, b = Decimal("1.0"), Decimal("1.00")
        assert a == b
        assert str(OrderedMinimum[Decimal]().pick_smaller(a, b)) == "1.0"

    def test_key_keeps_first_on_tie(self) -> None:
        first, second = Tagged(3, "first"), Tagged(3, "second")
        by_n = KeyMinimum(lambda t: t.n)
        assert by_n.pick_smaller(first, second) is first
        assert by_n.pick_smaller(second, first) is second


class TestOrderedMinimum:
    def test_strings(self) -> None:
        assert OrderedMinimum[str]().pick_smaller("pear", "fig") == "fig"

    def test_dates(self) -> None:
        earlier, later = date(2024, 1, 1), date(2024, 6, 1)
        assert OrderedMinimum[date]().pick_smaller(later, earlier) == earlier


class TestKeyMinimum:
    def test_compares_by_key(self) -> None:
        by_len = KeyMinimum(len)
        assert by_len.pick_smaller("banana", "kiwi") == "kiwi"


class TestRegistry:
    def test_int_registered(self) -> None:
        assert minimum_for(int) is INT_MINIMUM

    def test_str_registered(self) -> None:
        assert minimum_for(str).pick_smaller("b", "a") == "a"

    def test_bool_not_inherited_from_int(self) -> None:
        with pytest.raises(MissingCapabilityError):
            minimum_for(bool)

    def test_unregistered_type_raises(self) -> None:
        with pytest.raises(MissingCapabilityError, match="Tagged"):
            minimum_for(Tagged)

    def test_missing_capability_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            minimum_for(complex)

    def test_register(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from vecmin.domain import minimum

        monkeypatch.setattr(minimum, "_REGISTRY", dict(minimum._REGISTRY))
        capability = KeyMinimum(lambda t: t.n)
        register_minimum(Tagged, capability)
        assert minimum_for(Tagged) is capability
