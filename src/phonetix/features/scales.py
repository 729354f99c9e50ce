"""Bounded feature scales.

Two kinds of scale hold every articulatory feature:

- :class:`CircularScale` walks a category enumeration and wraps around
  at either end, so stepping never fails.
- :class:`ContinuousScale` holds a float inside a range and rejects any
  write that would leave it. A rejected write leaves the scale as it was.
"""

from __future__ import annotations

import math
from typing import Any

from phonetix.errors import InvalidFeatureValue
from phonetix.features.categories import Category


class CircularScale:
    """Index into a category enumeration that wraps at both ends.

    Args:
        categories: The enumeration this scale ranges over.
        value: Initial member (or index, name, label). Defaults to the
            first member.
    """

    __slots__ = ("_categories", "_members", "_index")

    def __init__(self, categories: type[Category], value: Any = None) -> None:
        self._categories = categories
        self._members: tuple[Category, ...] = tuple(categories)
        self._index = 0
        if value is not None:
            self.set(value)

    @property
    def categories(self) -> type[Category]:
        return self._categories

    @property
    def value(self) -> Category:
        return self._members[self._index]

    @property
    def index(self) -> int:
        return self._index

    @property
    def size(self) -> int:
        return len(self._members)

    def set(self, value: Any) -> CircularScale:
        """Set the scale to a category.

        Raises:
            InvalidFeatureValue: If ``value`` is not one of the categories.
        """
        member = self._categories.coerce(value)
        self._index = self._members.index(member)
        return self

    def advance(self, steps: int = 1) -> CircularScale:
        """Move ``steps`` categories forward, wrapping past the last one."""
        self._index = (self._index + steps) % len(self._members)
        return self

    def retreat(self, steps: int = 1) -> CircularScale:
        """Move ``steps`` categories backward, wrapping past the first one."""
        return self.advance(-steps)

    def shifted(self, steps: int) -> CircularScale:
        """Return a copy moved by ``steps``; the receiver is unchanged."""
        return self.copy().advance(steps)

    def copy(self) -> CircularScale:
        return CircularScale(self._categories, self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CircularScale):
            return (
                self._categories is other._categories
                and self._index == other._index
            )
        if isinstance(other, Category):
            return type(other) is self._categories and other == self.value
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CircularScale({self._categories.__name__}.{self.value.name})"


class ContinuousScale:
    """A float constrained to a range.

    Args:
        lo: Lower bound.
        hi: Upper bound, ``math.inf`` for none.
        value: Initial value. Defaults to ``lo``.
        lo_inclusive: Whether ``lo`` itself is allowed.
        hi_inclusive: Whether ``hi`` itself is allowed.
        name: Feature name used in error messages.
    """

    __slots__ = ("_lo", "_hi", "_lo_inclusive", "_hi_inclusive", "_name", "_value")

    def __init__(
        self,
        lo: float,
        hi: float = math.inf,
        value: float | None = None,
        lo_inclusive: bool = True,
        hi_inclusive: bool = True,
        name: str = "value",
    ) -> None:
        if lo > hi:
            raise ValueError(f"Empty range: lo={lo} > hi={hi}")
        self._lo = float(lo)
        self._hi = float(hi)
        self._lo_inclusive = lo_inclusive
        self._hi_inclusive = hi_inclusive and not math.isinf(hi)
        self._name = name
        self._value = self._lo
        self.set(self._lo if value is None else value)

    @property
    def value(self) -> float:
        return self._value

    @property
    def bounds(self) -> tuple[float, float]:
        return (self._lo, self._hi)

    def contains(self, value: float) -> bool:
        """Whether ``value`` lies inside the range."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        if math.isnan(value):
            return False
        above = value >= self._lo if self._lo_inclusive else value > self._lo
        below = value <= self._hi if self._hi_inclusive else value < self._hi
        return above and below

    def _checked(self, value: Any) -> float:
        if not self.contains(value):
            raise InvalidFeatureValue(
                f"{self._name} {value!r} is outside {self._describe_range()}"
            )
        return float(value)

    def _describe_range(self) -> str:
        left = "[" if self._lo_inclusive else "("
        right = "]" if self._hi_inclusive else ")"
        return f"{left}{self._lo:g}, {self._hi:g}{right}"

    def set(self, value: float) -> ContinuousScale:
        """Set the value.

        Raises:
            InvalidFeatureValue: If ``value`` is outside the range.
        """
        self._value = self._checked(value)
        return self

    def advance(self, delta: float) -> ContinuousScale:
        return self.set(self._value + delta)

    def retreat(self, delta: float) -> ContinuousScale:
        return self.set(self._value - delta)

    def scale(self, factor: float) -> ContinuousScale:
        return self.set(self._value * factor)

    def copy(self) -> ContinuousScale:
        return ContinuousScale(
            self._lo,
            self._hi,
            self._value,
            lo_inclusive=self._lo_inclusive,
            hi_inclusive=self._hi_inclusive,
            name=self._name,
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ContinuousScale):
            return self._value == other._value
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ContinuousScale({self._name}={self._value:g}, {self._describe_range()})"
