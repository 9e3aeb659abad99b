"""Composite sort keys.

Both builders turn a tuple of `ops.SortKey` into a single ``key=`` argument of
the builtin, stable `sorted`, so the order between pairs of elements is the
lexicographic combination of the sort keys in priority order.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Sequence
from typing import Any

import toolz

import sortby.expr.operations as ops


class Ascending:
    """Wrap an extracted key for use inside a composite key tuple.

    Two keys are equal when neither is less than the other, so keys without a
    total order (NaN, sets) still fall through to the following sort keys the
    same way the three-way `comparator` does.
    """

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ascending):
            return NotImplemented
        return not (self.value < other.value or other.value < self.value)

    def __lt__(self, other) -> bool:
        if not isinstance(other, Ascending):
            return NotImplemented
        return self.value < other.value

    __hash__ = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"


class Descending(Ascending):
    """Same as `Ascending` with the order inverted."""

    __slots__ = ()

    def __lt__(self, other) -> bool:
        if not isinstance(other, Ascending):
            return NotImplemented
        return other.value < self.value


def _extract(key: ops.SortKey) -> Callable[[Any], Ascending]:
    """Return a function extracting the wrapped key of a single sort step."""
    wrapper = Ascending if key.ascending else Descending
    return toolz.compose(wrapper, key.extractor)


def decorated_key(sort_keys: Sequence[ops.SortKey]) -> Callable[[Any], Any]:
    """Build a key function computing every sort key of an element at once.

    `sorted` calls it exactly once per element (decorate-sort-undecorate).
    """
    if len(sort_keys) == 1:
        return _extract(sort_keys[0])
    return toolz.juxt(*map(_extract, sort_keys))


def comparator(sort_keys: Sequence[ops.SortKey]) -> Callable[[Any, Any], int]:
    """Build a three-way comparison function re-extracting keys on each call."""

    def compare(left, right) -> int:
        for key in sort_keys:
            a, b = key.extractor(left), key.extractor(right)
            if a < b:
                order = -1
            elif b < a:
                order = 1
            else:
                continue
            return order if key.ascending else -order
        return 0

    return compare


def compared_key(sort_keys: Sequence[ops.SortKey]) -> Callable[[Any], Any]:
    return functools.cmp_to_key(comparator(sort_keys))
