"""Sortby expression API."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from public import public

import sortby.expr.operations as ops
import sortby.expr.types as ir
from sortby.common.enums import Direction
from sortby.common.exceptions import InputTypeError
from sortby.expr.types.relations import _sort_key

if TYPE_CHECKING:
    from sortby.expr.types.relations import KeyLike


@public
def sequence(data: Iterable | ir.SequenceExpr) -> ir.SequenceExpr:
    """Wrap an iterable so it can be sorted by derived keys.

    Parameters
    ----------
    data
        Any iterable. One-shot iterators are consumed on the first evaluation
        and replayed on later ones.

    Returns
    -------
    SequenceExpr
        The wrapped sequence

    Examples
    --------
    >>> import sortby
    >>> sortby.sequence(iter([3, 1, 2])).sort_by(lambda x: x).to_list()
    [1, 2, 3]
    """
    if isinstance(data, ir.SequenceExpr):
        return data
    if isinstance(data, (str, bytes)) or not isinstance(data, Iterable):
        raise InputTypeError(
            f"Expected an iterable of elements, got {type(data).__name__}"
        )
    return ops.Source(data).to_expr()


@public
def sort_by(data: Iterable | ir.SequenceExpr, key: KeyLike) -> ir.SortedExpr:
    """Sort `data` by the ascending values of `key`.

    Parameters
    ----------
    data
        The elements to sort, left untouched
    key
        Callable extracting the key of an element, a field name or an index

    Returns
    -------
    SortedExpr
        A builder accepting further tie-breaking keys via
        [`then_sort_by`](#sortby.expr.types.relations.SortedExpr.then_sort_by)
        and
        [`then_sort_by_desc`](#sortby.expr.types.relations.SortedExpr.then_sort_by_desc).

    Examples
    --------
    >>> import sortby
    >>> people = [
    ...     {"name": "Rich", "age": 18},
    ...     {"name": "Bob", "age": 9},
    ...     {"name": "Marc", "age": 21},
    ...     {"name": "Alice", "age": 18},
    ... ]
    >>> expr = sortby.sort_by(people, "age").then_sort_by("name")
    >>> [p["name"] for p in expr]
    ['Bob', 'Alice', 'Rich', 'Marc']
    """
    return sequence(data).sort_by(key)


@public
def sort_by_desc(data: Iterable | ir.SequenceExpr, key: KeyLike) -> ir.SortedExpr:
    """Sort `data` by the descending values of `key`.

    Examples
    --------
    >>> import sortby
    >>> people = [
    ...     {"name": "Rich", "age": 18},
    ...     {"name": "Bob", "age": 9},
    ...     {"name": "Marc", "age": 21},
    ...     {"name": "Alice", "age": 18},
    ... ]
    >>> expr = sortby.sort_by_desc(people, "age").then_sort_by("name")
    >>> [p["name"] for p in expr]
    ['Marc', 'Alice', 'Rich', 'Bob']
    """
    return sequence(data).sort_by_desc(key)


@public
def order_by(data: Iterable | ir.SequenceExpr, *keys: KeyLike) -> ir.SortedExpr:
    """Sort `data` by several keys in priority order.

    Equivalent to a `sort_by` call followed by `then_sort_by` calls, with
    [`desc`](#sortby.expr.api.desc) marking the descending keys.
    """
    return sequence(data).order_by(*keys)


@public
def asc(key: KeyLike) -> ir.SortExpr:
    """Create an ascending sort key from a callable, field name or index.

    Examples
    --------
    >>> import sortby
    >>> sortby.asc("age").direction
    <Direction.ASCENDING: 'asc'>
    """
    return _sort_key(key, Direction.ASCENDING).to_expr()


@public
def desc(key: KeyLike) -> ir.SortExpr:
    """Create a descending sort key from a callable, field name or index.

    Examples
    --------
    >>> import sortby
    >>> sortby.desc(len).get_name()
    'len'
    """
    return _sort_key(key, Direction.DESCENDING).to_expr()
