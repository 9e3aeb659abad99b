from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, Union

from public import public

from sortby.common.enums import Direction
from sortby.common.exceptions import CoercionError, InputError, InputTypeError
from sortby.expr.types.core import Expr

if TYPE_CHECKING:
    import sortby.expr.operations as ops
    from sortby.expr.types.sortkeys import SortExpr

    KeyLike = Union[Callable[[Any], Any], str, int, SortExpr, ops.SortKey]


def _sort_key(key: KeyLike, direction: Direction | None = None) -> ops.SortKey:
    import sortby.expr.operations as ops

    try:
        return ops.SortKey.__coerce__(key, direction=direction)
    except CoercionError as e:
        raise InputTypeError(str(e)) from e


class Materializable(Expr):
    __slots__ = ()

    def execute(self, **kwargs: Any) -> list:
        """Evaluate the expression and return the elements as a new list.

        Parameters
        ----------
        kwargs
            Keyword arguments passed to `sortby.backends.python.execute`,
            e.g. ``strategy="compare"``.
        """
        from sortby.backends.python import execute

        return execute(self, **kwargs)

    def to_list(self) -> list:
        return self.execute()

    def __iter__(self) -> Iterator:
        return iter(self.execute())


@public
class SequenceExpr(Materializable):
    """A sequence of elements which can be sorted by derived keys."""

    __slots__ = ()

    def sort_by(self, key: KeyLike) -> SortedExpr:
        """Sort the elements by the ascending values of `key`.

        Parameters
        ----------
        key
            A callable extracting the sort key from an element, or the name
            (or index) of the field holding it.

        Returns
        -------
        SortedExpr
            Builder which can be refined with further tie-breaking keys.

        Examples
        --------
        >>> import sortby
        >>> words = sortby.sequence(["pear", "fig", "apple"])
        >>> words.sort_by(len).to_list()
        ['fig', 'pear', 'apple']
        """
        return self.order_by(_sort_key(key, Direction.ASCENDING))

    def sort_by_desc(self, key: KeyLike) -> SortedExpr:
        """Sort the elements by the descending values of `key`.

        Elements with equal keys keep their original relative order.
        """
        return self.order_by(_sort_key(key, Direction.DESCENDING))

    def order_by(self, *keys: KeyLike) -> SortedExpr:
        """Sort the elements by multiple keys at once.

        Plain keys sort in ascending order, wrap them with `sortby.desc` to
        reverse the direction.

        Examples
        --------
        >>> import sortby
        >>> rows = [("b", 2), ("a", 2), ("c", 1)]
        >>> sortby.sequence(rows).order_by(sortby.desc(1), 0).to_list()
        [('a', 2), ('b', 2), ('c', 1)]
        """
        import sortby.expr.operations as ops

        if not keys:
            raise InputError("order_by() requires at least one sort key")
        sort_keys = tuple(map(_sort_key, keys))
        return ops.SortBy(self.op(), sort_keys).to_expr()


@public
class SortedExpr(Materializable):
    """A sequence ordered by a prioritized list of sort keys.

    Every refinement returns a new expression, the expression it was derived
    from remains unchanged.
    """

    __slots__ = ()

    @property
    def source(self) -> SequenceExpr:
        return self.op().source.to_expr()

    @property
    def sort_keys(self) -> tuple[ops.SortKey, ...]:
        return self.op().sort_keys

    def then_sort_by(self, key: KeyLike) -> SortedExpr:
        """Break the remaining ties by the ascending values of `key`."""
        return self.op().then(_sort_key(key, Direction.ASCENDING)).to_expr()

    def then_sort_by_desc(self, key: KeyLike) -> SortedExpr:
        """Break the remaining ties by the descending values of `key`."""
        return self.op().then(_sort_key(key, Direction.DESCENDING)).to_expr()
