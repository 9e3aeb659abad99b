from __future__ import annotations

from collections.abc import Iterable, Iterator

from public import public

from sortby.common.exceptions import InputError
from sortby.expr.operations.core import Node
from sortby.expr.operations.sortkeys import SortKey


@public
class Relation(Node):
    """An ordered collection of elements."""


@public
class Source(Relation):
    """The sequence of elements to sort, owned by the caller.

    Sources compare and hash by the identity of the wrapped iterable. One-shot
    iterators are drained on first materialization and the drained elements are
    kept, so the same source can be evaluated repeatedly.
    """

    __slots__ = ("_materialized",)

    data: Iterable

    def __compute_hash__(self) -> int:
        return hash((self.__class__, id(self.data)))

    def __equals__(self, other) -> bool:
        return self.data is other.data

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(data=<{type(self.data).__name__}>)"

    def materialize(self) -> list:
        """Return a fresh list holding the elements of the source."""
        if not isinstance(self.data, Iterator):
            return list(self.data)
        try:
            elements = self._materialized
        except AttributeError:
            elements = tuple(self.data)
            object.__setattr__(self, "_materialized", elements)
        return list(elements)

    def to_expr(self):
        import sortby.expr.types as ir

        return ir.SequenceExpr(self)


@public
class SortBy(Relation):
    """Order the elements of a relation by a prioritized tuple of sort keys.

    The first key is the primary key, every following key only breaks the ties
    left by all the keys preceding it.
    """

    source: Relation
    sort_keys: tuple[SortKey, ...]

    def __init__(self, source, sort_keys):
        if not sort_keys:
            raise InputError("At least one sort key is required")
        super().__init__(source=source, sort_keys=sort_keys)

    def then(self, key: SortKey) -> SortBy:
        """Return a new node with `key` appended as the lowest priority key."""
        return self.copy(sort_keys=self.sort_keys + (key,))

    def to_expr(self):
        import sortby.expr.types as ir

        return ir.SortedExpr(self)
