"""Sort key operations."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from public import public

from sortby import util
from sortby.common.enums import Direction
from sortby.common.exceptions import CoercionError
from sortby.common.typing import Coercible
from sortby.expr.operations.core import Node


@public
class Field(Node):
    """Extract a named field or a positional item from an element.

    Names are looked up as items of mappings and as attributes of any other
    object, dotted names descend into nested fields. Integer names index into
    sequences.
    """

    name: str | int

    def __call__(self, element):
        if isinstance(self.name, int):
            return element[self.name]

        value = element
        for part in self.name.split("."):
            if isinstance(value, Mapping):
                value = value[part]
            else:
                value = getattr(value, part)
        return value

    def to_expr(self):
        return SortKey(self).to_expr()


@public
class SortKey(Node, Coercible):
    """A single sort step: a key extractor and the direction to order by."""

    extractor: Callable
    direction: Direction = Direction.ASCENDING

    @classmethod
    def __coerce__(cls, value, direction=None):
        from sortby.expr.types import Expr

        if isinstance(value, Expr):
            value = value.op()

        if isinstance(value, SortKey):
            key = value
        elif isinstance(value, (str, int)) and not isinstance(value, bool):
            key = cls(Field(value))
        elif callable(value):
            key = cls(value)
        else:
            raise CoercionError(f"Unable to use {value!r} as a sort key")

        if direction is not None and key.direction is not direction:
            key = key.copy(direction=direction)
        return key

    def __compute_hash__(self) -> int:
        try:
            return super().__compute_hash__()
        except TypeError:
            # callable objects defining __eq__ without __hash__
            return hash((self.__class__, id(self.extractor), self.direction))

    @property
    def ascending(self) -> bool:
        return self.direction.ascending

    @property
    def descending(self) -> bool:
        return self.direction.descending

    @property
    def name(self) -> str:
        if isinstance(self.extractor, Field):
            return str(self.extractor.name)
        return util.describe(self.extractor)

    def to_expr(self):
        import sortby.expr.types as ir

        return ir.SortExpr(self)
