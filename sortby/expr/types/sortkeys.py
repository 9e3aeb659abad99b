from __future__ import annotations

from public import public

from sortby.common.enums import Direction
from sortby.expr.types.core import Expr


@public
class SortExpr(Expr):
    """A standalone sort key, usable as an argument of `order_by`."""

    def get_name(self) -> str:
        return self.op().name

    @property
    def direction(self) -> Direction:
        return self.op().direction

    def asc(self) -> SortExpr:
        return self.op().copy(direction=Direction.ASCENDING).to_expr()

    def desc(self) -> SortExpr:
        return self.op().copy(direction=Direction.DESCENDING).to_expr()
