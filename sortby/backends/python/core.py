from __future__ import annotations

from typing import Any

from multipledispatch import Dispatcher

import sortby.expr.operations as ops
import sortby.expr.types as ir
from sortby import util
from sortby.backends.python.keys import compared_key, decorated_key
from sortby.common.enums import Strategy
from sortby.config import options


def execute(expr: ir.Expr | ops.Node, strategy: Strategy | str | None = None) -> list:
    """Evaluate an expression and return its elements as a new list.

    Parameters
    ----------
    expr
        Expression or operation node to evaluate
    strategy
        Override ``sortby.options.strategy`` for this evaluation

    Returns
    -------
    list
        A new list, the source of the expression is never modified
    """
    op = expr.op() if isinstance(expr, ir.Expr) else expr
    if strategy is None:
        strategy = options.strategy
    else:
        strategy = Strategy.__coerce__(strategy)
    return _evaluate(op, strategy=strategy)


def _evaluate(op: ops.Node, **kwargs: Any) -> Any:
    args = tuple(
        _evaluate(arg, **kwargs) if isinstance(arg, ops.Relation) else arg
        for arg in op.args
    )
    return execute_node(op, *args, **kwargs)


# Individual operation execution
execute_node = Dispatcher(
    'execute_node',
    doc=(
        'Execute an operation node.\n\n'
        'The first argument is the node itself, the remaining ones are its '
        'arguments with the child relations already evaluated to lists.'
    ),
)


@execute_node.register(ops.Source, object)
def execute_source(op, data, **kwargs):
    return op.materialize()


@execute_node.register(ops.SortBy, list, tuple)
def execute_sort_by(op, elements, sort_keys, strategy=Strategy.KEYS, **kwargs):
    util.log(
        f"sorting {len(elements)} elements by {len(sort_keys)} key(s) "
        f"using the {strategy.value!r} strategy: "
        + ", ".join(f"{key.name} {key.direction.value}" for key in sort_keys)
    )
    if strategy is Strategy.COMPARE:
        key = compared_key(sort_keys)
    else:
        key = decorated_key(sort_keys)
    return sorted(elements, key=key)
