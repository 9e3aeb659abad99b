from __future__ import annotations

from typing import TYPE_CHECKING, Any

from public import public

from sortby.common.grounds import Immutable

if TYPE_CHECKING:
    import sortby.expr.operations as ops


@public
class Expr(Immutable):
    """Base expression class.

    Expressions are thin, immutable wrappers around operation nodes which
    provide the user facing API.
    """

    __slots__ = ("_arg",)

    def __init__(self, arg: ops.Node) -> None:
        object.__setattr__(self, "_arg", arg)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._arg!r})"

    def __hash__(self) -> int:
        return hash((self.__class__, self._arg))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Expr):
            return NotImplemented
        return self.equals(other)

    def equals(self, other: Any) -> bool:
        """Return whether this expression is _structurally_ equivalent to `other`.

        Parameters
        ----------
        other
            Another expression

        Examples
        --------
        >>> import sortby
        >>> data = [3, 1, 2]
        >>> sortby.sort_by(data, abs).equals(sortby.sort_by(data, abs))
        True
        >>> sortby.sort_by(data, abs).equals(sortby.sort_by_desc(data, abs))
        False
        """
        if not isinstance(other, Expr):
            raise TypeError(
                f"invalid equality comparison between Expr and {type(other)}"
            )
        return type(self) is type(other) and self._arg.equals(other._arg)

    def op(self) -> ops.Node:
        return self._arg
