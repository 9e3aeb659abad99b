from __future__ import annotations

from abc import abstractmethod

from public import public

from sortby.common.grounds import Concrete


@public
class Node(Concrete):
    def equals(self, other):
        if not isinstance(other, Node):
            raise TypeError(
                f"invalid equality comparison between Node and {type(other)}"
            )
        return self == other

    @abstractmethod
    def to_expr(self):
        ...
