from __future__ import annotations

import sys
from abc import ABC, abstractmethod

from sortby.common.exceptions import CoercionError

__all__ = ["Coercible", "CoercionError", "evaluate_typehint"]


def evaluate_typehint(annot, module_name):
    """Evaluate a string annotation in the namespace of its defining module."""
    if not isinstance(annot, str):
        return annot
    module = sys.modules.get(module_name, None)
    return eval(annot, getattr(module, '__dict__', None))


class Coercible(ABC):
    """Protocol for defining coercible types.

    Coercible types define a special ``__coerce__`` method that accepts an object
    and returns an instance of the type. Used in conjunction with the
    ``CoercedTo`` pattern to coerce annotated fields to a specific type.
    """

    __slots__ = ()

    @classmethod
    @abstractmethod
    def __coerce__(cls, value):
        ...
