"""Typehint driven validation patterns.

The annotations of `sortby.common.grounds.Annotable` subclasses are turned into
patterns with `Pattern.from_typehint`. A pattern either returns the (possibly
coerced) value or the `NoMatch` sentinel, `Pattern.validate` turns the latter
into a `ValidationError`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable
from itertools import zip_longest
from types import UnionType
from typing import Union

from typing_extensions import get_args, get_origin

from sortby.common.exceptions import ValidationError
from sortby.common.typing import Coercible, CoercionError
from sortby.util import is_iterable


class NoMatch:
    """Sentinel value for when a pattern doesn't match."""


class Pattern(ABC, Hashable):
    @classmethod
    def from_typehint(cls, annot: type) -> Pattern:
        """Construct a pattern from a field annotation.

        Supported annotations are plain classes, `Coercible` subclasses,
        unions of those, callables and homogeneous ``tuple[X, ...]``.
        String annotations must be evaluated with ``evaluate_typehint`` first.
        """
        origin, args = get_origin(annot), get_args(annot)

        if origin is None:
            if issubclass(annot, Coercible):
                return CoercedTo(annot)
            return InstanceOf(annot)
        elif origin is UnionType or origin is Union:
            return AnyOf(*map(cls.from_typehint, args))
        elif origin is Callable:
            return InstanceOf(Callable)
        elif origin is tuple and len(args) == 2 and args[1] is Ellipsis:
            return SequenceOf(cls.from_typehint(args[0]), tuple)
        raise NotImplementedError(
            f"Cannot create validator from annotation {annot} {origin}"
        )

    @abstractmethod
    def match(self, value, context):
        ...

    @abstractmethod
    def __eq__(self, other):
        ...

    def validate(self, value, context):
        result = self.match(value, context=context)
        if result is NoMatch:
            raise ValidationError(f"{value!r} doesn't match {self}")
        return result


class Matcher(Pattern):
    """Immutable pattern storing its arguments in slots, with a precomputed hash."""

    __slots__ = ("__precomputed_hash__",)

    def __init__(self, *args):
        for name, value in zip_longest(self.__slots__, args):
            object.__setattr__(self, name, value)
        object.__setattr__(self, "__precomputed_hash__", hash(args))

    def __eq__(self, other):
        if self is other:
            return True
        if type(self) is not type(other):
            return NotImplemented
        return all(getattr(self, n) == getattr(other, n) for n in self.__slots__)

    def __hash__(self):
        return self.__precomputed_hash__

    def __setattr__(self, name, value):
        raise AttributeError("Can't set attributes on immutable pattern instance")

    def __repr__(self):
        fields = ", ".join(f"{k}={getattr(self, k)!r}" for k in self.__slots__)
        return f"{self.__class__.__name__}({fields})"


class InstanceOf(Matcher):
    __slots__ = ("type",)

    def match(self, value, context):
        return value if isinstance(value, self.type) else NoMatch

    def __repr__(self):
        return f"InstanceOf({getattr(self.type, '__name__', self.type)!r})"


class CoercedTo(Matcher):
    """Coerce a value with the ``__coerce__`` method of a `Coercible` type."""

    __slots__ = ("type",)

    def match(self, value, context):
        try:
            value = self.type.__coerce__(value)
        except CoercionError:
            return NoMatch
        return value if isinstance(value, self.type) else NoMatch

    def __repr__(self):
        return f"CoercedTo({self.type.__name__!r})"


class AnyOf(Matcher):
    __slots__ = ("patterns",)

    def __init__(self, *patterns):
        super().__init__(patterns)

    def match(self, value, context):
        for pattern in self.patterns:
            result = pattern.match(value, context=context)
            if result is not NoMatch:
                return result
        return NoMatch


class SequenceOf(Matcher):
    """Match every item of an iterable and collect the results into `type`."""

    __slots__ = ("item_pattern", "type")

    def __init__(self, item_pattern, type=tuple):
        super().__init__(item_pattern, type)

    def match(self, values, context):
        if not is_iterable(values):
            return NoMatch

        result = []
        for value in values:
            value = self.item_pattern.match(value, context=context)
            if value is NoMatch:
                return NoMatch
            result.append(value)

        return self.type(result)
