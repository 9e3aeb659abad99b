from __future__ import annotations

import inspect
from abc import ABCMeta, abstractmethod
from typing import Any

from sortby.common.exceptions import ValidationError
from sortby.common.patterns import Pattern
from sortby.common.typing import evaluate_typehint

EMPTY = inspect.Parameter.empty


class BaseMeta(ABCMeta):

    __slots__ = ()

    def __new__(metacls, clsname, bases, dct, **kwargs):
        # enforce slot definitions
        dct.setdefault("__slots__", ())
        return super().__new__(metacls, clsname, bases, dct, **kwargs)

    def __call__(cls, *args, **kwargs) -> Base:
        return cls.__create__(*args, **kwargs)


class Base(metaclass=BaseMeta):

    __slots__ = ('__weakref__',)

    @classmethod
    def __create__(cls, *args, **kwargs) -> Base:
        return type.__call__(cls, *args, **kwargs)


class Argument:
    """An annotated field: the pattern validating it and its default value."""

    __slots__ = ("pattern", "default")

    def __init__(self, pattern: Pattern, default: Any = EMPTY) -> None:
        self.pattern = pattern
        self.default = default

    def validate(self, value, name):
        try:
            return self.pattern.validate(value, {})
        except ValidationError as e:
            raise ValidationError(f"Invalid value for field {name!r}: {e}") from e


class AnnotableMeta(BaseMeta):
    """Metaclass to turn class annotations into a validatable function
    signature."""

    __slots__ = ()

    def __new__(metacls, clsname, bases, dct, **kwargs):
        # inherit the fields from parent classes
        arguments = {}
        for parent in bases:
            arguments.update(getattr(parent, "__arguments__", {}))

        # collect type annotations and convert them to patterns
        slots = list(dct.pop('__slots__', []))
        module = dct.get('__module__')
        annots = dct.get('__annotations__')
        if annots is None:
            # lazily evaluated annotations, python 3.14+
            annotate = dct.get('__annotate__')
            annots = annotate(1) if annotate else {}
        for name, annot in annots.items():
            typehint = evaluate_typehint(annot, module)
            pattern = Pattern.from_typehint(typehint)
            default = dct.pop(name, EMPTY)
            if name not in arguments:
                slots.append(name)
            arguments[name] = Argument(pattern, default)

        # mandatory arguments must precede the ones having default values
        ordered = sorted(arguments, key=lambda n: arguments[n].default is not EMPTY)
        signature = inspect.Signature(
            [
                inspect.Parameter(
                    name,
                    inspect.Parameter.POSITIONAL_OR_KEYWORD,
                    default=arguments[name].default,
                )
                for name in ordered
            ]
        )
        argnames = tuple(ordered)

        dct.update(
            __arguments__=arguments,
            __argnames__=argnames,
            __match_args__=argnames,
            __signature__=signature,
            __slots__=tuple(slots),
        )
        return super().__new__(metacls, clsname, bases, dct, **kwargs)


class Immutable(Base):
    def __setattr__(self, name: str, _: Any) -> None:
        raise TypeError(
            f"Attribute {name!r} cannot be assigned to immutable instance of "
            f"type {type(self)}"
        )


class Annotable(Base, metaclass=AnnotableMeta):
    """Base class for objects with custom validation rules."""

    @classmethod
    def __create__(cls, *args, **kwargs):
        bound = cls.__signature__.bind(*args, **kwargs)
        bound.apply_defaults()
        # construct the instance by passing the validated keyword arguments
        kwargs = {
            name: cls.__arguments__[name].validate(value, name)
            for name, value in bound.arguments.items()
        }
        return super().__create__(**kwargs)

    def __init__(self, **kwargs) -> None:
        # set the already validated fields using object.__setattr__
        for name, value in kwargs.items():
            object.__setattr__(self, name, value)
        # allow child classes to do some post-initialization
        self.__post_init__()

    def __post_init__(self) -> None:
        pass

    def __setattr__(self, name, value) -> None:
        if argument := self.__arguments__.get(name):
            value = argument.validate(value, name)
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        args = (f"{n}={getattr(self, n)!r}" for n in self.__argnames__)
        argstring = ", ".join(args)
        return f"{self.__class__.__name__}({argstring})"

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented

        return all(
            getattr(self, n, None) == getattr(other, n, None)
            for n in self.__argnames__
        )

    def copy(self, **overrides: Any) -> Annotable:
        """Return a copy of this object with the given overrides.

        Parameters
        ----------
        overrides
            Argument override values

        Returns
        -------
        Annotable
            New instance of the copied object
        """
        kwargs = {name: getattr(self, name) for name in self.__argnames__}
        kwargs.update(overrides)
        return self.__class__(**kwargs)


class Comparable(Base):
    def __eq__(self, other) -> bool:
        if self is other:
            return True

        # type comparison should be cheap
        if type(self) is not type(other):
            return NotImplemented

        return self.__equals__(other)

    @abstractmethod
    def __equals__(self, other) -> bool:
        ...


class Concrete(Immutable, Comparable, Annotable):
    """Opinionated base class for immutable data classes."""

    __slots__ = ("__args__", "__precomputed_hash__")

    def __post_init__(self) -> None:
        # optimizations to store frequently accessed attributes
        args = tuple(getattr(self, name) for name in self.__argnames__)
        object.__setattr__(self, "__args__", args)
        # precompute the hash value to avoid repeating expensive hashing
        object.__setattr__(self, "__precomputed_hash__", self.__compute_hash__())
        # initialize the remaining attributes
        super().__post_init__()

    def __compute_hash__(self) -> int:
        return hash((self.__class__, self.__args__))

    def __hash__(self):
        return self.__precomputed_hash__

    def __equals__(self, other):
        return self.__args__ == other.__args__

    @property
    def args(self):
        return self.__args__

    @property
    def argnames(self):
        return self.__argnames__
