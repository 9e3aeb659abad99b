from abc import ABCMeta
from enum import Enum, EnumMeta

from public import public

from sortby.common.typing import Coercible, CoercionError


class ABCEnumMeta(EnumMeta, ABCMeta):
    pass


class Choice(Coercible, Enum, metaclass=ABCEnumMeta):
    @classmethod
    def __coerce__(cls, value):
        if isinstance(value, cls):
            return value

        if not isinstance(value, str):
            raise CoercionError(f"Unable to coerce {value!r} to {cls.__name__}")

        # first look for aliases
        value = value.lower()
        value = cls.aliases().get(value, value)

        # then look for the enum value
        try:
            return cls(value)
        except ValueError:
            pass

        # then look for the enum name
        try:
            return cls[value.upper()]
        except KeyError:
            raise CoercionError(f"Unable to coerce {value!r} to {cls.__name__}")

    @classmethod
    def aliases(cls):
        return {}


@public
class Direction(Choice):
    ASCENDING = "asc"
    DESCENDING = "desc"

    @classmethod
    def aliases(cls):
        return {
            '+': 'asc',
            '-': 'desc',
            'ascending': 'asc',
            'descending': 'desc',
        }

    @property
    def ascending(self) -> bool:
        return self is Direction.ASCENDING

    @property
    def descending(self) -> bool:
        return self is Direction.DESCENDING


@public
class Strategy(Choice):
    """How keys are compared during the terminal sort.

    ``KEYS`` extracts every element's composite key once before sorting
    (decorate-sort-undecorate), ``COMPARE`` re-extracts the keys of both
    elements on each pairwise comparison.
    """

    KEYS = "keys"
    COMPARE = "compare"

    @classmethod
    def aliases(cls):
        return {
            'cmp': 'compare',
            'comparator': 'compare',
            'decorate': 'keys',
            'dsu': 'keys',
        }
