"""Sort sequences by derived keys with chainable tie-breakers.

Examples
--------
>>> import sortby
>>> data = [("Rich", 18), ("Bob", 9), ("Marc", 21), ("Alice", 18)]
>>> sortby.sort_by_desc(data, 1).then_sort_by(0).to_list()
[('Marc', 21), ('Alice', 18), ('Rich', 18), ('Bob', 9)]
"""

from __future__ import annotations

__version__ = "0.1.0"

from sortby import util
from sortby.backends.python import execute
from sortby.common.enums import Direction, Strategy
from sortby.common.exceptions import (
    InputError,
    InputTypeError,
    SortByError,
    ValidationError,
)
from sortby.config import options
from sortby.expr.api import *  # noqa: F403
from sortby.expr.api import __all__ as _api_all

__all__ = [
    "Direction",
    "InputError",
    "InputTypeError",
    "SortByError",
    "Strategy",
    "ValidationError",
    "execute",
    "options",
    "util",
    *_api_all,
]
