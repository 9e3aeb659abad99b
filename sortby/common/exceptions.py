"""Exceptions raised by sortby.

Errors raised by user supplied key extractors or by comparing the extracted
keys are never wrapped, they propagate unchanged from the terminal operation.
"""

from __future__ import annotations


class SortByError(Exception):
    """Exception base class for all sortby errors."""


class InputError(SortByError, ValueError):
    """Semantically invalid input, e.g. an empty list of sort keys."""


class InputTypeError(SortByError, TypeError):
    """A value cannot be used as a sort key."""


class ValidationError(SortByError, TypeError):
    """A field or option value doesn't match its declared type."""


class CoercionError(SortByError):
    """Raised by ``__coerce__`` implementations when coercion is impossible."""
