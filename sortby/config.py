from __future__ import annotations

import contextlib
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from sortby.common.enums import Strategy
from sortby.common.grounds import Annotable


class Config(Annotable):
    """Mutable, validated configuration namespace."""

    def get(self, key: str) -> Any:
        value = self
        for field in key.split("."):
            value = getattr(value, field)
        return value

    def set(self, key: str, value: Any) -> None:
        *prefix, key = key.split(".")
        conf = self
        for field in prefix:
            conf = getattr(conf, field)
        setattr(conf, key, value)

    @contextlib.contextmanager
    def _with_temporary(self, options: Mapping[str, Any]) -> Iterator[None]:
        old = {key: self.get(key) for key in options}
        try:
            for key, value in options.items():
                self.set(key, value)
            yield
        finally:
            for key, value in old.items():
                self.set(key, value)


class Options(Config):
    """Sortby configuration options.

    Attributes
    ----------
    strategy : Strategy
        Key comparison strategy of the terminal sort, either ``"keys"`` to
        extract each element's keys once up front or ``"compare"`` to extract
        them again on every comparison.
    verbose : bool
        Run in verbose mode if [](`True`)
    verbose_log : Callable | None
        A callable to use when logging.
    """

    strategy: Strategy = Strategy.KEYS
    verbose: bool = False
    verbose_log: Callable | None = None


options = Options()
