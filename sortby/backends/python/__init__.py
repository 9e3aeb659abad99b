"""In-process execution of sortby expressions."""

from __future__ import annotations

from sortby.backends.python.core import execute, execute_node

__all__ = ["execute", "execute_node"]
