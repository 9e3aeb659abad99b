from __future__ import annotations

from sortby.expr.operations.core import *  # noqa: F403
from sortby.expr.operations.relations import *  # noqa: F403
from sortby.expr.operations.sortkeys import *  # noqa: F403
