from __future__ import annotations

from sortby.expr.types.core import *  # noqa: F403
from sortby.expr.types.relations import *  # noqa: F403
from sortby.expr.types.sortkeys import *  # noqa: F403
