from __future__ import annotations

import math
from typing import Any

from cardstamp.constants import UNBOUNDED_NAMES
from cardstamp.errors import DomainError, StructuralError
from cardstamp.models import DeckContext


def _is_unbounded(value: Any) -> bool:
    return isinstance(value, str) and value in UNBOUNDED_NAMES


def _check_dimension(key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise DomainError(f"{key} must be a positive integer or unbounded, got: {value!r}")
    return value


def resolve_grid(opts: dict[str, Any], ctx: DeckContext) -> dict[str, Any]:
    """Resolve ``columns``/``rows`` when one of them is unbounded.

    The fixed dimension F becomes ``rows`` and ``columns`` becomes
    ``ceil(card_count / F)``, whichever side was unbounded.
    """
    columns = opts.get("columns")
    rows = opts.get("rows")
    columns_open = _is_unbounded(columns)
    rows_open = _is_unbounded(rows)

    if columns_open and rows_open:
        raise StructuralError("columns and rows cannot both be unbounded")
    if not columns_open and not rows_open:
        _check_dimension("columns", columns)
        _check_dimension("rows", rows)
        return dict(opts)

    fixed = _check_dimension("rows" if columns_open else "columns", rows if columns_open else columns)
    return {**opts, "rows": fixed, "columns": math.ceil(ctx.card_count / fixed)}
