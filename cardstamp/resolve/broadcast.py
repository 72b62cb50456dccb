from __future__ import annotations

from typing import Any, Iterable

from cardstamp.constants import NON_EXPANDING_KEYS
from cardstamp.models import DeckContext


def broadcast(opts: dict[str, Any], ctx: DeckContext, keys: Iterable[str]) -> dict[str, Any]:
    """Repeat scalar values of ``keys`` once per card; lists are left alone."""
    result = dict(opts)
    for key in keys:
        if key in NON_EXPANDING_KEYS or key not in result:
            continue
        value = result[key]
        if isinstance(value, list):
            continue
        result[key] = [value] * ctx.card_count
    return result
