from __future__ import annotations

import logging
from typing import Any

from cardstamp.models import DeckContext, LayoutResult

LOGGER = logging.getLogger(__name__)


def _layout_names(value: Any, card_count: int) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value] * card_count


def _merge_attribute(current: Any, index: int, value: Any, size: int) -> Any:
    if current is not None and not isinstance(current, list):
        # explicit scalar wins outright and is broadcast later
        return current
    merged = list(current or [])
    if len(merged) < size:
        merged.extend([None] * (size - len(merged)))
    if merged[index] is None:
        merged[index] = value
    return merged


def resolve_layout(opts: dict[str, Any], ctx: DeckContext) -> LayoutResult:
    """Merge the named layout entries positionally into ``opts``.

    Every attribute contributed by any entry becomes a list aligned with
    ``layout``; positions whose entry lacks the attribute hold ``None``.
    Missing entries are reported, never raised.
    """
    if opts.get("layout") is None:
        return LayoutResult(options=dict(opts))

    result = dict(opts)
    names = _layout_names(opts["layout"], ctx.card_count)
    result["layout"] = names
    size = len(names)
    diagnostics: list[str] = []
    missing: list[str] = []

    for index, name in enumerate(names):
        if name is None:
            continue
        entry = ctx.layouts.get(str(name))
        if entry is None:
            message = f"Layout entry '{name}' does not exist."
            LOGGER.warning("Layout entry '%s' does not exist.", name)
            diagnostics.append(message)
            missing.append(str(name))
            continue
        for key, value in entry.items():
            result[key] = _merge_attribute(result.get(key), index, value, size)

    if missing:
        LOGGER.debug("layout lookup missed %s; known entries: %s", missing, sorted(ctx.layouts))

    return LayoutResult(options=result, diagnostics=diagnostics)
