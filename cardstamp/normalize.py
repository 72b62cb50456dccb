from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable, Iterable

from cardstamp.constants import DEFAULT_COLOR, DEFAULT_COLUMNS, DEFAULT_DIR, EXPANDING_KEYS
from cardstamp.errors import StructuralError
from cardstamp.models import ALL, UNBOUNDED, DeckContext
from cardstamp.resolve.angles import resolve_rotate
from cardstamp.resolve.broadcast import broadcast
from cardstamp.resolve.colors import resolve_color
from cardstamp.resolve.grid import resolve_grid
from cardstamp.resolve.layouts import resolve_layout
from cardstamp.resolve.paths import resolve_dir, resolve_file
from cardstamp.resolve.ranges import resolve_range

LOGGER = logging.getLogger(__name__)

Resolver = Callable[[dict[str, Any], DeckContext], dict[str, Any]]

# Applied in this order, after layouts, defaults and expansion.
RESOLVERS: dict[str, Resolver] = {
    "range": resolve_range,
    "file": partial(resolve_file, must_exist=True),
    "file_to_save": partial(resolve_file, must_exist=False),
    "files": partial(resolve_file, must_exist=False, key="files"),
    "color": partial(resolve_color, nilable=False),
    "nilable_color": partial(resolve_color, nilable=True),
    "fill_color": partial(resolve_color, nilable=True, key="fill_color"),
    "stroke_color": partial(resolve_color, nilable=True, key="stroke_color"),
    "dir": partial(resolve_dir, key="dir", allow_create=False),
    "creatable_dir": partial(resolve_dir, key="dir", allow_create=True),
    "rotate": resolve_rotate,
    "rows": resolve_grid,
}

NEEDS = frozenset({"layout", "expand", *RESOLVERS})


def _apply_defaults(opts: dict[str, Any], needs: set[str], default_dir: str) -> dict[str, Any]:
    result = dict(opts)
    if "range" in needs:
        result.setdefault("range", ALL)
    if "color" in needs:
        result.setdefault("color", DEFAULT_COLOR)
    if needs & {"dir", "creatable_dir"}:
        result.setdefault("dir", default_dir)
    if "rows" in needs and "columns" not in result and "rows" not in result:
        result["columns"] = DEFAULT_COLUMNS
        result["rows"] = UNBOUNDED
    return result


def normalize(
    opts: dict[str, Any],
    ctx: DeckContext,
    needs: Iterable[str],
    *,
    strict_layouts: bool = False,
    default_dir: str = DEFAULT_DIR,
) -> dict[str, Any]:
    """Resolve a raw drawing-option map against the deck context.

    Only the keys touched by ``needs`` change; everything else passes
    through. The input map is never mutated.
    """
    wanted = set(needs)
    unknown = wanted - NEEDS
    if unknown:
        raise ValueError(f"unknown option needs: {', '.join(sorted(unknown))}")

    result = dict(opts)
    if "layout" in wanted:
        layout = resolve_layout(result, ctx)
        if strict_layouts and layout.diagnostics:
            raise StructuralError(layout.diagnostics[0])
        result = layout.options

    result = _apply_defaults(result, wanted, default_dir)
    if "expand" in wanted:
        result = broadcast(result, ctx, EXPANDING_KEYS)

    for need, resolver in RESOLVERS.items():
        if need in wanted:
            result = resolver(result, ctx)

    LOGGER.debug("normalized %s -> %s", sorted(wanted), sorted(result))
    return result
