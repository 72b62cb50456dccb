from __future__ import annotations

from typing import Any

from PIL import ImageColor

from cardstamp.errors import DomainError, StructuralError
from cardstamp.models import DeckContext, ResolvedColor


def _is_quad(value: Any) -> bool:
    return (
        isinstance(value, tuple)
        and len(value) == 4
        and all(isinstance(v, (int, float)) and not isinstance(v, bool) and 0.0 <= v <= 1.0 for v in value)
    )


def parse_color(value: Any, custom_colors: dict[str, str]) -> ResolvedColor:
    if isinstance(value, ResolvedColor):
        return value
    if _is_quad(value):
        return ResolvedColor(*(float(v) for v in value))
    if not isinstance(value, str):
        raise DomainError(f"unknown color name: {value}")

    text = str(value).strip()
    spec = custom_colors.get(text, text)
    try:
        rgb = ImageColor.getrgb(str(spec))
    except ValueError as exc:
        raise DomainError(f"unknown color name: {text}") from exc
    return ResolvedColor.from_rgb255(rgb)


def resolve_color(
    opts: dict[str, Any],
    ctx: DeckContext,
    *,
    nilable: bool = False,
    key: str = "color",
) -> dict[str, Any]:
    """Resolve every element of ``opts[key]`` into a ``ResolvedColor``.

    Aliases from ``ctx.custom_colors`` take precedence over Pillow's named
    colors. ``None`` elements survive only when ``nilable`` is set.
    """
    value = opts.get(key)
    items = list(value) if isinstance(value, list) else [value]
    resolved: list[ResolvedColor | None] = []
    for item in items:
        if item is None:
            if not nilable:
                raise StructuralError(f"{key} cannot be nil")
            resolved.append(None)
            continue
        resolved.append(parse_color(item, ctx.custom_colors))
    return {**opts, key: resolved}
