from __future__ import annotations

from typing import Any

from cardstamp.constants import CLOCKWISE_NAME, ROTATION_ANGLES
from cardstamp.errors import DomainError
from cardstamp.models import DeckContext


def resolve_rotate(opts: dict[str, Any], ctx: DeckContext) -> dict[str, Any]:
    rotate = opts.get("rotate")
    if rotate is None or rotate is False:
        return dict(opts)
    if rotate is True:
        return {**opts, "angle": ROTATION_ANGLES[CLOCKWISE_NAME]}
    if isinstance(rotate, (int, float)):
        return {**opts, "angle": rotate}
    if isinstance(rotate, str) and rotate in ROTATION_ANGLES:
        return {**opts, "angle": ROTATION_ANGLES[rotate]}
    raise DomainError(f"invalid rotate value: {rotate!r}, expected clockwise, counterclockwise or an angle")
