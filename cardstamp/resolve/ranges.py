from __future__ import annotations

from typing import Any

from cardstamp.constants import ALL_NAME
from cardstamp.errors import DomainError, StructuralError
from cardstamp.models import CardRange, DeckContext


def _to_card_range(value: Any) -> CardRange:
    if isinstance(value, CardRange):
        return value
    if isinstance(value, bool):
        raise DomainError(f"invalid card range: {value!r}")
    if isinstance(value, int):
        return CardRange(value, value)
    if isinstance(value, range):
        if value.step != 1:
            raise DomainError(f"card range must have a step of 1, got: {value!r}")
        return CardRange(value.start, value.stop - 1)
    if isinstance(value, (list, tuple)) and len(value) == 2 and all(
        isinstance(v, int) and not isinstance(v, bool) for v in value
    ):
        return CardRange(value[0], value[1])
    raise DomainError(f"invalid card range: {value!r}")


def resolve_range(opts: dict[str, Any], ctx: DeckContext) -> dict[str, Any]:
    value = opts.get("range")
    if value is None:
        raise StructuralError("Range cannot be nil")

    full = ctx.full_range
    if isinstance(value, str):
        if value != ALL_NAME:
            raise DomainError(f"unknown range name: {value}")
        return {**opts, "range": full}

    card_range = _to_card_range(value)
    if card_range.lo < 0 or card_range.hi > full.hi:
        raise DomainError(f"{card_range} is outside of deck range of {full}")
    return {**opts, "range": card_range}
