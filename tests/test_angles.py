import math

import pytest

from cardstamp.errors import DomainError
from cardstamp.models import CLOCKWISE, COUNTERCLOCKWISE, DeckContext
from cardstamp.resolve.angles import resolve_rotate


def test_resolve_rotate_clockwise(deck: DeckContext) -> None:
    assert resolve_rotate({"rotate": CLOCKWISE}, deck) == {"angle": 0.5 * math.pi, "rotate": "clockwise"}


def test_resolve_rotate_counterclockwise(deck: DeckContext) -> None:
    assert resolve_rotate({"rotate": COUNTERCLOCKWISE}, deck) == {
        "angle": 1.5 * math.pi,
        "rotate": "counterclockwise",
    }


def test_resolve_rotate_numeric_passes_through(deck: DeckContext) -> None:
    assert resolve_rotate({"rotate": 0.25}, deck) == {"rotate": 0.25, "angle": 0.25}
    assert resolve_rotate({"rotate": True}, deck)["angle"] == 0.5 * math.pi
    assert resolve_rotate({"x": 1}, deck) == {"x": 1}


def test_resolve_rotate_rejects_unknown_symbol(deck: DeckContext) -> None:
    with pytest.raises(DomainError):
        resolve_rotate({"rotate": "sideways"}, deck)
