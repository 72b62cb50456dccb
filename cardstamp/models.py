from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, NamedTuple

from cardstamp.errors import DomainError
from cardstamp.filesystem import Filesystem, LocalFilesystem
from cardstamp.layout_loader import load_layouts


class Symbol(str):
    """A bare symbolic name, as opposed to free text.

    Symbols compare and hash like the plain string, so ``Symbol("foo")`` and
    ``"foo"`` select the same layout entry, color alias or sentinel.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f":{str.__str__(self)}"


ALL = Symbol("all")
UNBOUNDED = Symbol("unbounded")
CLOCKWISE = Symbol("clockwise")
COUNTERCLOCKWISE = Symbol("counterclockwise")


class ResolvedColor(NamedTuple):
    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_rgb255(cls, values: tuple[int, ...]) -> "ResolvedColor":
        channels = [max(0, min(255, int(v))) / 255.0 for v in values]
        if len(channels) == 3:
            channels.append(1.0)
        return cls(*channels)

    def to_hex(self) -> str:
        return "#" + "".join(f"{int(round(channel * 255)):02X}" for channel in self)


@dataclass(frozen=True, slots=True)
class CardRange:
    lo: int
    hi: int

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.lo, self.hi + 1))

    def __len__(self) -> int:
        return max(0, self.hi - self.lo + 1)

    def __str__(self) -> str:
        return f"{self.lo}..{self.hi}"


@dataclass(slots=True)
class LayoutResult:
    options: dict[str, Any]
    diagnostics: list[str] = field(default_factory=list)


@dataclass(slots=True)
class DeckContext:
    layouts: dict[str, dict[str, Any]]
    card_count: int
    custom_colors: dict[str, str] = field(default_factory=dict)
    filesystem: Filesystem = field(default_factory=LocalFilesystem)

    def __post_init__(self) -> None:
        if isinstance(self.card_count, bool) or not isinstance(self.card_count, int) or self.card_count < 1:
            raise DomainError(f"card count must be a positive integer, got: {self.card_count!r}")

    @property
    def full_range(self) -> CardRange:
        return CardRange(0, self.card_count - 1)

    @classmethod
    def from_config(
        cls,
        config: dict[str, Any],
        card_count: int,
        base_dir: Path | None = None,
        filesystem: Filesystem | None = None,
    ) -> "DeckContext":
        root = base_dir or Path.cwd()
        layout_paths = [root / str(p) for p in (config.get("layouts") or [])]
        return cls(
            layouts=load_layouts(layout_paths),
            card_count=card_count,
            custom_colors=dict(config.get("custom_colors") or {}),
            filesystem=filesystem or LocalFilesystem(),
        )
