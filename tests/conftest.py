from __future__ import annotations

from pathlib import Path

import pytest

from cardstamp.models import DeckContext


class FakeFilesystem:
    def __init__(self, dirs: set[str] | None = None, files: set[str] | None = None) -> None:
        self.dirs = set(dirs or ())
        self.files = set(files or ())
        self.created: list[str] = []

    def exists(self, path: Path) -> bool:
        return str(path) in self.files or str(path) in self.dirs

    def is_dir(self, path: Path) -> bool:
        return str(path) in self.dirs

    def ensure_directory(self, path: Path) -> bool:
        if str(path) in self.dirs:
            return False
        self.dirs.add(str(path))
        self.created.append(str(path))
        return True


@pytest.fixture
def deck() -> DeckContext:
    return DeckContext(
        layouts={
            "blah": {"x": 25},
            "apples": {"x": 35},
            "oranges": {"y": 45},
        },
        card_count=2,
        custom_colors={},
    )


@pytest.fixture
def fake_fs() -> FakeFilesystem:
    return FakeFilesystem()
