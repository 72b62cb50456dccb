from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from cardstamp.errors import StructuralError
from cardstamp.models import DeckContext

LOGGER = logging.getLogger(__name__)


def _absolute(value: Any) -> Path:
    return Path(str(value)).expanduser().resolve(strict=False)


def resolve_file(
    opts: dict[str, Any],
    ctx: DeckContext,
    *,
    must_exist: bool = True,
    key: str = "file",
) -> dict[str, Any]:
    value = opts.get(key)
    if value is None:
        raise StructuralError(f"{key} cannot be nil")

    def _one(item: Any) -> str:
        path = _absolute(item)
        if must_exist and not ctx.filesystem.exists(path):
            raise StructuralError(f"File {path} does not exist!")
        return str(path)

    if isinstance(value, (list, tuple)):
        return {**opts, key: [_one(item) for item in value]}
    return {**opts, key: _one(value)}


def resolve_dir(
    opts: dict[str, Any],
    ctx: DeckContext,
    key: str = "dir",
    *,
    allow_create: bool = False,
) -> dict[str, Any]:
    """Check that ``opts[key]`` names a directory, creating it when allowed.

    The option map comes back unchanged; creation is the only side effect.
    """
    value = opts.get(key)
    if value is None:
        raise StructuralError(f"{key} cannot be nil")

    path = Path(str(value)).expanduser()
    if ctx.filesystem.is_dir(path):
        return dict(opts)
    if ctx.filesystem.exists(path):
        raise StructuralError(f"'{value}' is not a directory!")
    if not allow_create:
        raise StructuralError(f"'{value}' does not exist!")

    LOGGER.warning("Dir '%s' does not exist, creating it.", value)
    ctx.filesystem.ensure_directory(path)
    return dict(opts)
