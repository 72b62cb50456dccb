from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

import yaml

from cardstamp.constants import LAYOUT_EXTENDS_KEY
from cardstamp.errors import DomainError, StructuralError

LOGGER = logging.getLogger(__name__)


def _load_file(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise StructuralError(f"Layout file {path.resolve(strict=False)} does not exist!")
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DomainError(f"cannot parse layout file {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DomainError(f"layout file is not a dict: {path}")
    return data


def _resolve_entry(
    name: str,
    raw: dict[str, dict[str, Any]],
    resolved: dict[str, dict[str, Any]],
    chain: tuple[str, ...] = (),
) -> dict[str, Any]:
    if name in resolved:
        return resolved[name]
    if name in chain:
        cycle = " -> ".join((*chain, name))
        raise DomainError(f"layout extends cycle: {cycle}")

    entry = dict(raw[name])
    parent_name = entry.pop(LAYOUT_EXTENDS_KEY, None)
    if parent_name is None:
        resolved[name] = entry
        return entry

    parent_name = str(parent_name)
    if parent_name not in raw:
        raise DomainError(f"layout entry '{name}' extends unknown entry '{parent_name}'")
    merged = dict(_resolve_entry(parent_name, raw, resolved, (*chain, name)))
    merged.update(entry)
    resolved[name] = merged
    return merged


def normalize_layout_dict(data: dict[str, Any]) -> dict[str, dict[str, Any]]:
    raw: dict[str, dict[str, Any]] = {}
    for name, entry in data.items():
        if entry is None:
            entry = {}
        if not isinstance(entry, dict):
            raise DomainError(f"layout entry '{name}' is not a dict")
        raw[str(name)] = {str(key): value for key, value in entry.items()}

    resolved: dict[str, dict[str, Any]] = {}
    for name in raw:
        _resolve_entry(name, raw, resolved)
    return {name: resolved[name] for name in raw}


def load_layouts(paths: Iterable[Path]) -> dict[str, dict[str, Any]]:
    """Load and merge layout files in order; later files replace earlier entries.

    ``extends`` is resolved after merging, so an entry may extend one that
    lives in a previously loaded file.
    """
    combined: dict[str, Any] = {}
    for path in paths:
        data = _load_file(Path(path))
        LOGGER.debug("loaded %d layout entries from %s", len(data), path)
        combined.update(data)
    return normalize_layout_dict(combined)
