from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml

from cardstamp.constants import DEFAULT_CONFIG_NAME, DEFAULT_DIR
from cardstamp.errors import DomainError

DEFAULT_CONFIG: dict[str, Any] = {
    "custom_colors": {},
    "dir": DEFAULT_DIR,
    "img_dir": ".",
    "layouts": [],
}


def get_config_path() -> Path:
    return Path.cwd() / DEFAULT_CONFIG_NAME


def _deep_merge(base: dict[str, Any], incoming: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in incoming.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: Path | None = None) -> dict[str, Any]:
    cfg_path = path or get_config_path()
    if not cfg_path.exists():
        return copy.deepcopy(DEFAULT_CONFIG)

    text = cfg_path.read_text(encoding="utf-8")
    try:
        loaded = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise DomainError(f"cannot parse config file {cfg_path}: {exc}") from exc
    if not isinstance(loaded, dict):
        raise DomainError(f"config file is not a dict: {cfg_path}")
    cfg = _deep_merge(DEFAULT_CONFIG, loaded)
    cfg["custom_colors"] = cfg.get("custom_colors") or {}
    if not isinstance(cfg["custom_colors"], dict):
        raise DomainError(f"custom_colors must be a mapping in {cfg_path}")
    layouts = cfg.get("layouts") or []
    if isinstance(layouts, str):
        layouts = [layouts]
    cfg["layouts"] = [str(item) for item in layouts]
    return cfg


def write_default_config(path: Path | None = None, force: bool = False) -> Path:
    cfg_path = path or get_config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    if cfg_path.exists() and not force:
        return cfg_path
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    cfg_path.write_text(yaml.safe_dump(cfg, sort_keys=False, allow_unicode=True), encoding="utf-8")
    return cfg_path
