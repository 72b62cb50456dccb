from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import typer
import yaml

from cardstamp.config import load_config, write_default_config
from cardstamp.errors import CardstampError, DomainError
from cardstamp.layout_loader import load_layouts
from cardstamp.models import CardRange, DeckContext, ResolvedColor, Symbol
from cardstamp.normalize import normalize

app = typer.Typer(add_completion=False, no_args_is_help=True, help="Card drawing-option normalizer CLI.")
LOGGER = logging.getLogger("cardstamp")


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _split_needs(values: list[str]) -> list[str]:
    """Accept both repeated `--need` flags and comma-separated lists."""
    return [token.strip() for value in values for token in value.split(",") if token.strip()]


def _symbolize(value: Any) -> Any:
    """Turn ``:name`` strings from option files into symbols."""
    if isinstance(value, str) and value.startswith(":") and len(value) > 1:
        return Symbol(value[1:])
    if isinstance(value, list):
        return [_symbolize(item) for item in value]
    return value


def _load_options(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text) if path.suffix.lower() == ".json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DomainError(f"cannot parse option file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise DomainError(f"option file is not a dict: {path}")
    return {str(key): _symbolize(value) for key, value in data.items()}


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, ResolvedColor):
        return value.to_hex()
    if isinstance(value, CardRange):
        return [value.lo, value.hi]
    if isinstance(value, dict):
        return {str(k): _to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    if isinstance(value, Symbol):
        return str(value)
    return value


@app.command("normalize")
def normalize_command(
    options_file: Path = typer.Argument(..., exists=True, resolve_path=True, dir_okay=False),
    cards: int = typer.Option(..., "--cards", min=1, help="Number of cards in the deck."),
    layout: list[Path] = typer.Option([], "--layout", help="Layout file (repeatable, later files win)."),
    need: list[str] = typer.Option(["layout", "range"], "--need", help="Needs to apply, e.g. layout,range,color."),
    config: Path | None = typer.Option(None, "--config", help="Deck config file (default: ./config.yml)."),
    strict_layouts: bool = typer.Option(False, "--strict-layouts", help="Fail on missing layout entries."),
    log_level: str = typer.Option("warning", "--log-level"),
) -> None:
    """Normalize one drawing-option file and print the result as JSON."""
    _setup_logging(log_level)
    try:
        cfg = load_config(config)
        base_dir = config.parent if config else Path.cwd()
        ctx = DeckContext.from_config(cfg, card_count=cards, base_dir=base_dir)
        if layout:
            ctx.layouts = {**ctx.layouts, **load_layouts(layout)}
        LOGGER.info("Deck: %d cards, %d layout entries", cards, len(ctx.layouts))
        opts = _load_options(options_file)
        result = normalize(
            opts,
            ctx,
            _split_needs(need),
            strict_layouts=strict_layouts,
            default_dir=str(cfg.get("dir")),
        )
    except (CardstampError, ValueError) as exc:
        typer.secho(str(exc), err=True, fg=typer.colors.RED)
        raise typer.Exit(1)
    typer.echo(json.dumps(_to_jsonable(result), ensure_ascii=False, indent=2))


@app.command("layouts")
def layouts_command(
    files: list[Path] = typer.Argument(..., exists=True, resolve_path=True, dir_okay=False),
) -> None:
    """Print the merged layout table of one or more layout files."""
    try:
        table = load_layouts(files)
    except CardstampError as exc:
        typer.secho(str(exc), err=True, fg=typer.colors.RED)
        raise typer.Exit(1)
    typer.echo(json.dumps(_to_jsonable(table), ensure_ascii=False, indent=2))


@app.command("init-config")
def init_config(
    path: Path | None = typer.Option(None, "--path", help="Where to write the config (default: ./config.yml)."),
    force: bool = typer.Option(False, "--force", help="Overwrite existing config file."),
) -> None:
    written = write_default_config(path, force=force)
    typer.echo(f"Config initialized: {written}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
