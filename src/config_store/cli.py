"""Typer CLI for the config store."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer
from rich import print as rprint

from . import get_version
from .log import setup_logging
from .paths import get_path, has_path
from .settings import StoreSettings
from .store import ConfigStore, dump_document

app = typer.Typer(help="Config store CLI")


def _coerce_value(value: str) -> Any:
    lowered = value.strip().lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    if lowered in {"null", "~"}:
        return None
    try:
        if "." in value:
            return float(value)
        return int(value)
    except ValueError:
        return value


def _render(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return dump_document(value)
    if isinstance(value, bool):
        return "true\n" if value else "false\n"
    if value is None:
        return "null\n"
    return f"{value}\n"


def _store(ctx: typer.Context) -> ConfigStore:
    return ctx.obj


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(get_version())
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    path: Optional[str] = typer.Option(None, help="Config file (defaults to CONFIG_STORE_PATH)"),
    log_level: Optional[str] = typer.Option(None, help="Log level (defaults to CONFIG_STORE_LOG_LEVEL)"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    settings = StoreSettings.from_env()
    if path:
        settings.path = Path(path)
    setup_logging(log_level or settings.log_level)
    ctx.obj = ConfigStore.from_settings(settings)


@app.command()
def show(ctx: typer.Context) -> None:
    """Print the whole configuration document."""
    try:
        document = _store(ctx).read_all()
    except OSError as exc:
        rprint(f"[red]Cannot read configuration: {exc}[/red]")
        raise typer.Exit(code=1)
    typer.echo(dump_document(document), nl=False)


@app.command()
def get(ctx: typer.Context, key: str = typer.Argument(..., help="Dot-separated key")) -> None:
    try:
        document = _store(ctx).read_all()
    except OSError as exc:
        rprint(f"[red]Cannot read configuration: {exc}[/red]")
        raise typer.Exit(code=1)
    try:
        present = has_path(document, key)
    except ValueError as exc:
        raise typer.BadParameter(str(exc))
    if not present:
        rprint(f"[yellow]{key} is not set[/yellow]")
        raise typer.Exit(code=1)
    typer.echo(_render(get_path(document, key)), nl=False)


@app.command("set")
def set_value(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Dot-separated key"),
    value: str = typer.Argument(..., help="Value; booleans, null and numbers are coerced"),
) -> None:
    try:
        _store(ctx).set(key, _coerce_value(value))
    except ValueError as exc:
        raise typer.BadParameter(str(exc))
    except OSError as exc:
        rprint(f"[red]Cannot write configuration: {exc}[/red]")
        raise typer.Exit(code=1)
    rprint(f"[green]{key} updated[/green]")


@app.command()
def backups(ctx: typer.Context) -> None:
    """List backup snapshots of the configuration file."""
    entries = _store(ctx).backups()
    if not entries:
        rprint("[yellow]No backups found[/yellow]")
        return
    for entry in entries:
        typer.echo(str(entry))


if __name__ == "__main__":
    app()
