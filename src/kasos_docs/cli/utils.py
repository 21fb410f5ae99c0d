"""
CLI utility helpers: consoles and settings resolution.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from kasos_docs.core.errors import ConfigError
from kasos_docs.core.logging import configure_logging
from kasos_docs.core.settings import DocsSettings, get_settings

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def load_settings(
    root: Path | None,
    *,
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> DocsSettings:
    """Resolve settings, apply CLI overrides, and configure logging.

    Invalid settings print an error and exit with code 1.
    """
    try:
        settings = get_settings(root=root)
    except ConfigError as e:
        err_console.print(f"[bold red]❌ Invalid configuration:[/bold red] {escape(e.message)}")
        raise typer.Exit(code=1) from e

    overrides: dict[str, object] = {}
    if log_level is not None:
        overrides["log_level"] = log_level
    if json_logs is not None:
        overrides["json_logs"] = json_logs
    if overrides:
        settings = settings.model_copy(update=overrides)

    configure_logging(level=settings.log_level, json_format=settings.json_logs)
    return settings


def version_string() -> str:
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("kasos-docs")
    except PackageNotFoundError:
        from kasos_docs import __version__

        return __version__
