"""
CLI: ``kasos-docs-update``, the scheduled daily documentation update.

Runs every update step and prints one line per step. Steps are best-effort,
so the command exits 0 even when some of them fail. Invalid settings exit
with code 1 before any step runs.
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.markup import escape

from kasos_docs.cli.utils import console, err_console, load_settings
from kasos_docs.core.result import Err, Ok
from kasos_docs.site.repository import SiteRepository
from kasos_docs.site.updater import DailyUpdater

app = typer.Typer(name="kasos-docs-update", add_completion=False)

_STEP_LABELS = {
    "stats": "Statistics updated",
    "changelog": "Changelog checked",
    "versions": "Versions section updated",
    "sitemap": "Sitemap generated",
}


@app.command()
def update(
    root: Path | None = typer.Option(
        None, "--root", "-r", help="Documentation root (default: $KASOS_DOCS_ROOT or cwd)."
    ),
    log_level: str | None = typer.Option(None, "--log-level", "-l", help="Log level."),
    json_logs: bool | None = typer.Option(
        None, "--json-logs/--console-logs", help="Force JSON or console log output."
    ),
    json_out: bool = typer.Option(False, "--json", help="Print the step report as JSON."),
) -> None:
    """Update stats, changelog, versions section and sitemap."""
    settings = load_settings(root, log_level=log_level, json_logs=json_logs)

    updater = DailyUpdater(
        SiteRepository(settings.root),
        product_name=settings.product_name,
        base_url=settings.base_url,
        sitemap_topics=settings.sitemap_topics,
    )

    console.print("🌅 Running daily documentation update...")
    report = updater.run_daily_update()

    if json_out:
        console.print_json(json.dumps(report.to_dict(), default=str))
        return

    for name, result in report.steps.items():
        match result:
            case Ok(value) if name == "changelog":
                if value:
                    console.print(f"✓ Found {len(value)} recent changes")
                else:
                    console.print("✓ No recent changes detected")
            case Ok():
                console.print(f"✓ {_STEP_LABELS.get(name, name)}")
            case Err(error):
                err_console.print(f"⚠️  {name}: {escape(str(error))}")

    if report.ok:
        console.print("✅ Daily update completed successfully!")
    else:
        console.print(f"⚠️  Daily update completed with {len(report.failures)} failed step(s)")


def run() -> None:
    """Entry point for the ``kasos-docs-update`` script."""
    app()


if __name__ == "__main__":
    run()
