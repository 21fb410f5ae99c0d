"""
CLI: ``kasos-docs`` builds the documentation page from partials.

Commands:
    build    Build index.html from partials
    extract  Extract sections from index.html back into partials
    watch    Placeholder; does nothing

Exit codes: 1 when the settings are invalid or the build or extraction cannot
run at all, 0 otherwise.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape

from kasos_docs.cli.utils import console, err_console, load_settings, version_string
from kasos_docs.core.errors import ExtractionError, FatalBuildError
from kasos_docs.core.settings import DocsSettings
from kasos_docs.site.assembler import Assembler
from kasos_docs.site.extractor import Extractor
from kasos_docs.site.repository import SiteRepository

app = typer.Typer(
    name="kasos-docs",
    help="KasOS documentation builder.",
    invoke_without_command=True,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"kasos-docs {version_string()}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    root: Path | None = typer.Option(
        None, "--root", "-r", help="Documentation root (default: $KASOS_DOCS_ROOT or cwd)."
    ),
    log_level: str | None = typer.Option(None, "--log-level", "-l", help="Log level."),
    json_logs: bool | None = typer.Option(
        None, "--json-logs/--console-logs", help="Force JSON or console log output."
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """🚀 KasOS Documentation Builder."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()
    ctx.obj = load_settings(root, log_level=log_level, json_logs=json_logs)


@app.command()
def build(ctx: typer.Context) -> None:
    """Build documentation from partials."""
    settings: DocsSettings = ctx.obj
    console.print("🔧 Building KasOS Documentation...")

    repository = SiteRepository(settings.root)
    assembler = Assembler(repository, manifest=settings.resolved_manifest())
    try:
        result = assembler.build()
    except FatalBuildError as e:
        err_console.print(f"[bold red]❌ Build failed:[/bold red] {escape(e.message)}")
        raise typer.Exit(code=1) from e

    if result.used_default_template:
        console.print("📝 Template not found, using default...")
    for topic in result.loaded:
        console.print(f"✓ Loaded section: {topic}")
    for warning in result.warnings:
        err_console.print(f"⚠️  {escape(warning.message)}")
    if not result.placeholder_found:
        err_console.print("⚠️  Template has no {{SECTIONS_CONTENT}} placeholder; written unchanged")

    console.print("✅ Documentation built successfully!")
    console.print(f"📄 Output: {result.output_path}")
    if result.stats is not None:
        console.print(f"📊 Build stats saved to {repository.build_stats_path}")


@app.command()
def extract(
    ctx: typer.Context,
    source: Path | None = typer.Option(
        None, "--source", "-s", help="Combined document to read (default: <root>/index.html)."
    ),
) -> None:
    """Extract sections from existing file to partials."""
    settings: DocsSettings = ctx.obj
    console.print("📤 Extracting sections from existing documentation...")

    extractor = Extractor(SiteRepository(settings.root))
    try:
        result = extractor.extract(source)
    except ExtractionError as e:
        err_console.print(f"[bold red]❌ Extraction failed:[/bold red] {escape(e.message)}")
        raise typer.Exit(code=1) from e

    for topic in result.written:
        console.print(f"✓ Extracted: {topic}")
    for topic in result.nested:
        err_console.print(f"⚠️  Nested <section> inside {topic}; extracted up to the first </section>")
    for failure in result.failures:
        err_console.print(f"❌ {escape(failure.message)}")

    if result.ok:
        console.print("✅ All sections extracted successfully!")
    else:
        console.print(
            f"⚠️  Extracted {len(result.written)} section(s), {len(result.failures)} failed"
        )


@app.command()
def watch() -> None:
    """Watch for changes and auto-rebuild (not implemented)."""
    console.print("👀 Watch mode is not implemented; run 'kasos-docs build' after editing partials.")


def run() -> None:
    """Entry point for the ``kasos-docs`` script."""
    app()


if __name__ == "__main__":
    run()
