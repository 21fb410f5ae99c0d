"""Release history and the versions & releases partial.

The release list is hard-coded and independent of any other state; only the
newest release is dated with the day the updater runs.
"""

from __future__ import annotations

from dataclasses import dataclass

from kasos_docs.site.render import TemplateRenderer

CURRENT_VERSION = "1.2.1"
RELEASES_URL = "https://github.com/kasos-io/kasos/releases"

ROADMAP: tuple[str, ...] = (
    "Enhanced AI integration features",
    "Advanced security protocols",
    "Extended cryptocurrency support",
    "Mobile-responsive interface",
    "Plugin marketplace",
)


@dataclass(frozen=True, slots=True)
class Release:
    version: str
    date: str
    highlights: tuple[str, ...]


def release_history(today: str) -> list[Release]:
    """Known releases, newest first."""
    return [
        Release(
            version=f"v{CURRENT_VERSION}",
            date=today,
            highlights=(
                "Enhanced documentation structure",
                "Added modular build system",
                "Improved daily update automation",
                "Performance optimizations",
            ),
        ),
        Release(
            version="v1.2.0",
            date="2025-07-01",
            highlights=(
                "Launched comprehensive documentation site",
                "Enhanced security features",
                "New app manager capabilities",
                "UI/UX improvements",
            ),
        ),
        Release(
            version="v1.1.0",
            date="2025-06-15",
            highlights=(
                "Integrated KasWallet for cryptocurrency management",
                "Added multi-desktop support",
                "General bug fixes and optimizations",
            ),
        ),
        Release(
            version="v1.0.0",
            date="2025-05-01",
            highlights=(
                "Initial public release of KasOS",
                "Core desktop environment and built-in apps",
                "Window management and app system",
            ),
        ),
    ]


def render_versions_fragment(
    releases: list[Release],
    *,
    current: str = CURRENT_VERSION,
    product_name: str = "KasOS",
    renderer: TemplateRenderer | None = None,
) -> str:
    renderer = renderer or TemplateRenderer()
    return renderer.render(
        "versions_releases.html",
        current=current,
        releases=releases,
        product_name=product_name,
        releases_url=RELEASES_URL,
        roadmap=ROADMAP,
    )
