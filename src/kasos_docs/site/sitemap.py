"""sitemap.xml generation.

One root URL (daily, priority 1.0) followed by one ``<base>/#<topic>`` URL per
topic (weekly, priority 0.8). Every entry carries the same ``lastmod``.
"""

from __future__ import annotations

from collections.abc import Sequence

from kasos_docs.site.render import TemplateRenderer

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


def render_sitemap(
    base_url: str,
    topics: Sequence[str],
    lastmod: str,
    *,
    renderer: TemplateRenderer | None = None,
) -> str:
    renderer = renderer or TemplateRenderer()
    return renderer.render(
        "sitemap.xml",
        base_url=base_url.rstrip("/"),
        topics=list(topics),
        lastmod=lastmod,
    )
