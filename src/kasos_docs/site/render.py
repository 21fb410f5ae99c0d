"""Jinja2 rendering for generated site files (versions fragment, sitemap)."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"


class TemplateRenderer:
    """Loads templates from the package ``templates/`` directory.

    ``.html`` and ``.xml`` templates are autoescaped.
    """

    def __init__(self, template_dir: Path | None = None):
        self.template_dir = Path(template_dir or TEMPLATE_DIR)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_name: str, **context: Any) -> str:
        return self.env.get_template(template_name).render(**context)
