"""File access for a documentation root.

Stability: stable
Tags: repository, filesystem, partials

``SiteRepository`` owns every path under the documentation root. The
assembler, extractor and updater go through it instead of building paths or
opening files themselves::

    <root>/
    ├── partials/<topic-id>.html   section store
    ├── template.html              optional page template
    ├── index.html                 combined document
    ├── build-stats.json           assembler stats
    ├── stats.json                 updater stats
    ├── build-number.txt           build counter
    ├── CHANGELOG.md
    └── sitemap.xml

Read methods let ``OSError``/``UnicodeDecodeError`` propagate; callers decide
whether a failure is fatal.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

from kasos_docs.core.timestamps import from_timestamp

_TOPIC_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")


@dataclass(frozen=True, slots=True)
class PartialEntry:
    """A file in the section store with its modification time (UTC)."""

    name: str
    path: Path
    modified: datetime


class SiteRepository:
    """Paths and file I/O for one documentation root."""

    def __init__(self, root: Path):
        self.root = Path(root)
        self.partials_dir = self.root / "partials"
        self.template_path = self.root / "template.html"
        self.output_path = self.root / "index.html"
        self.build_stats_path = self.root / "build-stats.json"
        self.stats_path = self.root / "stats.json"
        self.build_number_path = self.root / "build-number.txt"
        self.changelog_path = self.root / "CHANGELOG.md"
        self.sitemap_path = self.root / "sitemap.xml"

    def __repr__(self) -> str:
        return f"SiteRepository({str(self.root)!r})"

    # ------------------------------------------------------------------ #
    # Section store
    # ------------------------------------------------------------------ #

    def fragment_path(self, topic: str) -> Path:
        """Deterministic path of a topic's partial.

        Raises:
            ValueError: If ``topic`` could escape the partials directory.
        """
        if not _TOPIC_RE.match(topic) or ".." in topic:
            raise ValueError(f"Invalid topic identifier: {topic!r}")
        return self.partials_dir / f"{topic}.html"

    def read_fragment(self, topic: str) -> str:
        return self.fragment_path(topic).read_text(encoding="utf-8")

    def write_fragment(self, topic: str, content: str) -> Path:
        path = self.fragment_path(topic)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def list_partials(self) -> list[PartialEntry]:
        """All regular files in the section store, sorted by name."""
        entries = []
        for path in sorted(self.partials_dir.iterdir()):
            if not path.is_file():
                continue
            entries.append(
                PartialEntry(
                    name=path.name,
                    path=path,
                    modified=from_timestamp(path.stat().st_mtime),
                )
            )
        return entries

    def count_sections(self) -> int:
        """Number of ``*.html`` partial files; 0 when the store is unreadable."""
        try:
            return sum(
                1 for p in self.partials_dir.iterdir() if p.suffix == ".html" and p.is_file()
            )
        except OSError:
            return 0

    # ------------------------------------------------------------------ #
    # Template and combined document
    # ------------------------------------------------------------------ #

    def read_template(self) -> str | None:
        """Template text, or None when ``template.html`` does not exist."""
        try:
            return self.template_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def read_document(self, path: Path | None = None) -> str:
        return (path or self.output_path).read_text(encoding="utf-8")

    def write_document(self, html: str) -> Path:
        self.output_path.write_text(html, encoding="utf-8")
        return self.output_path

    def output_size(self) -> int | None:
        """Size of ``index.html`` in bytes, or None if it cannot be stat'ed."""
        try:
            return self.output_path.stat().st_size
        except OSError:
            return None

    # ------------------------------------------------------------------ #
    # Metadata files
    # ------------------------------------------------------------------ #

    def write_json(self, path: Path, data: dict[str, Any]) -> Path:
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path

    def read_stats(self) -> dict[str, Any] | None:
        """Previously written ``stats.json``, or None when absent or not a JSON object."""
        try:
            data = json.loads(self.stats_path.read_text(encoding="utf-8"))
        except (FileNotFoundError, ValueError):
            return None
        return data if isinstance(data, dict) else None

    def read_build_number(self) -> int | None:
        """Persisted build counter, or None when absent or unparsable."""
        try:
            raw = self.build_number_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        try:
            return int(raw.strip())
        except ValueError:
            return None

    def write_build_number(self, value: int) -> None:
        self.build_number_path.write_text(str(value), encoding="utf-8")

    def read_changelog(self) -> str | None:
        try:
            return self.changelog_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def write_changelog(self, text: str) -> Path:
        self.changelog_path.write_text(text, encoding="utf-8")
        return self.changelog_path

    def write_sitemap(self, xml: str) -> Path:
        self.sitemap_path.write_text(xml, encoding="utf-8")
        return self.sitemap_path
