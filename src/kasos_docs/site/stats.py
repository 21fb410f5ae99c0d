"""Stats records written by the assembler and the daily updater.

Both records serialize to the camelCase JSON the site script reads::

    build-stats.json  {buildTime, sectionsCount, version, size}
    stats.json        {lastUpdated, totalSections, totalPages,
                       lastCommit, buildNumber, fileSize}
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from kasos_docs.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_VERSION = "1.0.0"
UNKNOWN_SIZE = "Unknown"


@dataclass(frozen=True, slots=True)
class BuildStats:
    """Assembler stats, recreated on every build."""

    build_time: str
    sections_count: int
    version: str
    size: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "buildTime": self.build_time,
            "sectionsCount": self.sections_count,
            "version": self.version,
            "size": self.size,
        }


@dataclass(frozen=True, slots=True)
class UpdateStats:
    """Daily updater stats."""

    last_updated: str
    total_sections: int
    total_pages: int
    last_commit: str
    build_number: int
    file_size: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "lastUpdated": self.last_updated,
            "totalSections": self.total_sections,
            "totalPages": self.total_pages,
            "lastCommit": self.last_commit,
            "buildNumber": self.build_number,
            "fileSize": self.file_size,
        }


def format_size(size_bytes: int | None) -> str:
    """Format a byte count as ``"<n.nn> KB"``; ``"Unknown"`` for None."""
    if size_bytes is None:
        return UNKNOWN_SIZE
    return f"{size_bytes / 1024:.2f} KB"


def read_version(manifest: Path | None) -> str:
    """The ``version`` field of a package.json, or ``1.0.0``.

    Any problem reading or parsing the manifest falls back to the default.
    """
    if manifest is None:
        return DEFAULT_VERSION
    try:
        data = json.loads(manifest.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.debug("version_manifest_unreadable", path=str(manifest), error=str(e))
        return DEFAULT_VERSION
    if not isinstance(data, dict):
        return DEFAULT_VERSION
    return str(data.get("version") or DEFAULT_VERSION)


def next_build_number(previous: int | None) -> int:
    """Advance the build counter; a missing or unparsable value starts at 1."""
    if previous is None:
        return 1
    return previous + 1
