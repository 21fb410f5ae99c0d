"""Change detection and changelog entries for the daily update.

A partial counts as changed when its modification time is less than 24 hours
before "now" and later than the previous update run, so a file is logged
once even when the updater runs several times a day. Changed files are
grouped into one dated entry which is inserted directly below the changelog
header::

    # KasOS Documentation Changelog

    ## 2025-07-02 - Daily Update

    ### Modified Files:
    - terminal.html (2025-07-02T08:15:00.000Z)

    ---
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta

from kasos_docs.core.errors import MetadataError
from kasos_docs.core.timestamps import to_date, to_iso8601_z
from kasos_docs.site.repository import PartialEntry

CHANGE_WINDOW = timedelta(hours=24)


@dataclass(frozen=True, slots=True)
class ChangedFile:
    name: str
    modified: str


def changelog_header(product_name: str) -> str:
    return f"# {product_name} Documentation Changelog"


def default_changelog(header: str) -> str:
    return f"{header}\n\n"


def find_recent_changes(
    entries: Iterable[PartialEntry],
    now: datetime,
    *,
    window: timedelta = CHANGE_WINDOW,
    since: datetime | None = None,
    exclude: frozenset[str] = frozenset(),
) -> list[ChangedFile]:
    """Entries modified strictly less than ``window`` before ``now``.

    With ``since``, entries modified at or before it were already reported
    and are skipped.
    """
    changes = []
    for entry in entries:
        if entry.name in exclude:
            continue
        if now - entry.modified >= window:
            continue
        if since is not None and entry.modified <= since:
            continue
        changes.append(ChangedFile(name=entry.name, modified=to_iso8601_z(entry.modified)))
    return changes


def render_entry(now: datetime, changes: list[ChangedFile]) -> str:
    lines = "\n".join(f"- {change.name} ({change.modified})" for change in changes)
    return (
        f"\n## {to_date(now)} - Daily Update\n"
        f"\n### Modified Files:\n"
        f"{lines}\n"
        f"\n---\n"
    )


def insert_entry(changelog: str, header: str, entry: str) -> str:
    """Insert ``entry`` right after the first line that is exactly ``header``.

    The header line break and one blank line after it, when present, are
    replaced by the entry, which carries its own blank lines. CRLF line
    endings and trailing spaces on the header line are accepted.

    Raises:
        MetadataError: No line matches the header.
    """
    match = re.search(rf"^{re.escape(header)}[ \t]*\r?$", changelog, re.MULTILINE)
    if match is None:
        raise MetadataError(f"Changelog header not found: {header!r}").with_context(
            step="changelog"
        )
    rest = _skip_line_break(_skip_line_break(changelog[match.end():]))
    return f"{changelog[:match.start()]}{header}\n{entry}{rest}"


def _skip_line_break(text: str) -> str:
    if text.startswith("\r\n"):
        return text[2:]
    if text.startswith("\n"):
        return text[1:]
    return text
