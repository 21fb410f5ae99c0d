"""Tokenizer for tagged ``<section id="...">`` regions.

A tagged region starts at a ``<section ...>`` opening tag carrying an ``id``
attribute and ends at the first ``</section>`` after it. Scanning is a single
left-to-right pass; regions never overlap and are returned in document order.

Regions are assumed not to nest. When the inner text of a region contains
another ``<section`` opener, the region still ends at the first closing tag
and is returned with ``nested=True`` so callers can report it.

Examples:
    >>> html = '<section id="a"><p>A</p></section>\\n<section id="b">B</section>'
    >>> [(r.topic, r.inner) for r in scan_tagged_regions(html)]
    [('a', '<p>A</p>'), ('b', 'B')]
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_OPEN_RE = re.compile(r"<section\b[^>]*>")
_ID_RE = re.compile(r'\sid="([^"]+)"')
_CLOSE = "</section>"


@dataclass(frozen=True, slots=True)
class TaggedRegion:
    """One ``(identifier, content)`` span of a combined document."""

    topic: str
    opening_tag: str
    inner: str
    start: int
    end: int
    nested: bool = False

    @property
    def markup(self) -> str:
        """The region re-wrapped in its own delimiters."""
        return f"{self.opening_tag}{self.inner}{_CLOSE}"


def scan_tagged_regions(text: str) -> list[TaggedRegion]:
    """Split ``text`` into its tagged regions.

    Openers without an ``id`` are skipped. An opener with no closing tag
    after it ends the scan, since no later opener can be closed either.
    """
    regions: list[TaggedRegion] = []
    pos = 0

    while True:
        opener = _OPEN_RE.search(text, pos)
        if opener is None:
            break

        id_match = _ID_RE.search(opener.group(0))
        if id_match is None:
            pos = opener.end()
            continue

        close = text.find(_CLOSE, opener.end())
        if close == -1:
            break

        inner = text[opener.end():close]
        end = close + len(_CLOSE)
        regions.append(
            TaggedRegion(
                topic=id_match.group(1),
                opening_tag=opener.group(0),
                inner=inner,
                start=opener.start(),
                end=end,
                nested=_OPEN_RE.search(inner) is not None,
            )
        )
        pos = end

    return regions
