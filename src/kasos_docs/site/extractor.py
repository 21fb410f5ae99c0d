"""Recover partials from an existing combined document.

The extractor is the inverse of the assembler: every tagged region of
``index.html`` is written back to ``partials/<id>.html``, overwriting any
existing file. It does not consult the canonical order, so identifiers the
assembler would ignore are written as well.

A document that cannot be read aborts the run with ``ExtractionError``; a
fragment that cannot be written is recorded and the remaining regions are
still processed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from kasos_docs.core.errors import ExtractionError, FragmentWriteError
from kasos_docs.core.logging import get_logger
from kasos_docs.site.regions import TaggedRegion, scan_tagged_regions
from kasos_docs.site.repository import SiteRepository

logger = get_logger(__name__)


@dataclass
class ExtractionResult:
    """Outcome of an extraction run."""

    source: Path
    written: list[str] = field(default_factory=list)
    failures: list[FragmentWriteError] = field(default_factory=list)
    nested: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class Extractor:
    """Writes tagged regions of a combined document to the section store."""

    def __init__(self, repository: SiteRepository):
        self.repository = repository

    def extract(self, source: Path | None = None) -> ExtractionResult:
        """Extract every tagged region of ``source`` (default: index.html).

        Raises:
            ExtractionError: The document could not be read.
        """
        path = source or self.repository.output_path
        logger.info("extraction_started", source=str(path))

        try:
            text = self.repository.read_document(path)
        except (OSError, UnicodeDecodeError) as e:
            raise ExtractionError(f"Cannot read {path}: {e}", cause=e).with_context(
                path=str(path)
            ) from e

        result = ExtractionResult(source=path)
        for region in scan_tagged_regions(text):
            self._write_region(region, result)

        logger.info(
            "extraction_completed",
            written=len(result.written),
            failed=len(result.failures),
        )
        return result

    def _write_region(self, region: TaggedRegion, result: ExtractionResult) -> None:
        if region.nested:
            logger.warning("nested_section", topic=region.topic)
            result.nested.append(region.topic)

        try:
            self.repository.write_fragment(region.topic, region.markup)
        except (OSError, ValueError) as e:
            logger.error("extract_write_failed", topic=region.topic, error=str(e))
            error = FragmentWriteError(f"Failed to extract {region.topic}: {e}", cause=e)
            error.with_context(topic=region.topic)
            result.failures.append(error)
            return

        result.written.append(region.topic)
        logger.debug("section_extracted", topic=region.topic)
