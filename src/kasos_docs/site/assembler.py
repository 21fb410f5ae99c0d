"""Assemble partials into the combined documentation page.

Stability: stable
Tags: build, assembler, partials, template

Architecture::

    template.html ──┐ (DEFAULT_TEMPLATE when missing)
                    ▼
    partials/<id>.html ──► load + strip ──► join("\\n\\n") ──► replace placeholder
      (CANONICAL_ORDER,                                              │
       missing skipped)                                              ▼
                                                     index.html ──► build-stats.json
                                                                     (best-effort)

Failure policy:
    - template unreadable (but present) or index.html unwritable:
      ``FatalBuildError``
    - missing or unreadable partial: ``MissingFragmentWarning`` recorded
    - stats write failure: ``MetadataError`` recorded
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from kasos_docs.core.errors import (
    DocsError,
    FatalBuildError,
    MetadataError,
    MissingFragmentWarning,
)
from kasos_docs.core.logging import get_logger
from kasos_docs.core.timestamps import to_iso8601_z, utc_now
from kasos_docs.site.order import CANONICAL_ORDER, validate_order
from kasos_docs.site.repository import SiteRepository
from kasos_docs.site.stats import BuildStats, format_size, read_version
from kasos_docs.site.template import DEFAULT_TEMPLATE, render_document

logger = get_logger(__name__)

SECTION_SEPARATOR = "\n\n"


@dataclass
class BuildResult:
    """Outcome of a successful build.

    Attributes:
        output_path: The written combined document.
        loaded: Topics included, in output order.
        missing: Topics skipped because their partial was absent or unreadable.
        placeholder_found: False when the template was written through unchanged.
        used_default_template: True when template.html did not exist.
        stats: The stats record, or None when writing it failed.
        warnings: Non-fatal errors collected during the build.
    """

    output_path: Path
    loaded: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    placeholder_found: bool = True
    used_default_template: bool = False
    stats: BuildStats | None = None
    warnings: list[DocsError] = field(default_factory=list)


class Assembler:
    """Builds ``index.html`` from the section store.

    Examples:
        >>> repo = SiteRepository(Path("docs"))
        >>> result = Assembler(repo).build()
        >>> result.loaded[:2]
        ['introduction', 'getting-started']
    """

    def __init__(
        self,
        repository: SiteRepository,
        *,
        order: Sequence[str] = CANONICAL_ORDER,
        manifest: Path | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.repository = repository
        self.order = validate_order(order)
        self.manifest = manifest
        self.clock = clock

    def build(self) -> BuildResult:
        """Run the full build and return what was assembled.

        Raises:
            FatalBuildError: The template could not be read or the output
                could not be written.
        """
        logger.info("build_started", root=str(self.repository.root))

        template, used_default = self._read_template()
        result = BuildResult(
            output_path=self.repository.output_path,
            used_default_template=used_default,
        )

        body = self._build_sections(result)
        html, result.placeholder_found = render_document(template, body)
        if not result.placeholder_found:
            logger.warning("template_placeholder_missing", template=str(self.repository.template_path))

        try:
            self.repository.write_document(html)
        except OSError as e:
            raise FatalBuildError(
                f"Cannot write {self.repository.output_path.name}: {e}", cause=e
            ).with_context(path=str(self.repository.output_path)) from e

        logger.info(
            "build_completed",
            output=str(self.repository.output_path),
            sections=len(result.loaded),
            missing=len(result.missing),
        )

        self._write_stats(result)
        return result

    def _read_template(self) -> tuple[str, bool]:
        try:
            template = self.repository.read_template()
        except (OSError, UnicodeDecodeError) as e:
            raise FatalBuildError(
                f"Cannot read {self.repository.template_path.name}: {e}", cause=e
            ).with_context(path=str(self.repository.template_path)) from e

        if template is None:
            logger.info("template_not_found_using_default", path=str(self.repository.template_path))
            return DEFAULT_TEMPLATE, True
        return template, False

    def _build_sections(self, result: BuildResult) -> str:
        parts: list[str] = []

        for topic in self.order:
            content = self._load_section(topic, result)
            if content:
                parts.append(content)
                result.loaded.append(topic)
                logger.debug("section_loaded", topic=topic)
            else:
                result.missing.append(topic)

        return SECTION_SEPARATOR.join(parts)

    def _load_section(self, topic: str, result: BuildResult) -> str | None:
        try:
            return self.repository.read_fragment(topic).strip()
        except FileNotFoundError:
            logger.info("section_missing", topic=topic)
            result.warnings.append(MissingFragmentWarning(topic))
        except (OSError, UnicodeDecodeError, ValueError) as e:
            logger.warning("section_unreadable", topic=topic, error=str(e))
            result.warnings.append(
                MissingFragmentWarning(topic, f"Failed to load section {topic}: {e}", cause=e)
            )
        return None

    def _write_stats(self, result: BuildResult) -> None:
        """Write build-stats.json; failures are recorded, never raised."""
        try:
            stats = BuildStats(
                build_time=to_iso8601_z(self.clock()),
                sections_count=len(self.order),
                version=read_version(self.manifest),
                size=format_size(self.repository.output_size()),
            )
            self.repository.write_json(self.repository.build_stats_path, stats.to_dict())
        except Exception as e:
            logger.warning("build_stats_failed", error=str(e))
            result.warnings.append(
                MetadataError(f"Could not write build stats: {e}", cause=e).with_context(
                    path=str(self.repository.build_stats_path), step="build-stats"
                )
            )
            return

        result.stats = stats
        logger.info("build_stats_saved", path=str(self.repository.build_stats_path))
