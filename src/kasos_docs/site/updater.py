"""Daily documentation update.

Stability: stable
Tags: updater, changelog, sitemap, stats, scheduled

Runs four independent steps against a documentation root. Each step returns
its outcome as a ``Result``; a failing step is logged and reported but never
stops the steps after it.

Steps::

    stats      stats.json + build-number.txt (counter advanced by one)
    changelog  CHANGELOG.md entry for partials modified in the last 24h
               and since the previous run
    versions   partials/versions-releases.html from the release list
    sitemap    sitemap.xml for the configured topics

Examples:
    >>> updater = DailyUpdater(SiteRepository(Path("docs")))
    >>> report = updater.run_daily_update()
    >>> report.ok
    True
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from kasos_docs.core.errors import DocsError, MetadataError
from kasos_docs.core.logging import get_logger
from kasos_docs.core.result import Err, Ok, Result, partition_results, try_result
from kasos_docs.core.timestamps import parse_iso8601, to_date, to_iso8601_z, utc_now
from kasos_docs.site.changelog import (
    ChangedFile,
    changelog_header,
    default_changelog,
    find_recent_changes,
    insert_entry,
    render_entry,
)
from kasos_docs.site.git import last_commit
from kasos_docs.site.order import CANONICAL_ORDER, VERSIONS_TOPIC
from kasos_docs.site.releases import release_history, render_versions_fragment
from kasos_docs.site.render import TemplateRenderer
from kasos_docs.site.repository import SiteRepository
from kasos_docs.site.sitemap import render_sitemap
from kasos_docs.site.stats import UpdateStats, format_size, next_build_number

logger = get_logger(__name__)

TOTAL_PAGES = 1


@dataclass
class UpdateReport:
    """Per-step outcomes of one daily update, in execution order."""

    steps: dict[str, Result[Any]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        _, errors = partition_results(list(self.steps.values()))
        return not errors

    @property
    def failures(self) -> dict[str, Exception]:
        return {
            name: result.error
            for name, result in self.steps.items()
            if isinstance(result, Err)
        }

    def to_dict(self) -> dict[str, Any]:
        return {name: result.to_dict() for name, result in self.steps.items()}


class DailyUpdater:
    """Regenerates stats, changelog, versions fragment and sitemap."""

    def __init__(
        self,
        repository: SiteRepository,
        *,
        product_name: str = "KasOS",
        base_url: str = "https://docs.kasos.io",
        sitemap_topics: Sequence[str] = CANONICAL_ORDER,
        clock: Callable[[], datetime] = utc_now,
        commit_lookup: Callable[[Path], str] = last_commit,
        renderer: TemplateRenderer | None = None,
    ):
        self.repository = repository
        self.product_name = product_name
        self.base_url = base_url
        self.sitemap_topics = tuple(sitemap_topics)
        self.clock = clock
        self.commit_lookup = commit_lookup
        self.renderer = renderer or TemplateRenderer()

    def run_daily_update(self) -> UpdateReport:
        """Run every step and collect the outcomes."""
        logger.info("daily_update_started", root=str(self.repository.root))
        now = self.clock()
        since = self.previous_run()

        steps: dict[str, Callable[[], Any]] = {
            "stats": lambda: self.update_stats(now),
            "changelog": lambda: self.check_for_changes(now, since=since),
            "versions": lambda: self.update_versions_section(now),
            "sitemap": lambda: self.generate_sitemap(now),
        }

        report = UpdateReport()
        for name, step in steps.items():
            result = try_result(step).map_err(lambda e, step=name: _as_metadata_error(e, step))
            report.steps[name] = result
            match result:
                case Ok():
                    logger.info("update_step_completed", step=name)
                case Err(error):
                    logger.warning("update_step_failed", step=name, error=str(error))

        logger.info("daily_update_completed", failed=sorted(report.failures))
        return report

    # ------------------------------------------------------------------ #
    # Steps
    # ------------------------------------------------------------------ #

    def update_stats(self, now: datetime) -> UpdateStats:
        build_number = next_build_number(self.repository.read_build_number())
        self.repository.write_build_number(build_number)

        stats = UpdateStats(
            last_updated=to_iso8601_z(now),
            total_sections=self.repository.count_sections(),
            total_pages=TOTAL_PAGES,
            last_commit=self.commit_lookup(self.repository.root),
            build_number=build_number,
            file_size=format_size(self.repository.output_size()),
        )
        self.repository.write_json(self.repository.stats_path, stats.to_dict())
        return stats

    def previous_run(self) -> datetime | None:
        """``lastUpdated`` from the stats of the previous run, if readable."""
        try:
            stats = self.repository.read_stats()
        except OSError as e:
            logger.warning("previous_stats_unreadable", error=str(e))
            return None
        if not stats or "lastUpdated" not in stats:
            return None
        try:
            return parse_iso8601(str(stats["lastUpdated"]))
        except ValueError:
            logger.warning("previous_stats_bad_timestamp", value=stats["lastUpdated"])
            return None

    def check_for_changes(
        self, now: datetime, *, since: datetime | None = None
    ) -> list[ChangedFile]:
        """Log partials modified within the last 24 hours to the changelog.

        Files modified at or before ``since`` (the previous run) were logged
        then and are skipped. The versions fragment is excluded because this
        updater rewrites it on every run.
        """
        changes = find_recent_changes(
            self.repository.list_partials(),
            now,
            since=since,
            exclude=frozenset({f"{VERSIONS_TOPIC}.html"}),
        )
        if not changes:
            logger.info("no_recent_changes")
            return changes

        logger.info("recent_changes_found", count=len(changes))
        self.log_changes(now, changes)
        return changes

    def log_changes(self, now: datetime, changes: list[ChangedFile]) -> None:
        header = changelog_header(self.product_name)
        existing = self.repository.read_changelog()
        if existing is None:
            existing = default_changelog(header)

        updated = insert_entry(existing, header, render_entry(now, changes))
        self.repository.write_changelog(updated)

    def update_versions_section(self, now: datetime) -> Path:
        html = render_versions_fragment(
            release_history(to_date(now)),
            product_name=self.product_name,
            renderer=self.renderer,
        )
        return self.repository.write_fragment(VERSIONS_TOPIC, html)

    def generate_sitemap(self, now: datetime) -> Path:
        xml = render_sitemap(
            self.base_url,
            self.sitemap_topics,
            to_date(now),
            renderer=self.renderer,
        )
        return self.repository.write_sitemap(xml)


def _as_metadata_error(error: Exception, step: str) -> DocsError:
    if isinstance(error, DocsError):
        if error.context.step is None:
            error.with_context(step=step)
        return error
    return MetadataError(f"{step} step failed: {error}", cause=error).with_context(step=step)
