"""Settings for the documentation tools.

Values come from ``KASOS_DOCS_*`` environment variables and an optional
``.env`` file; CLI options override them. Unknown keys are ignored so a
shared ``.env`` does not break startup.

Examples:
    >>> settings = DocsSettings(root=Path("docs"))
    >>> settings.resolved_manifest()
    PosixPath('docs/../../package.json')
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from kasos_docs.core.errors import ConfigError
from kasos_docs.site.order import CANONICAL_ORDER


class DocsSettings(BaseSettings):
    """Settings shared by the build and update CLIs.

    Fields
    ──────
    root             : Documentation root (holds partials/, index.html, ...)
    product_name     : Product name used in the changelog header
    base_url         : Public site URL used in sitemap.xml
    package_manifest : package.json whose ``version`` goes into build stats
    sitemap_topics   : Topic identifiers listed in sitemap.xml
    log_level        : Structlog log level
    json_logs        : Force JSON (True) or console (False) logs; None = auto
    """

    model_config = SettingsConfigDict(
        env_prefix="KASOS_DOCS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Paths ────────────────────────────────────────────────────
    root: Path = Field(default_factory=Path.cwd)
    package_manifest: Path | None = Field(
        default=None,
        description="Defaults to <root>/../../package.json",
    )

    # ── Site ─────────────────────────────────────────────────────
    product_name: str = "KasOS"
    base_url: str = "https://docs.kasos.io"
    sitemap_topics: tuple[str, ...] = CANONICAL_ORDER

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    json_logs: bool | None = None

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("sitemap_topics")
    @classmethod
    def _unique_topics(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if len(set(value)) != len(value):
            raise ValueError("sitemap_topics must not contain duplicates")
        return value

    def resolved_manifest(self) -> Path:
        """Path of the package.json read for the build version."""
        if self.package_manifest is not None:
            return self.package_manifest
        return self.root / ".." / ".." / "package.json"


_settings_cache: dict[str, DocsSettings] = {}


def get_settings(*, root: Path | None = None, _force_reload: bool = False) -> DocsSettings:
    """Load, validate, and cache a :class:`DocsSettings` instance.

    Args:
        root: Override the documentation root from the environment.
        _force_reload: Bypass cache and reload.

    Raises:
        ConfigError: An environment or .env value is invalid.
    """
    cache_key = str(root.resolve()) if root is not None else ""

    if not _force_reload and cache_key in _settings_cache:
        return _settings_cache[cache_key]

    try:
        settings = DocsSettings(root=root) if root is not None else DocsSettings()
    except ValueError as e:
        # pydantic ValidationError and pydantic-settings SettingsError
        raise ConfigError(f"Invalid settings: {e}", cause=e) from e
    _settings_cache[cache_key] = settings
    return settings


def clear_settings_cache() -> None:
    """Clear the settings cache (primarily for testing)."""
    _settings_cache.clear()
