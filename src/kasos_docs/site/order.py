"""Canonical section order of the combined document.

The order is hand-maintained; it is never derived from the partials
directory. Adding a partial without listing it here leaves it out of
``index.html``.
"""

from __future__ import annotations

CANONICAL_ORDER: tuple[str, ...] = (
    "introduction",
    "getting-started",
    "desktop-environment",
    "window-management",
    "application-system",
    "keyboard-shortcuts",
    "customization",
    "troubleshooting",
    "text-editor",
    "dev-tools",
    "terminal",
    "file-manager",
    "kaswallet",
    "kasia-messenger",
    "settings",
    "app-development",
    "api-reference",
    "advanced-development",
    "testing-debugging",
    "deployment",
    "security",
    "architecture",
    "crypto-integration",
    "wasm-sandbox",
    "ai-integration",
    "performance",
    "contributing",
    "versions-releases",
    "support",
)

# Partial regenerated by the daily updater
VERSIONS_TOPIC = "versions-releases"


def validate_order(order: tuple[str, ...] | list[str]) -> tuple[str, ...]:
    """Return ``order`` as a tuple, rejecting duplicate identifiers."""
    seen: set[str] = set()
    for topic in order:
        if topic in seen:
            raise ValueError(f"Duplicate topic in section order: {topic}")
        seen.add(topic)
    return tuple(order)
