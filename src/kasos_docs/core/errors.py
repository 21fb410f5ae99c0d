"""
Structured error types for the documentation build tools.

Every failure raised or recorded by the assembler, extractor and updater is a
``DocsError`` subclass carrying a category, structured context and an optional
chained cause. Callers decide what is fatal by type:

- ``FatalBuildError`` aborts a build and maps to a non-zero CLI exit code.
- ``ExtractionError`` aborts an extraction run.
- ``ConfigError`` reports invalid settings; the CLIs exit with code 1.
- ``MissingFragmentWarning``, ``FragmentWriteError`` and ``MetadataError`` are
  recorded in result objects and logged; they are never raised to the CLI.

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────┐
        │                        DocsError                          │
        │           (category, context, cause, to_dict)             │
        ├──────────────────────────────────────────────────────────┤
        │  FatalBuildError         ExtractionError     ConfigError  │
        │  (BUILD)                 (PARSE)             (CONFIG)     │
        │                                                           │
        │  MissingFragmentWarning  FragmentWriteError  MetadataError│
        │  (SOURCE)                (STORAGE)           (METADATA)   │
        └──────────────────────────────────────────────────────────┘

Tags:
    error-handling, exception-hierarchy, error-context, docs-build

Usage:
    from kasos_docs.core.errors import FatalBuildError

    try:
        path.write_text(html, encoding="utf-8")
    except OSError as e:
        raise FatalBuildError("Cannot write output", cause=e).with_context(path=str(path))
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Error categories used for classification in logs and reports.

    Attributes:
        BUILD: Assembly could not complete (template or output unusable)
        SOURCE: A partial fragment is absent or unreadable
        PARSE: A combined document could not be read or scanned
        STORAGE: Writing a file failed
        METADATA: A best-effort metadata step failed
        CONFIG: Settings are missing or invalid
        INTERNAL: Bugs, unexpected state
    """

    BUILD = "BUILD"
    SOURCE = "SOURCE"
    PARSE = "PARSE"
    STORAGE = "STORAGE"
    METADATA = "METADATA"
    CONFIG = "CONFIG"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Only the fields that are set end up in ``to_dict()``. Anything without a
    dedicated field goes into ``metadata``.
    """

    path: str | None = None
    topic: str | None = None
    step: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["path", "topic", "step"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class DocsError(Exception):
    """
    Base class for all documentation build errors.

    Examples:
        >>> error = DocsError("Write failed", category=ErrorCategory.STORAGE)
        >>> error.with_context(path="index.html").context.path
        'index.html'
        >>> error.to_dict()["category"]
        'STORAGE'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> DocsError:
        """
        Add context to this error (fluent API).

        Usage:
            raise MetadataError("Sitemap failed").with_context(step="sitemap")
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }

        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict

        if self.cause is not None:
            result["cause"] = str(self.cause)

        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# FATAL ERRORS (abort the operation)
# =============================================================================


class FatalBuildError(DocsError):
    """
    The assembler cannot produce the combined document.

    Raised when the template exists but cannot be read, or when the output
    file cannot be written.
    """

    default_category = ErrorCategory.BUILD


class ExtractionError(DocsError):
    """The combined document could not be read for extraction."""

    default_category = ErrorCategory.PARSE


class ConfigError(DocsError):
    """Configuration error. Never recoverable at runtime."""

    default_category = ErrorCategory.CONFIG


# =============================================================================
# RECORDED ERRORS (collected in results, never raised to the CLI)
# =============================================================================


class MissingFragmentWarning(DocsError):
    """A topic in the canonical order has no usable partial."""

    default_category = ErrorCategory.SOURCE

    def __init__(self, topic: str, message: str | None = None, **kwargs: Any):
        super().__init__(message or f"Section not found: {topic}", **kwargs)
        self.context.topic = topic


class FragmentWriteError(DocsError):
    """A single extracted fragment could not be written."""

    default_category = ErrorCategory.STORAGE


class MetadataError(DocsError):
    """A best-effort metadata step (stats, changelog, versions, sitemap) failed."""

    default_category = ErrorCategory.METADATA


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "DocsError",
    "FatalBuildError",
    "ExtractionError",
    "ConfigError",
    "MissingFragmentWarning",
    "FragmentWriteError",
    "MetadataError",
]
