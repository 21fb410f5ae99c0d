"""Shared primitives for the documentation tools.

Architecture::

    errors.py      Structured error hierarchy (DocsError, FatalBuildError)
    result.py      Result[T] envelope (Ok / Err / try_result)
    logging.py     structlog configuration
    settings.py    pydantic-settings configuration (KASOS_DOCS_*)
    timestamps.py  UTC helpers (stdlib-only)
"""

from kasos_docs.core.errors import (
    ConfigError,
    DocsError,
    ErrorCategory,
    ErrorContext,
    ExtractionError,
    FatalBuildError,
    FragmentWriteError,
    MetadataError,
    MissingFragmentWarning,
)
from kasos_docs.core.result import Err, Ok, Result, partition_results, try_result

__all__ = [
    "ConfigError",
    "DocsError",
    "ErrorCategory",
    "ErrorContext",
    "ExtractionError",
    "FatalBuildError",
    "FragmentWriteError",
    "MetadataError",
    "MissingFragmentWarning",
    "Err",
    "Ok",
    "Result",
    "partition_results",
    "try_result",
]
