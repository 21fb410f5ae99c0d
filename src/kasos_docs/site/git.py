"""Last-commit lookup via ``git log``.

Used by the daily updater for ``stats.json``. Returns an empty string when
git is unavailable, the root is not a repository, or the call times out.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from kasos_docs.core.logging import get_logger

logger = get_logger(__name__)

_GIT_TIMEOUT = 30


def last_commit(repo_dir: Path) -> str:
    """``"<sha> <subject>"`` of HEAD, or ``""``."""
    try:
        result = subprocess.run(
            ["git", "log", "-1", "--format=%H %s"],
            capture_output=True,
            cwd=str(repo_dir),
            check=True,
            timeout=_GIT_TIMEOUT,
        )
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError) as exc:
        logger.debug("git_log_failed", error=str(exc))
        return ""
    return result.stdout.decode("utf-8", errors="replace").strip()
