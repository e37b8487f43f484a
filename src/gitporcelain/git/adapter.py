"""Git subprocess wrapper — repository root and porcelain v2 status capture."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""


def _run_git(args: List[str], cwd: Path, timeout: int = 30) -> bytes:
    """Run a git command and return raw stdout. Raises GitError on failure."""
    logger.debug("running git %s in %s", " ".join(args), cwd)
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            timeout=timeout,
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        raise GitError(f"git error: {stderr or f'exit status {result.returncode}'}")
    return result.stdout


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the current git repository."""
    cwd = cwd or Path.cwd()
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    return Path(out.decode("utf-8", errors="surrogateescape").strip())


def get_status_output(
    repo_root: Path,
    *,
    null_terminated: bool = False,
    timeout: int = 30,
) -> bytes:
    """Return the stdout of ``git status --ignored --porcelain=v2``."""
    args = ["status", "--ignored", "--porcelain=v2"]
    if null_terminated:
        args.append("-z")
    return _run_git(args, cwd=repo_root, timeout=timeout)
