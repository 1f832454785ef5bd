from __future__ import annotations

"""
Git Infrastructure Layer.

Thin wrapper over the git executable. Exposes the two read-only queries the
application needs (repository toplevel, file listings) and converts every
failure mode (missing executable, not a repository, non-zero exit) into
VersionControlUnavailable.
"""

import logging
import os
import subprocess
from typing import List, Sequence

from tree4ai.domain.errors import VersionControlUnavailable

logger = logging.getLogger(__name__)

GIT_EXECUTABLE = "git"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def show_toplevel(cwd: str) -> str:
    """
    Return the repository toplevel directory containing cwd.

    Raises:
        VersionControlUnavailable: If git is absent or cwd is not inside a repository.
    """
    out = _run_git(["rev-parse", "--show-toplevel"], cwd).strip()
    if not out:
        raise VersionControlUnavailable("git rev-parse returned an empty toplevel")
    return out


def ls_files(cwd: str, *, ignored: bool = False) -> List[str]:
    """
    List files relative to cwd.

    Args:
        cwd: Directory to run the listing from.
        ignored: When False, list tracked plus untracked-but-not-ignored files.
                 When True, list untracked files excluded by ignore rules.

    Returns:
        List[str]: '/'-separated relative paths, in git's order.
    """
    if ignored:
        args = ["ls-files", "-z", "--others", "--ignored", "--exclude-standard"]
    else:
        args = ["ls-files", "-z", "--cached", "--others", "--exclude-standard"]
    out = _run_git(args, cwd)
    return [p for p in out.split("\0") if p.strip()]

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _run_git(args: Sequence[str], cwd: str) -> str:
    cmd = [GIT_EXECUTABLE, *args]
    logger.debug(f"Running: {' '.join(cmd)} (cwd={cwd})")
    try:
        proc = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            check=False,
        )
    except OSError as e:
        raise VersionControlUnavailable(f"git could not be executed: {e}") from e

    if proc.returncode != 0:
        stderr = proc.stderr.decode("utf-8", errors="replace").strip()
        raise VersionControlUnavailable(
            f"git {args[0]} failed with exit code {proc.returncode}: {stderr}"
        )
    # Paths must round-trip to disk, so undecodable bytes stay surrogate-escaped
    return os.fsdecode(proc.stdout)
