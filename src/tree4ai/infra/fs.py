from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization and read-only validation helpers used by root
resolution and enumeration.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into a canonical absolute path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/), then resolves symlinks. Reverts to fallback if the
    input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Canonical absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.realpath(p)


def to_posix(rel_path: str) -> str:
    """Convert an OS-specific relative path into '/'-separated form."""
    if os.sep != "/":
        rel_path = rel_path.replace(os.sep, "/")
    return rel_path

# -----------------------------------------------------------------------------
# FILESYSTEM VALIDATION API
# -----------------------------------------------------------------------------

def is_listable_dir(path: str) -> bool:
    """
    Check that a path is a directory whose entries can be listed.

    Returns:
        bool: True if os.scandir succeeds on the path.
    """
    if not os.path.isdir(path):
        return False
    try:
        with os.scandir(path) as it:
            next(it, None)
        return True
    except OSError:
        return False

# -----------------------------------------------------------------------------
# DISPLAY API
# -----------------------------------------------------------------------------

def display_path(path: str) -> str:
    """
    Make a filesystem path safe to print.

    Names that are not valid UTF-8 come back from the OS as surrogate-escaped
    strings, which cannot be encoded for output. Invalid bytes are replaced
    with U+FFFD, matching a lossy decode.

    Args:
        path: Path as returned by os.walk, os.getcwd or os.fsdecode.

    Returns:
        str: Encodable path string.
    """
    return os.fsencode(path).decode("utf-8", errors="replace")
