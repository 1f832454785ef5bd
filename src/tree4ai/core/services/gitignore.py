from __future__ import annotations

"""
Gitignore Pattern Matching.

Evaluates hierarchical .gitignore files during a filesystem walk so that
paths can be flagged as ignored without asking git. Each directory level
contributes its own compiled spec; deeper levels override shallower ones and
negated patterns re-include paths, following git's last-match-wins rule.
"""

import logging
import os
from typing import List, Optional, Tuple

from pathspec import GitIgnoreSpec

logger = logging.getLogger(__name__)

GITIGNORE_FILE = ".gitignore"


def load_gitignore(dir_path: str) -> Optional[GitIgnoreSpec]:
    """
    Compile the .gitignore of a directory, if it has one.

    Args:
        dir_path: Absolute directory path.

    Returns:
        Optional[GitIgnoreSpec]: Compiled spec, or None when absent/unreadable/empty.
    """
    gitignore_path = os.path.join(dir_path, GITIGNORE_FILE)
    if not os.path.isfile(gitignore_path):
        return None

    try:
        with open(gitignore_path, "r", encoding="utf-8", errors="replace") as f:
            lines = [
                line.rstrip("\n")
                for line in f
                if line.strip() and not line.lstrip().startswith("#")
            ]
    except OSError as e:
        logger.warning(f"Failed to read .gitignore at {gitignore_path}: {e}")
        return None

    if not lines:
        return None
    return GitIgnoreSpec.from_lines(lines)


class IgnoreRules:
    """Stack of gitignore specs from the project root down to one directory."""

    def __init__(self, levels: Optional[List[Tuple[str, GitIgnoreSpec]]] = None) -> None:
        # (base directory relative to root, spec) ordered root first
        self._levels: List[Tuple[str, GitIgnoreSpec]] = list(levels or [])

    @classmethod
    def for_root(cls, root: str) -> "IgnoreRules":
        spec = load_gitignore(root)
        return cls([("", spec)] if spec else [])

    def descend(self, abs_dir: str, rel_dir: str) -> "IgnoreRules":
        """
        Rules applying inside a subdirectory, including its own .gitignore.

        Args:
            abs_dir: Absolute path of the subdirectory.
            rel_dir: Root-relative '/'-separated path of the subdirectory.
        """
        spec = load_gitignore(abs_dir)
        if spec is None:
            return self
        return IgnoreRules(self._levels + [(rel_dir, spec)])

    def is_ignored(self, rel_path: str, is_dir: bool = False) -> bool:
        """
        Evaluate a root-relative path against every applicable level.

        Args:
            rel_path: '/'-separated path relative to the project root.
            is_dir: Directories are matched with a trailing slash so that
                    directory-only patterns ('build/') apply.
        """
        result: Optional[bool] = None
        for base, spec in self._levels:
            if base:
                if not rel_path.startswith(base + "/"):
                    continue
                local = rel_path[len(base) + 1:]
            else:
                local = rel_path
            if is_dir:
                local += "/"
            level_result = _last_match(spec, local)
            if level_result is not None:
                result = level_result
        return bool(result)


def _last_match(spec: GitIgnoreSpec, path: str) -> Optional[bool]:
    """Return True (ignored), False (negated) or None (no pattern matched)."""
    result: Optional[bool] = None
    for pattern in spec.patterns:
        if pattern.include is None:
            continue
        if pattern.match_file(path) is not None:
            result = pattern.include
    return result
