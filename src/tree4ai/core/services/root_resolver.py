from __future__ import annotations

"""
Project Root Resolution Service.

Decides which directory the tree is rendered from: an explicit root when
given, otherwise the git toplevel of the working directory, otherwise the
working directory itself.
"""

import logging
import os
from typing import Optional

from tree4ai.domain.errors import InvalidRoot, VersionControlUnavailable
from tree4ai.infra import git
from tree4ai.infra.fs import display_path, is_listable_dir, normalize_path

logger = logging.getLogger(__name__)


def resolve_root(explicit_root: Optional[str], use_git: bool = True) -> str:
    """
    Resolve the project root for this invocation.

    Args:
        explicit_root: User-supplied root, or None to auto-detect.
        use_git: Whether the git toplevel query may be attempted.

    Returns:
        str: Canonical absolute directory path.

    Raises:
        InvalidRoot: If the explicit root is missing, not a directory, or unreadable.
    """
    cwd = os.getcwd()

    if explicit_root:
        root = normalize_path(explicit_root, cwd)
        if not os.path.exists(root):
            raise InvalidRoot(f"Root path does not exist: {display_path(root)}")
        if not os.path.isdir(root):
            raise InvalidRoot(f"Root path is not a directory: {display_path(root)}")
        if not is_listable_dir(root):
            raise InvalidRoot(f"Root directory is not readable: {display_path(root)}")
        logger.debug(f"Using explicit root: {display_path(root)}")
        return root

    if use_git:
        try:
            toplevel = normalize_path(git.show_toplevel(cwd), cwd)
            logger.debug(f"Using git toplevel as root: {toplevel}")
            return toplevel
        except VersionControlUnavailable as e:
            logger.debug(f"Git root detection unavailable: {e}")

    root = normalize_path(cwd, cwd)
    if not is_listable_dir(root):
        raise InvalidRoot(f"Working directory is not readable: {display_path(root)}")
    return root
