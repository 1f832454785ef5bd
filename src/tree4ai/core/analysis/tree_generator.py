from __future__ import annotations

"""
Directory Tree Generator.

Constructs the hierarchical representation of a filtered path list.
Intermediate directories are synthesized from path segments, entries deeper
than the depth limit are dropped, empty directories are pruned, and every
level is ordered directories first.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple, Union

from tree4ai.domain.tree_models import TreeNode

logger = logging.getLogger(__name__)

# Mutable scaffold used during construction: name -> subtree, or None for a file
_Scaffold = Dict[str, Union["_Scaffold", None]]


@dataclass(frozen=True)
class BuildResult:
    """
    Attributes:
        tree: Immutable root node.
        omitted_by_depth: Files dropped because they exceed the depth limit.
    """
    tree: TreeNode
    omitted_by_depth: int = 0

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(
        paths: Iterable[str],
        root_name: str,
        max_depth: Optional[int] = None,
) -> BuildResult:
    """
    Build an ordered tree from '/'-separated relative file paths.

    Depth counts path segments, so 'a.txt' has depth 1 and 'src/a.txt'
    depth 2. A file deeper than max_depth is omitted, and a directory is
    only kept if at least one file below it survives.

    Args:
        paths: Relative file paths (duplicates are collapsed).
        root_name: Display name for the root node.
        max_depth: Maximum segment count, or None for unbounded.

    Returns:
        BuildResult: The tree and the number of files omitted by depth.
    """
    scaffold: _Scaffold = {}
    omitted = 0

    for path in paths:
        parts = [p for p in path.split("/") if p]
        if not parts:
            continue
        if max_depth is not None and len(parts) > max_depth:
            omitted += 1
            continue

        level = scaffold
        for part in parts[:-1]:
            child = level.get(part)
            if child is None:
                child = {}
                level[part] = child
            level = child
        level.setdefault(parts[-1], None)

    if omitted:
        logger.debug(f"{omitted} file(s) omitted beyond depth {max_depth}")

    return BuildResult(tree=_freeze(root_name, scaffold), omitted_by_depth=omitted)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _freeze(name: str, scaffold: _Scaffold) -> TreeNode:
    """Convert the scaffold into immutable nodes, pruning empty directories."""
    dirs = []
    files = []
    for child_name, sub in scaffold.items():
        if sub is None:
            files.append(TreeNode(name=child_name, is_dir=False))
            continue
        node = _freeze(child_name, sub)
        if node.children:
            dirs.append(node)

    dirs.sort(key=_name_key)
    files.sort(key=_name_key)
    return TreeNode(name=name, is_dir=True, children=tuple(dirs) + tuple(files))


def _name_key(node: TreeNode) -> Tuple[str, str]:
    return node.name.casefold(), node.name
