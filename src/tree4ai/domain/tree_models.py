from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the candidate path record produced by enumeration, the relevance
classification tags, and the immutable recursive node type used to
represent the final project tree.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple

# -----------------------------------------------------------------------------
# ENUMERATION OUTPUT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CandidatePath:
    """
    A path discovered by an enumeration strategy.

    Attributes:
        path: Path relative to the project root, '/' separated.
        is_dir: True when the entry is a directory.
        ignored: True when version-control ignore rules exclude the path.
    """
    path: str
    is_dir: bool = False
    ignored: bool = False

    @property
    def name(self) -> str:
        return self.path.rsplit("/", 1)[-1]


class Classification(Enum):
    """Relevance tag assigned to a candidate path."""
    RELEVANT = "relevant"
    ASSET = "asset"
    BINARY = "binary"
    SECRET_LIKE = "secret_like"
    IGNORED = "ignored"
    IRRELEVANT = "irrelevant"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeNode:
    """
    Represents a directory or file entry in the project tree.

    Attributes:
        name: Entry name (single path segment; the root uses the project name).
        is_dir: True for directories.
        children: Ordered child nodes, directories first. Empty for files.
    """
    name: str
    is_dir: bool = True
    children: Tuple["TreeNode", ...] = ()

    def walk(self, depth: int = 0) -> Iterator[Tuple[int, "TreeNode"]]:
        """Yield (depth, node) pairs in display order, excluding this node."""
        for child in self.children:
            yield depth + 1, child
            if child.is_dir:
                yield from child.walk(depth + 1)

    def count_files(self) -> int:
        return sum(1 for _, node in self.walk() if not node.is_dir)
