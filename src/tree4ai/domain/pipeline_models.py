from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object passed from the pipeline engine to the interface
layer.
"""

from dataclasses import dataclass, field
from typing import Tuple

from tree4ai.domain.errors import FilesystemAccessError, TruncationNotice
from tree4ai.domain.tree_models import TreeNode

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Unified result object of a complete pipeline execution.

    Attributes:
        root: Canonical project root that was rendered.
        mode: Enumeration strategy used ("git-aware" or "fs-heuristic").
        tree: Final immutable tree.
        files_count: Number of file nodes in the tree.
        notices: Truncation notices, one per limit that omitted files.
        access_errors: Directories skipped during the filesystem walk.
    """
    root: str
    mode: str
    tree: TreeNode
    files_count: int = 0
    notices: Tuple[TruncationNotice, ...] = field(default_factory=tuple)
    access_errors: Tuple[FilesystemAccessError, ...] = field(default_factory=tuple)

    @property
    def truncated(self) -> bool:
        return bool(self.notices)
