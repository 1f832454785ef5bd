from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates the tree workflow:
1. Resolves the project root.
2. Enumerates candidate paths (git listing, else filesystem walk).
3. Filters candidates by classification and applies the file cap.
4. Builds the ordered, depth-limited tree.
5. Collects truncation notices and access errors for reporting.
"""

import logging
import os

from tree4ai.core.analysis.tree_generator import build_tree
from tree4ai.core.pipeline.components.classifier import DEFAULT_RULES, ClassifierRules
from tree4ai.core.pipeline.components.filters import filter_candidates
from tree4ai.core.services.root_resolver import resolve_root
from tree4ai.core.services.scanner import enumerate_candidates
from tree4ai.domain.config import RenderConfig
from tree4ai.domain.errors import TruncationNotice
from tree4ai.domain.pipeline_models import PipelineResult
from tree4ai.infra.fs import display_path

logger = logging.getLogger(__name__)


def run_pipeline(config: RenderConfig, rules: ClassifierRules = DEFAULT_RULES) -> PipelineResult:
    """
    Execute the full discovery-to-tree pipeline.

    Args:
        config: Frozen render configuration.
        rules: Classification tables.

    Returns:
        PipelineResult: Tree plus mode, counts and notices.

    Raises:
        InvalidRoot: If the project root cannot be used.
    """
    # -------------------------------------------------------------------------
    # 1) Root Resolution
    # -------------------------------------------------------------------------
    root = resolve_root(config.root, use_git=config.use_git)
    logger.debug(f"Project root resolved to: {root}")

    # -------------------------------------------------------------------------
    # 2) Enumeration
    # -------------------------------------------------------------------------
    candidates, mode, access_errors = enumerate_candidates(root, config, rules)
    logger.debug(f"Enumerated {len(candidates)} candidate(s) in {mode} mode")

    # -------------------------------------------------------------------------
    # 3) Filtering & File Cap
    # -------------------------------------------------------------------------
    filtered = filter_candidates(candidates, config, rules)

    notices = []
    if filtered.truncated and config.max_files is not None:
        notices.append(TruncationNotice(
            kind="max_files",
            limit=config.max_files,
            omitted=filtered.total_files - len(filtered.paths),
        ))

    # -------------------------------------------------------------------------
    # 4) Tree Construction
    # -------------------------------------------------------------------------
    built = build_tree(filtered.paths, display_path(_root_name(root)), max_depth=config.max_depth)

    if built.omitted_by_depth and config.max_depth is not None:
        notices.append(TruncationNotice(
            kind="max_depth",
            limit=config.max_depth,
            omitted=built.omitted_by_depth,
        ))

    return PipelineResult(
        root=display_path(root),
        mode=mode,
        tree=built.tree,
        files_count=built.tree.count_files(),
        notices=tuple(notices),
        access_errors=tuple(access_errors),
    )


def _root_name(root: str) -> str:
    return os.path.basename(root.rstrip(os.sep)) or root
