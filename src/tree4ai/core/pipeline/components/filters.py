from __future__ import annotations

"""
Candidate Filtering Component.

Reduces the enumerated candidate set to the files that should appear in the
tree: classification against the user's inclusion flags, then a
deterministic cap on the number of files.
"""

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Tuple

from tree4ai.core.pipeline.components.classifier import (
    DEFAULT_RULES,
    ClassifierRules,
    classify,
)
from tree4ai.domain.config import RenderConfig
from tree4ai.domain.tree_models import CandidatePath, Classification

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterResult:
    """
    Output of the filtering stage.

    Attributes:
        paths: Surviving file paths in tree display order.
        total_files: Number of files that passed classification, before the cap.
        truncated: True when the cap removed at least one file.
    """
    paths: Tuple[str, ...] = field(default_factory=tuple)
    total_files: int = 0
    truncated: bool = False

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def allowed_classifications(config: RenderConfig) -> FrozenSet[Classification]:
    """
    Compute the set of classifications admitted by the configuration.

    Secret-like paths are admitted unless hidden, regardless of the ignored
    flag, because secrecy is decided before ignore status.
    """
    allowed = {Classification.RELEVANT}
    if config.include_assets:
        allowed.add(Classification.ASSET)
    if config.include_binaries:
        allowed.add(Classification.BINARY)
    if config.include_ignored:
        allowed.add(Classification.IGNORED)
    if not config.hide_secrets:
        allowed.add(Classification.SECRET_LIKE)
    return frozenset(allowed)


def filter_candidates(
        candidates: Iterable[CandidatePath],
        config: RenderConfig,
        rules: ClassifierRules = DEFAULT_RULES,
) -> FilterResult:
    """
    Apply classification and the file cap.

    Directory candidates are dropped here; the tree builder synthesizes
    directories from surviving file paths, so directories left without a
    surviving descendant disappear on their own.

    Args:
        candidates: Enumerated paths.
        config: Resolved render configuration.
        rules: Classification tables.

    Returns:
        FilterResult: Sorted survivors plus cap bookkeeping.
    """
    allowed = allowed_classifications(config)

    kept: List[str] = []
    for c in candidates:
        if c.is_dir:
            continue
        tag = classify(c.path, is_dir=False, ignored=c.ignored, rules=rules)
        if tag in allowed:
            kept.append(c.path)
        else:
            logger.debug(f"Filtered out {c.path} ({tag.value})")

    kept = sorted(set(kept), key=tree_sort_key)
    total = len(kept)

    truncated = False
    if config.max_files is not None and total > config.max_files:
        kept = kept[:config.max_files]
        truncated = True

    return FilterResult(paths=tuple(kept), total_files=total, truncated=truncated)


def tree_sort_key(path: str) -> Tuple[Tuple[int, str, str], ...]:
    """
    Sort key reproducing tree display order for a flat path.

    Each segment sorts directories before files, then case-insensitively,
    then by raw name so the order is total.
    """
    parts = path.split("/")
    last = len(parts) - 1
    return tuple(
        (1 if i == last else 0, part.casefold(), part)
        for i, part in enumerate(parts)
    )
