from __future__ import annotations

"""
File Discovery Service.

Provides the two interchangeable strategies that produce candidate paths for
a project root: a git-aware listing (fast, honors ignore rules) and a
filesystem walk (fallback, prunes noise directories and evaluates
.gitignore files itself). The orchestrating entry point tries git first and
falls back silently to the walk.
"""

import logging
import os
from typing import Dict, List, Protocol, Tuple

from tree4ai.core.pipeline.components.classifier import (
    DEFAULT_RULES,
    ClassifierRules,
    is_noise_dir,
    is_secret_name,
)
from tree4ai.core.services.gitignore import IgnoreRules
from tree4ai.domain.config import RenderConfig
from tree4ai.domain.constants import MODE_FS, MODE_GIT
from tree4ai.domain.errors import FilesystemAccessError, VersionControlUnavailable
from tree4ai.domain.tree_models import CandidatePath
from tree4ai.infra import git
from tree4ai.infra.fs import display_path, to_posix

logger = logging.getLogger(__name__)


class CandidateSource(Protocol):
    """Anything that can list candidate paths below a project root."""

    def candidates(self) -> List[CandidatePath]:
        ...

# ==============================================================================
# STRATEGY: GIT LISTING
# ==============================================================================

class GitListing:
    """
    Candidate listing backed by `git ls-files`.

    Tracked and untracked-but-not-ignored files are always listed. Ignored
    files are listed (flagged as ignored) when either ignored paths or
    secret-like names are wanted; ignored paths under noise directories are
    dropped to keep dependency caches out of the output.
    """

    def __init__(
            self,
            root: str,
            include_ignored: bool = False,
            include_secret_names: bool = True,
            rules: ClassifierRules = DEFAULT_RULES,
    ) -> None:
        self.root = root
        self.include_ignored = include_ignored
        self.include_secret_names = include_secret_names
        self.rules = rules

    def candidates(self) -> List[CandidatePath]:
        """
        Raises:
            VersionControlUnavailable: On any git failure.
        """
        seen: Dict[str, CandidatePath] = {}

        for rel in git.ls_files(self.root):
            self._add(seen, rel, ignored=False)

        if self.include_ignored or self.include_secret_names:
            for rel in git.ls_files(self.root, ignored=True):
                if self._under_noise_dir(rel):
                    continue
                if not self.include_ignored and not is_secret_name(rel):
                    continue
                self._add(seen, rel, ignored=True)

        return list(seen.values())

    def _add(self, seen: Dict[str, CandidatePath], rel: str, ignored: bool) -> None:
        rel = rel.rstrip("/")
        if not rel or rel in seen:
            return
        abs_path = os.path.join(self.root, rel)
        if not os.path.lexists(abs_path):
            # Tracked but deleted from the working tree
            return
        is_dir = os.path.isdir(abs_path) and not os.path.islink(abs_path)
        seen[rel] = CandidatePath(path=display_path(rel), is_dir=is_dir, ignored=ignored)

    def _under_noise_dir(self, rel: str) -> bool:
        parts = rel.split("/")[:-1]
        return any(is_noise_dir(p, self.rules) for p in parts)

# ==============================================================================
# STRATEGY: FILESYSTEM WALK
# ==============================================================================

class FilesystemWalk:
    """
    Candidate listing backed by a recursive directory walk.

    Noise directories are pruned unconditionally. Symlinked directories are
    not followed. Unreadable directories are skipped and recorded in
    `access_errors`.
    """

    def __init__(self, root: str, rules: ClassifierRules = DEFAULT_RULES) -> None:
        self.root = root
        self.rules = rules
        self.access_errors: List[FilesystemAccessError] = []

    def candidates(self) -> List[CandidatePath]:
        self.access_errors = []
        results: List[CandidatePath] = []

        # rel_dir -> (rules applying inside it, whether the dir itself is ignored)
        dir_state: Dict[str, Tuple[IgnoreRules, bool]] = {
            "": (IgnoreRules.for_root(self.root), False),
        }

        for current, dirs, files in os.walk(self.root, onerror=self._on_error, followlinks=False):
            rel_dir = self._rel(current)
            rules, dir_ignored = dir_state.pop(rel_dir, (IgnoreRules(), False))

            # In-place pruning of noise directories
            dirs[:] = sorted(d for d in dirs if not is_noise_dir(d, self.rules))
            files.sort()

            for d in dirs:
                child_rel = f"{rel_dir}/{d}" if rel_dir else d
                child_ignored = dir_ignored or rules.is_ignored(child_rel, is_dir=True)
                child_rules = rules.descend(os.path.join(current, d), child_rel)
                dir_state[child_rel] = (child_rules, child_ignored)

            for f in files:
                rel = f"{rel_dir}/{f}" if rel_dir else f
                ignored = dir_ignored or rules.is_ignored(rel)
                results.append(CandidatePath(path=display_path(rel), is_dir=False, ignored=ignored))

        return results

    def _rel(self, abs_path: str) -> str:
        rel = os.path.relpath(abs_path, self.root)
        return "" if rel == "." else to_posix(rel)

    def _on_error(self, err: OSError) -> None:
        target = err.filename or self.root
        rel = self._rel(os.fsdecode(target))
        record = FilesystemAccessError(rel_path=display_path(rel) or ".", error=err.strerror or str(err))
        self.access_errors.append(record)
        logger.warning(f"Skipping unreadable directory '{record.rel_path}': {record.error}")

# ==============================================================================
# PUBLIC API (STRATEGY SELECTION)
# ==============================================================================

def enumerate_candidates(
        root: str,
        config: RenderConfig,
        rules: ClassifierRules = DEFAULT_RULES,
) -> Tuple[List[CandidatePath], str, List[FilesystemAccessError]]:
    """
    List candidate paths below root, preferring git.

    Args:
        root: Canonical project root.
        config: Resolved render configuration.
        rules: Classification tables (noise directories).

    Returns:
        Tuple of (candidates, mode label, access errors recorded by the walk).
    """
    if config.use_git:
        listing = GitListing(
            root,
            include_ignored=config.include_ignored,
            include_secret_names=not config.hide_secrets,
            rules=rules,
        )
        try:
            return _collect(listing), MODE_GIT, []
        except VersionControlUnavailable as e:
            logger.info(f"Git listing unavailable, falling back to filesystem walk: {e}")

    walker = FilesystemWalk(root, rules=rules)
    return _collect(walker), MODE_FS, list(walker.access_errors)


def _collect(source: CandidateSource) -> List[CandidatePath]:
    candidates = source.candidates()
    logger.debug(f"{type(source).__name__} produced {len(candidates)} candidate(s)")
    return candidates
