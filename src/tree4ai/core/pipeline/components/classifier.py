from __future__ import annotations

"""
Path Classification Engine.

Assigns a relevance tag to a path from its name alone. File contents are
never read. The extension and filename tables are immutable data bundled in
ClassifierRules so classification stays a pure function that can be tested
with custom tables.
"""

import re
from dataclasses import dataclass
from typing import FrozenSet, Pattern

from tree4ai.domain.constants import (
    ASSET_EXTENSIONS,
    BINARY_EXTENSIONS,
    JUNK_NAMES,
    LOCK_NAMES,
    NOISE_DIRS,
    RELEVANT_EXTENSIONS,
    RELEVANT_NAMES,
    SECRET_NAME_PATTERN,
)
from tree4ai.domain.tree_models import Classification

# -----------------------------------------------------------------------------
# RULE TABLES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ClassifierRules:
    """
    Immutable lookup tables driving classification.

    All names and extensions are lower-case; extensions carry no leading dot.
    """
    relevant_names: FrozenSet[str] = RELEVANT_NAMES
    relevant_extensions: FrozenSet[str] = RELEVANT_EXTENSIONS
    asset_extensions: FrozenSet[str] = ASSET_EXTENSIONS
    binary_extensions: FrozenSet[str] = BINARY_EXTENSIONS
    junk_names: FrozenSet[str] = JUNK_NAMES
    lock_names: FrozenSet[str] = LOCK_NAMES
    noise_dirs: FrozenSet[str] = NOISE_DIRS


DEFAULT_RULES = ClassifierRules()

_SECRET_RX: Pattern[str] = re.compile(SECRET_NAME_PATTERN)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def classify(
        path: str,
        is_dir: bool = False,
        ignored: bool = False,
        rules: ClassifierRules = DEFAULT_RULES,
) -> Classification:
    """
    Classify a path by its final segment.

    Precedence (first match wins): secret-like name, ignored, directory,
    junk/lockfile, relevant, asset, binary, irrelevant.

    Args:
        path: Relative or absolute path, '/' or OS separated.
        is_dir: Whether the path is a directory.
        ignored: Whether version-control ignore rules exclude the path.
        rules: Lookup tables to classify against.

    Returns:
        Classification: The relevance tag.
    """
    name = _final_segment(path)
    lower = name.lower()

    if is_secret_name(name):
        return Classification.SECRET_LIKE
    if ignored:
        return Classification.IGNORED
    if is_dir:
        return Classification.RELEVANT

    if lower not in rules.relevant_names:
        if lower in rules.junk_names or lower in rules.lock_names or lower.endswith(".lock"):
            return Classification.IRRELEVANT

    if lower in rules.relevant_names:
        return Classification.RELEVANT

    ext = _extension(lower)
    if ext in rules.relevant_extensions:
        return Classification.RELEVANT
    if ext in rules.asset_extensions:
        return Classification.ASSET
    if ext in rules.binary_extensions:
        return Classification.BINARY

    return Classification.IRRELEVANT


def is_secret_name(name: str) -> bool:
    """
    Heuristic for credential-like names (names only; never contents).

    Matches .env, .env.<suffix>, and names containing the word
    'secret' or 'secrets' delimited by non-letters.
    """
    lower = _final_segment(name).lower()
    if lower == ".env" or lower.startswith(".env."):
        return True
    return _SECRET_RX.search(lower) is not None


def is_noise_dir(name: str, rules: ClassifierRules = DEFAULT_RULES) -> bool:
    """Check a directory name against the always-pruned noise list."""
    return name.lower() in rules.noise_dirs

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _final_segment(path: str) -> str:
    return path.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]


def _extension(lower_name: str) -> str:
    """
    Extension without the dot. Dotfiles such as '.gitignore' yield 'gitignore'.
    """
    if "." not in lower_name:
        return ""
    return lower_name.rsplit(".", 1)[-1]
