from __future__ import annotations

"""
Configuration Domain Models.

Defines the immutable render configuration threaded through the pipeline
and the dictionary of default values that CLI overrides are merged into.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# Configuration Models
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RenderConfig:
    """
    Read-only set of resolved flags for a single invocation.

    Attributes:
        root: Explicit project root, or None to auto-detect.
        use_git: Prefer git for root detection and file listing.
        include_ignored: Show paths excluded by ignore rules.
        hide_secrets: Drop secret-like paths entirely.
        include_assets: Show media files.
        include_binaries: Show binary files.
        max_depth: Maximum number of path segments, or None for unbounded.
        max_files: Maximum number of files, or None for unbounded.
        header: Emit the LLM helper header in text mode.
        json_output: Emit the structured JSON payload instead of text.
    """
    root: Optional[str] = None
    use_git: bool = True
    include_ignored: bool = False
    hide_secrets: bool = False
    include_assets: bool = False
    include_binaries: bool = False
    max_depth: Optional[int] = None
    max_files: Optional[int] = None
    header: bool = True
    json_output: bool = False


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values keyed like RenderConfig.
    """
    return {
        # Root discovery
        "root": None,
        "use_git": True,

        # Inclusion flags
        "include_ignored": False,
        "hide_secrets": False,
        "include_assets": False,
        "include_binaries": False,

        # Limits
        "max_depth": None,
        "max_files": None,

        # Output
        "header": True,
        "json_output": False,
    }
