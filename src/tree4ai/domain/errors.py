from __future__ import annotations

"""
Error and Notice Domain Models.

Defines the exception hierarchy for fatal and recoverable failures, plus the
record types used to report non-fatal diagnostics (unreadable directories,
truncated output) back to the interface layer.
"""

from dataclasses import dataclass

# -----------------------------------------------------------------------------
# EXCEPTIONS
# -----------------------------------------------------------------------------

class Tree4AIError(Exception):
    """Base class for all application errors."""


class InvalidRoot(Tree4AIError):
    """The requested project root does not exist, is not a directory, or is unreadable."""


class VersionControlUnavailable(Tree4AIError):
    """Git is missing, the root is not a repository, or a git query failed."""

# -----------------------------------------------------------------------------
# DIAGNOSTIC RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FilesystemAccessError:
    """
    A directory that could not be read during the filesystem walk.

    Attributes:
        rel_path: Directory path relative to the project root.
        error: Descriptive OS error message.
    """
    rel_path: str
    error: str


@dataclass(frozen=True)
class TruncationNotice:
    """
    Informational record stating that a limit caused files to be omitted.

    Attributes:
        kind: Either "max_files" or "max_depth".
        limit: The configured limit value.
        omitted: Number of files left out because of the limit.
    """
    kind: str
    limit: int
    omitted: int

    def describe(self) -> str:
        """Human readable one-line summary."""
        if self.kind == "max_files":
            return f"Output truncated: {self.omitted} file(s) omitted by --max-files {self.limit}."
        return f"Output truncated: {self.omitted} file(s) deeper than --max-depth {self.limit} omitted."
