from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Logging reset between tests so handlers never leak across cases.
3. Shared fixtures for building project trees and git repositories.
"""

import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Callable, Iterable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from tree4ai.infra.logging import shutdown_logging  # noqa: E402

GIT_AVAILABLE = shutil.which("git") is not None

requires_git = pytest.mark.skipif(not GIT_AVAILABLE, reason="git executable not available")


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_logging() -> Iterable[None]:
    """Drop application handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()
    logging.getLogger().setLevel(logging.WARNING)


@pytest.fixture
def make_files() -> Callable[[Path, Iterable[str]], Path]:
    """
    Return a helper that creates empty files (and parents) below a root.

    Paths ending with '/' create empty directories.
    """
    def _make(root: Path, paths: Iterable[str]) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        for rel in paths:
            target = root / rel
            if rel.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text("x", encoding="utf-8")
        return root

    return _make


@pytest.fixture
def sample_project(tmp_path: Path, make_files) -> Path:
    """
    Create the reference project used across integration tests.

    Structure:
    /project
      /src
        main.py
      /build
        output.o
      image.png
      .env
      README.md
    """
    return make_files(tmp_path / "project", [
        "src/main.py",
        "build/output.o",
        "image.png",
        ".env",
        "README.md",
    ])


def run_git(cwd: Path, *args: str) -> None:
    subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        check=True,
        capture_output=True,
    )


@pytest.fixture
def git_project(tmp_path: Path, make_files) -> Path:
    """
    Initialize a git repository with tracked, untracked and ignored files.

    Structure:
    /repo
      .gitignore      (ignores *.log, .env, node_modules/, generated/)
      src/app.py      (tracked)
      notes.txt       (untracked)
      debug.log       (ignored)
      .env            (ignored, secret-like)
      generated/out.txt      (ignored directory)
      node_modules/pkg/index.js  (ignored, noise directory)
    """
    if not GIT_AVAILABLE:
        pytest.skip("git executable not available")

    repo = make_files(tmp_path / "repo", [
        "src/app.py",
        "notes.txt",
        "debug.log",
        ".env",
        "generated/out.txt",
        "node_modules/pkg/index.js",
    ])
    (repo / ".gitignore").write_text("*.log\n.env\nnode_modules/\ngenerated/\n", encoding="utf-8")

    run_git(repo, "init", "-q")
    run_git(repo, "add", ".gitignore", "src/app.py")
    return repo


UNDECODABLE_NAME = b"bad\xff.py"


@pytest.fixture
def make_undecodable() -> Callable[[Path], str]:
    """
    Return a helper that creates a file whose name is not valid UTF-8.

    The helper returns the name as the OS reports it (surrogate-escaped).
    Skips on platforms or filesystems that reject such names.
    """
    if os.name != "posix" or sys.platform == "darwin":
        pytest.skip("filesystem does not allow non-UTF-8 file names")

    def _make(directory: Path) -> str:
        target = os.path.join(os.fsencode(str(directory)), UNDECODABLE_NAME)
        try:
            with open(target, "wb") as f:
                f.write(b"x")
        except OSError as e:
            pytest.skip(f"filesystem rejected non-UTF-8 file name: {e}")
        return os.fsdecode(UNDECODABLE_NAME)

    return _make
