from __future__ import annotations

"""
Integration tests for the File Discovery strategies.

Covers the filesystem walk (noise pruning, .gitignore evaluation, access
errors), the git listing (tracked, untracked, ignored and secret paths)
and the silent fallback between them.
"""

import os
import shutil
import subprocess
from pathlib import Path

import pytest

from tree4ai.core.services.scanner import FilesystemWalk, GitListing, enumerate_candidates
from tree4ai.domain.config import RenderConfig
from tree4ai.domain.constants import MODE_FS, MODE_GIT
from tree4ai.infra import git as git_infra

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git executable not available")


def _by_path(candidates):
    return {c.path: c for c in candidates}


# -----------------------------------------------------------------------------
# Filesystem Walk
# -----------------------------------------------------------------------------

def test_walk_prunes_noise_directories(sample_project: Path, make_files):
    make_files(sample_project, ["node_modules/lib/index.js", ".git/HEAD", "src/__pycache__/main.pyc"])
    found = _by_path(FilesystemWalk(str(sample_project)).candidates())

    assert set(found) == {".env", "README.md", "image.png", "src/main.py"}
    assert not any(c.ignored for c in found.values())


def test_walk_applies_gitignore(git_project: Path):
    found = _by_path(FilesystemWalk(str(git_project)).candidates())

    assert found["src/app.py"].ignored is False
    assert found["notes.txt"].ignored is False
    assert found["debug.log"].ignored is True
    assert found[".env"].ignored is True
    assert found["generated/out.txt"].ignored is True
    assert not any(p.startswith("node_modules/") for p in found)
    assert not any(p.startswith(".git/") for p in found)


def test_walk_nested_gitignore(tmp_path: Path, make_files):
    root = make_files(tmp_path / "p", ["docs/a.md", "docs/draft.md", "draft.md"])
    (root / "docs" / ".gitignore").write_text("draft.md\n", encoding="utf-8")

    found = _by_path(FilesystemWalk(str(root)).candidates())
    assert found["docs/draft.md"].ignored is True
    assert found["draft.md"].ignored is False
    assert found["docs/a.md"].ignored is False


@pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0, reason="needs an unprivileged user")
def test_walk_records_unreadable_directory(tmp_path: Path, make_files):
    root = make_files(tmp_path / "p", ["ok.py", "locked/hidden.py"])
    locked = root / "locked"
    locked.chmod(0)
    try:
        walker = FilesystemWalk(str(root))
        found = _by_path(walker.candidates())
    finally:
        locked.chmod(0o755)

    assert "ok.py" in found
    assert "locked/hidden.py" not in found
    assert [e.rel_path for e in walker.access_errors] == ["locked"]


# -----------------------------------------------------------------------------
# Git Listing
# -----------------------------------------------------------------------------

@requires_git
def test_git_listing_default_surfaces_secret_names_only(git_project: Path):
    found = _by_path(GitListing(str(git_project)).candidates())

    assert set(found) == {".gitignore", "src/app.py", "notes.txt", ".env"}
    assert found[".env"].ignored is True
    assert found["src/app.py"].ignored is False


@requires_git
def test_git_listing_with_ignored(git_project: Path):
    found = _by_path(GitListing(str(git_project), include_ignored=True).candidates())

    assert found["debug.log"].ignored is True
    assert found["generated/out.txt"].ignored is True
    # Ignored dependency caches stay out even with include_ignored
    assert not any(p.startswith("node_modules/") for p in found)


@requires_git
def test_git_listing_without_secret_names(git_project: Path):
    found = _by_path(GitListing(str(git_project), include_secret_names=False).candidates())
    assert ".env" not in found
    assert "debug.log" not in found


@requires_git
def test_git_listing_skips_deleted_tracked_files(git_project: Path):
    gone = git_project / "src" / "gone.py"
    gone.write_text("x", encoding="utf-8")
    subprocess.run(["git", "add", "src/gone.py"], cwd=str(git_project), check=True, capture_output=True)
    gone.unlink()

    found = _by_path(GitListing(str(git_project)).candidates())
    assert "src/gone.py" not in found


def test_git_listing_outside_repository_fails(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(git_infra, "GIT_EXECUTABLE", "git-does-not-exist-tree4ai")
    with pytest.raises(git_infra.VersionControlUnavailable):
        GitListing(str(tmp_path)).candidates()


# -----------------------------------------------------------------------------
# Strategy Selection
# -----------------------------------------------------------------------------

@requires_git
def test_enumerate_prefers_git(git_project: Path):
    candidates, mode, errors = enumerate_candidates(str(git_project), RenderConfig())
    assert mode == MODE_GIT
    assert errors == []
    assert "src/app.py" in _by_path(candidates)


def test_enumerate_falls_back_when_git_missing(sample_project: Path, monkeypatch, caplog):
    monkeypatch.setattr(git_infra, "GIT_EXECUTABLE", "git-does-not-exist-tree4ai")
    with caplog.at_level("INFO"):
        candidates, mode, _ = enumerate_candidates(str(sample_project), RenderConfig())

    assert mode == MODE_FS
    assert "src/main.py" in _by_path(candidates)
    assert "falling back" in caplog.text


@requires_git
def test_enumerate_falls_back_outside_repository(sample_project: Path, monkeypatch):
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(sample_project.parent))
    _, mode, _ = enumerate_candidates(str(sample_project), RenderConfig())
    assert mode == MODE_FS


def test_no_git_flag_forces_walk(git_project: Path):
    candidates, mode, _ = enumerate_candidates(str(git_project), RenderConfig(use_git=False))
    assert mode == MODE_FS
    assert _by_path(candidates)["debug.log"].ignored is True


# -----------------------------------------------------------------------------
# Non-UTF-8 File Names
# -----------------------------------------------------------------------------

def test_walk_reports_undecodable_name_printably(sample_project: Path, make_undecodable):
    make_undecodable(sample_project / "src")
    found = _by_path(FilesystemWalk(str(sample_project)).candidates())

    assert "src/bad\ufffd.py" in found
    for path in found:
        path.encode("utf-8")


@requires_git
def test_git_listing_keeps_tracked_undecodable_name(git_project: Path, make_undecodable):
    raw = make_undecodable(git_project / "src")
    subprocess.run(["git", "add", "--", f"src/{raw}"], cwd=str(git_project), check=True, capture_output=True)

    candidates, mode, _ = enumerate_candidates(str(git_project), RenderConfig())
    found = _by_path(candidates)

    assert mode == MODE_GIT
    assert "src/bad\ufffd.py" in found
    assert found["src/bad\ufffd.py"].ignored is False


def test_enumerate_logs_strategy_used(sample_project: Path, caplog):
    with caplog.at_level("DEBUG", logger="tree4ai.core.services.scanner"):
        enumerate_candidates(str(sample_project), RenderConfig(use_git=False))
    assert "FilesystemWalk produced 4 candidate(s)" in caplog.text
