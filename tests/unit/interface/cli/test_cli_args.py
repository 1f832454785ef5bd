from __future__ import annotations

"""
Unit tests for CLI argument parsing and mapping.

Verifies flag definitions, limit validation and the translation of the
argparse namespace into configuration overrides.
"""

import pytest

from tree4ai.core.pipeline.validator import validate_config
from tree4ai.domain.config import get_default_config
from tree4ai.interface.cli.app import merge_config
from tree4ai.interface.cli.args import args_to_overrides, build_parser


def _overrides(argv):
    return args_to_overrides(build_parser().parse_args(argv))


def test_no_flags_keeps_defaults():
    merged = merge_config(get_default_config(), _overrides([]))
    assert merged == get_default_config()


def test_boolean_flags_map_to_config_keys():
    ov = _overrides([
        "--no-git", "--include-ignored", "--hide-secrets",
        "--include-assets", "--include-binaries", "--no-header", "--json",
    ])
    assert ov["use_git"] is False
    assert ov["include_ignored"] is True
    assert ov["hide_secrets"] is True
    assert ov["include_assets"] is True
    assert ov["include_binaries"] is True
    assert ov["header"] is False
    assert ov["json_output"] is True


def test_limits_and_root():
    ov = _overrides(["--root", "/tmp/x", "--max-depth", "3", "--max-files", "0"])
    assert ov["root"] == "/tmp/x"
    assert ov["max_depth"] == 3
    assert ov["max_files"] == 0


@pytest.mark.parametrize("argv", [
    ["--max-depth", "-1"],
    ["--max-files", "ten"],
])
def test_invalid_limits_are_rejected(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(argv)
    assert exc.value.code == 2
    assert "--max-" in capsys.readouterr().err


def test_diagnostic_flags_do_not_leak_into_config():
    ov = _overrides(["--debug", "--dump-config", "--log-file", "x.log"])
    for key in ("debug", "dump_config", "log_file"):
        assert key not in ov


def test_merge_skips_none_and_unknown_keys():
    merged = merge_config({"a": 1, "b": 2}, {"a": None, "b": 3, "c": 4})
    assert merged == {"a": 1, "b": 3}


def test_overrides_validate_into_render_config():
    raw = merge_config(get_default_config(), _overrides(["--hide-secrets", "--max-files", "5"]))
    cfg, warnings = validate_config(raw)
    assert warnings == []
    assert cfg.hide_secrets is True
    assert cfg.max_files == 5
    assert cfg.use_git is True


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["--version"])
    assert exc.value.code == 0
    assert "tree4ai" in capsys.readouterr().out
