from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema, including help messages,
argument types, and defaults. Provides logic to translate raw argparse
namespaces into configuration overrides.
"""

import argparse
from typing import Any, Dict

from tree4ai import __version__

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the Tree4AI CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="tree4ai",
        description="LLM-friendly project tree: paths and names only, never file contents.",
    )

    # --- Root Discovery ---
    p.add_argument(
        "--root",
        default=None,
        help="Project root (defaults to the git root if available, otherwise the current directory).",
    )
    p.add_argument(
        "--no-git",
        action="store_true",
        help="Force filesystem mode (ignore git).",
    )

    # --- Content Selection ---
    p.add_argument(
        "--include-ignored",
        action="store_true",
        help="Also include .gitignore'd files (names only).",
    )
    p.add_argument(
        "--hide-secrets",
        action="store_true",
        help="Hide files that look like secrets (.env, secrets.*).",
    )
    p.add_argument(
        "--include-assets",
        action="store_true",
        help="Include common assets (images, fonts, media).",
    )
    p.add_argument(
        "--include-binaries",
        action="store_true",
        help="Include binaries such as archives and compiled objects (not recommended).",
    )

    # --- Limits ---
    p.add_argument(
        "--max-depth",
        type=_non_negative_int,
        default=None,
        help="Maximum depth (number of path segments after the root). Default: unbounded.",
    )
    p.add_argument(
        "--max-files",
        type=_non_negative_int,
        default=None,
        help="Limit the number of files after filtering. Default: unbounded.",
    )

    # --- Output ---
    p.add_argument(
        "--no-header",
        action="store_true",
        help="Do not print the LLM helper header.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print JSON instead of a text tree.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration as JSON and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Only flags that were actually set produce an override, so defaults stay
    owned by the domain configuration.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["root"] = args.root

    if args.no_git:
        overrides["use_git"] = False

    if args.include_ignored:
        overrides["include_ignored"] = True
    if args.hide_secrets:
        overrides["hide_secrets"] = True
    if args.include_assets:
        overrides["include_assets"] = True
    if args.include_binaries:
        overrides["include_binaries"] = True

    overrides["max_depth"] = args.max_depth
    overrides["max_files"] = args.max_files

    if args.no_header:
        overrides["header"] = False
    if args.json_output:
        overrides["json_output"] = True

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number
