from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: initialization of logging, merging of
defaults with CLI overrides, pipeline execution, and output rendering.
The tree goes to stdout; every diagnostic goes to stderr through logging.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from tree4ai.core.analysis.tree_renderer import build_json_payload, render_document
from tree4ai.core.pipeline.engine import run_pipeline
from tree4ai.core.pipeline.validator import validate_config
from tree4ai.domain.config import get_default_config
from tree4ai.domain.errors import InvalidRoot
from tree4ai.domain.pipeline_models import PipelineResult
from tree4ai.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from tree4ai.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID_ROOT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    try:
        return _run(args)
    finally:
        shutdown_logging()


def _run(args: Any) -> int:
    # 3. Merge and validate configuration
    raw_conf = merge_config(get_default_config(), cli_args.args_to_overrides(args))
    config, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(asdict(config), ensure_ascii=False, indent=2))
        return EXIT_OK

    # 4. Pipeline execution phase
    try:
        result = run_pipeline(config)
    except InvalidRoot as e:
        logger.error(str(e))
        return EXIT_INVALID_ROOT
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.critical(f"Tree generation failed: {e}", exc_info=True)
        return EXIT_ERROR

    _report_diagnostics(result)

    # 5. Output rendering phase
    if config.json_output:
        sys.stdout.write(json.dumps(build_json_payload(result), ensure_ascii=False, indent=2) + "\n")
    else:
        sys.stdout.write(render_document(result, header=config.header))
    sys.stdout.flush()

    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only keys known to the base are merged, and None overrides are skipped.

    Args:
        base: The default configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in base and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# DIAGNOSTICS (stderr only)
# -----------------------------------------------------------------------------

def _report_diagnostics(result: PipelineResult) -> None:
    logger.debug(f"Rendered {result.files_count} file(s) from {result.root} ({result.mode})")
    for notice in result.notices:
        logger.warning(notice.describe())
    if result.access_errors:
        logger.warning(f"{len(result.access_errors)} director(ies) could not be read and were skipped.")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
