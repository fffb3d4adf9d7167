from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of configuration
sources (defaults, JSON file, command-line overrides), validation, the walk
itself, and rendering of the result.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from dirfind.core.filters import build_filters
from dirfind.core.services.walker import TreeWalker
from dirfind.core.validator import validate_config
from dirfind.domain.config import load_config
from dirfind.domain.listing_models import DirectoryListingError, WalkResult
from dirfind.domain.walk_models import WalkState
from dirfind.infra.logging import LoggingConfig, configure_logging, get_logger
from dirfind.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "WARNING"
    # Each invocation owns its verbosity, also when main() runs in-process
    configure_logging(
        LoggingConfig(level=log_level, console=True, log_file=args.log_file),
        force=True,
    )

    logger.debug("CLI execution initiated. Resolving configuration...")

    base_conf = load_config(args.config_file)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    try:
        clean_conf, warnings = validate_config(raw_conf, strict=False)
    except (TypeError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_USAGE

    for w in warnings:
        logger.warning(f"Configuration: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    root_path = clean_conf["root_path"]
    if not os.path.isdir(root_path):
        logger.error(f"Root directory does not exist: {root_path}")
        return EXIT_USAGE

    file_filter, directory_filter = build_filters(clean_conf)
    walker = TreeWalker(
        file_filter,
        directory_filter,
        on_error=clean_conf["on_error"],
        detect_cycles=clean_conf["detect_cycles"],
    )

    try:
        result = walker.walk(root_path)
    except DirectoryListingError as e:
        logger.error(f"Walk aborted: {e}")
        return EXIT_FAILURE
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED

    if args.json_output:
        print(json.dumps(result, ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result, walker.last_state)

    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge the overrides that were actually given on the command line."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: WalkResult, state: Optional[WalkState]) -> None:
    """Print each recorded directory with its files indented below it."""
    total_files = 0
    for directory, files in result.items():
        print(f"{directory}{os.sep}")
        for file_path in files:
            print(f"    {os.path.basename(file_path)}")
        total_files += len(files)

    skipped = len(state.errors) if state else 0
    print(f"\n{len(result)} directories, {total_files} files", end="")
    print(f", {skipped} unreadable" if skipped else "")


if __name__ == "__main__":
    sys.exit(main())
