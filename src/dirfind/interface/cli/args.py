from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict, List, Optional

from dirfind.domain.constants import ON_ERROR_CHOICES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirfind CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="dirfind",
        description="List the files of every directory under ROOT, with optional filters.",
    )

    p.add_argument(
        "root_path",
        nargs="?",
        default=None,
        metavar="ROOT",
        help="Directory to walk (default: current directory).",
    )

    # --- File selection ---
    p.add_argument(
        "--ext",
        dest="extensions",
        default=None,
        help="Comma-separated file suffixes to keep, e.g. '.c,.h'.",
    )
    p.add_argument(
        "--include",
        dest="include_patterns",
        default=None,
        help="Comma-separated regexes; keep files whose name matches one.",
    )
    p.add_argument(
        "--exclude",
        dest="exclude_patterns",
        default=None,
        help="Comma-separated regexes; drop files whose name matches one.",
    )

    # --- Directory selection ---
    p.add_argument(
        "--exclude-dir",
        dest="exclude_dir_patterns",
        default=None,
        help="Comma-separated regexes; do not record directories whose name matches "
             "(their subdirectories are still visited).",
    )
    p.add_argument(
        "--default-excludes",
        action="store_true",
        help="Also skip VCS and cache directories (.git, __pycache__, node_modules, ...).",
    )

    # --- Traversal behaviour ---
    p.add_argument(
        "--on-error",
        dest="on_error",
        choices=ON_ERROR_CHOICES,
        default=None,
        help="What to do with unreadable directories (default: skip).",
    )
    p.add_argument(
        "--detect-cycles",
        action="store_true",
        help="Visit each real directory once, even through symlink loops.",
    )

    # --- Configuration and diagnostics ---
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="JSON file with configuration values.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result mapping as JSON.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Values left unset on the command line map to None so that the merge
    step keeps whatever the config file or defaults provide.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["root_path"] = args.root_path
    overrides["extensions"] = _split_csv(args.extensions)
    overrides["include_patterns"] = _split_csv(args.include_patterns)
    overrides["exclude_patterns"] = _split_csv(args.exclude_patterns)
    overrides["exclude_dir_patterns"] = _split_csv(args.exclude_dir_patterns)
    overrides["on_error"] = args.on_error

    if args.default_excludes:
        overrides["use_default_excludes"] = True
    if args.detect_cycles:
        overrides["detect_cycles"] = True

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of stripped strings."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
