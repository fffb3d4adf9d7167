from __future__ import annotations

"""
Path Predicates.

Normalizes caller-supplied filters into plain callables and provides
ready-made predicate builders (suffix lists, include/exclude regexes)
for the common "keep these files, skip those directories" selections.
"""

import os
import re
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

Predicate = Callable[[str], Any]

# -----------------------------------------------------------------------------
# CONFIGURATION DEFAULTS
# -----------------------------------------------------------------------------

def default_exclude_directory_patterns() -> List[str]:
    """
    Directory names that are almost never wanted in a build file selection.

    Returns:
        List[str]: Regexes matched against a directory's base name.
    """
    return [
        r"^(\.git|\.hg|\.svn)$",
        r"^(__pycache__|\.mypy_cache|\.pytest_cache|\.tox)$",
        r"^(node_modules|\.venv|venv)$",
    ]

# -----------------------------------------------------------------------------
# PREDICATE NORMALIZATION
# -----------------------------------------------------------------------------

def as_predicate(candidate: Any) -> Optional[Predicate]:
    """
    Turn a filter argument into a callable, or None when absent.

    Accepts a plain function of one path, or any object exposing an
    `accepts(path)` method.

    Args:
        candidate: None, a callable, or an object with `accepts`.

    Returns:
        Optional[Predicate]: The callable to invoke per path.

    Raises:
        TypeError: The candidate is neither callable nor has `accepts`.
    """
    if candidate is None:
        return None
    accepts = getattr(candidate, "accepts", None)
    if callable(accepts):
        return accepts
    if callable(candidate):
        return candidate
    raise TypeError(
        f"Filter must be callable or expose accepts(path), got {type(candidate).__name__}."
    )

# -----------------------------------------------------------------------------
# PATTERN COMPILATION AND MATCHING
# -----------------------------------------------------------------------------

def compile_patterns(patterns: Iterable[str]) -> List[re.Pattern]:
    """
    Compile regex strings, discarding malformed ones.

    Args:
        patterns: Raw regex strings.

    Returns:
        List[re.Pattern]: Compiled regex objects.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error:
            continue
    return compiled


def matches_any(text: str, compiled_patterns: List[re.Pattern]) -> bool:
    """Return True if at least one pattern is found in `text`."""
    return any(rx.search(text) for rx in compiled_patterns)

# -----------------------------------------------------------------------------
# PREDICATE BUILDERS
# -----------------------------------------------------------------------------

def suffix_filter(suffixes: Iterable[str]) -> Predicate:
    """
    Build a file predicate keeping paths that end with one of `suffixes`.

    Example: suffix_filter([".c", ".h"]) keeps C sources and headers.
    """
    wanted = tuple(suffixes)

    def accepts(path: str) -> bool:
        return path.endswith(wanted)

    return accepts


def pattern_filter(
        include: Optional[Iterable[str]] = None,
        exclude: Optional[Iterable[str]] = None,
) -> Predicate:
    """
    Build a predicate over a path's base name from include/exclude regexes.

    A path is kept when its name matches any include pattern (or no usable
    include pattern was given) and matches none of the exclude patterns.
    Malformed regexes are ignored, so an include list made only of them
    behaves like no include list.

    Args:
        include: Optional inclusion regexes.
        exclude: Optional exclusion regexes.

    Returns:
        Predicate: Callable of one absolute path.
    """
    include_rx = compile_patterns(include or []) or None
    exclude_rx = compile_patterns(exclude or [])

    def accepts(path: str) -> bool:
        name = os.path.basename(path)
        if include_rx and not matches_any(name, include_rx):
            return False
        return not matches_any(name, exclude_rx)

    return accepts


def exclude_directories(patterns: Iterable[str]) -> Predicate:
    """
    Build a directory predicate rejecting directories whose name matches.

    Example: exclude_directories([r"^examples$"]) skips every `examples`
    directory's files while the walk still descends below it.
    """
    return pattern_filter(exclude=patterns)


def build_filters(config: Dict[str, Any]) -> Tuple[Optional[Predicate], Optional[Predicate]]:
    """
    Wire the file and directory predicates described by a validated config.

    Selections that are empty produce no predicate at all.

    Args:
        config: Output of validate_config.

    Returns:
        Tuple[Optional[Predicate], Optional[Predicate]]: (file_filter, directory_filter).
    """
    file_filter = all_of(
        suffix_filter(config["extensions"]) if config["extensions"] else None,
        pattern_filter(
            include=config["include_patterns"] or None,
            exclude=config["exclude_patterns"],
        ) if config["include_patterns"] or config["exclude_patterns"] else None,
    )

    dir_patterns = list(config["exclude_dir_patterns"])
    if config["use_default_excludes"]:
        dir_patterns.extend(default_exclude_directory_patterns())
    directory_filter = exclude_directories(dir_patterns) if dir_patterns else None

    return file_filter, directory_filter


def all_of(*predicates: Optional[Predicate]) -> Optional[Predicate]:
    """
    Combine predicates with AND, ignoring absent ones.

    Returns None when no predicate is given, so that the walker can skip
    the filtering pass altogether.
    """
    active = [p for p in predicates if p is not None]
    if not active:
        return None
    if len(active) == 1:
        return active[0]

    def accepts(path: str) -> bool:
        return all(p(path) for p in active)

    return accepts
