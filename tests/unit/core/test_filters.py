from __future__ import annotations

"""
Unit tests for the Path Predicates module.

Verifies:
1. Regex compilation and matching logic.
2. Normalization of callables and accepts-objects.
3. Predicate builders and their wiring from configuration.
"""

import re

import pytest

from dirfind.core.filters import (
    all_of,
    as_predicate,
    build_filters,
    compile_patterns,
    default_exclude_directory_patterns,
    exclude_directories,
    matches_any,
    pattern_filter,
    suffix_filter,
)
from dirfind.domain.config import get_default_config


def test_compile_patterns_handles_valid_and_invalid():
    """Valid patterns compile and invalid ones are skipped silently."""
    compiled = compile_patterns([r"^valid.*", r"[invalid_regex", r"normal"])

    assert len(compiled) == 2
    assert isinstance(compiled[0], re.Pattern)


def test_matches_any_logic():
    compiled = compile_patterns([r"^ignore_me", r".*\.tmp$"])

    assert matches_any("ignore_me_folder", compiled) is True
    assert matches_any("file.tmp", compiled) is True
    assert matches_any("keep_me.txt", compiled) is False


def test_as_predicate_none_and_callable():
    def fn(path):
        return True

    assert as_predicate(None) is None
    assert as_predicate(fn) is fn


def test_as_predicate_prefers_accepts_method():
    class OnlyC:
        def accepts(self, path):
            return path.endswith(".c")

    pred = as_predicate(OnlyC())

    assert pred("/x/a.c") is True
    assert pred("/x/a.h") is False


def test_as_predicate_rejects_other_values():
    with pytest.raises(TypeError):
        as_predicate("*.c")


def test_suffix_filter():
    keep = suffix_filter([".c", ".h"])

    assert keep("/src/main.c")
    assert keep("/src/util.h")
    assert not keep("/src/notes.txt")


def test_pattern_filter_matches_base_name_only():
    """Directory components of the path never influence the decision."""
    keep = pattern_filter(include=[r"^main"], exclude=[r"\.bak$"])

    assert keep("/main/other.c") is False
    assert keep("/src/main.c") is True
    assert keep("/src/main.c.bak") is False


def test_pattern_filter_without_include_keeps_everything_not_excluded():
    keep = pattern_filter(exclude=[r"^\."])

    assert keep("/src/file.c") is True
    assert keep("/src/.hidden") is False


def test_exclude_directories_rejects_by_name():
    accept = exclude_directories([r"^examples$"])

    assert accept("/proj/src/examples") is False
    assert accept("/proj/src/examples_old") is True
    assert accept("/proj/examples/nested") is True


def test_default_exclude_directory_patterns_cover_vcs():
    accept = exclude_directories(default_exclude_directory_patterns())

    assert accept("/proj/.git") is False
    assert accept("/proj/__pycache__") is False
    assert accept("/proj/src") is True


def test_all_of_combines_and_ignores_absent():
    assert all_of(None, None) is None

    only = suffix_filter([".c"])
    assert all_of(None, only) is only

    both = all_of(suffix_filter([".c"]), pattern_filter(exclude=[r"^test_"]))
    assert both("/src/main.c") is True
    assert both("/src/test_main.c") is False


def test_build_filters_empty_config_produces_no_predicates():
    file_filter, directory_filter = build_filters(get_default_config())

    assert file_filter is None
    assert directory_filter is None


def test_build_filters_wires_selection():
    config = get_default_config()
    config.update({
        "extensions": [".c"],
        "exclude_patterns": [r"^skip"],
        "exclude_dir_patterns": [r"^examples$"],
        "use_default_excludes": True,
    })

    file_filter, directory_filter = build_filters(config)

    assert file_filter("/src/main.c") is True
    assert file_filter("/src/skip.c") is False
    assert file_filter("/src/main.h") is False
    assert directory_filter("/src/examples") is False
    assert directory_filter("/src/.git") is False
    assert directory_filter("/src") is True


def test_pattern_filter_ignores_include_list_without_valid_regex():
    """An include list made only of malformed regexes does not reject everything."""
    keep = pattern_filter(include=["["], exclude=[r"\.bak$"])

    assert keep("/src/main.c") is True
    assert keep("/src/main.c.bak") is False
    assert pattern_filter(include=[])("/src/main.c") is True
