from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared directory-tree fixtures used by the walker and CLI tests.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def c_tree(tmp_path: Path) -> Path:
    """
    Small tree mixing C sources and other files.

    Structure:
    /root
      a.c
      b.txt
      /sub
        c.c
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.c").write_text("int a;", encoding="utf-8")
    (root / "b.txt").write_text("notes", encoding="utf-8")
    (root / "sub").mkdir()
    (root / "sub" / "c.c").write_text("int c;", encoding="utf-8")
    return root


@pytest.fixture
def project_tree(tmp_path: Path) -> Path:
    """
    Deeper tree with an 'examples' directory nested under the sources.

    Structure:
    /project
      Makefile
      /src
        main.c
        util.h
        /examples
          demo.c
          /nested
            deep.c
      /docs
        guide.md
      /empty
    """
    root = tmp_path / "project"
    (root / "src" / "examples" / "nested").mkdir(parents=True)
    (root / "docs").mkdir()
    (root / "empty").mkdir()

    (root / "Makefile").write_text("all:", encoding="utf-8")
    (root / "src" / "main.c").write_text("int main(void) { return 0; }", encoding="utf-8")
    (root / "src" / "util.h").write_text("#pragma once", encoding="utf-8")
    (root / "src" / "examples" / "demo.c").write_text("int demo;", encoding="utf-8")
    (root / "src" / "examples" / "nested" / "deep.c").write_text("int deep;", encoding="utf-8")
    (root / "docs" / "guide.md").write_text("# Guide", encoding="utf-8")
    return root
