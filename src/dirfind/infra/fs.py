from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the path resolution primitives consumed by the traversal core.
Acts as a thin abstraction over 'os.path' so that listing and walking
share one definition of what an absolute path is.
"""

import os
from typing import Optional, Union

PathInput = Union[str, "os.PathLike[str]"]

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def absolute_path(path: PathInput) -> str:
    """
    Resolve a path (relative or absolute) against the current directory.

    Symlinks are not resolved; the result only becomes independent of the
    working directory.

    Args:
        path: Raw path string or path-like object.

    Returns:
        str: Absolute, normalized path.
    """
    return os.path.abspath(os.fspath(path))


def real_path(path: PathInput) -> str:
    """
    Resolve a path to its canonical form, following every symlink.

    Used to recognise a directory reached twice through different links.

    Args:
        path: Raw path string or path-like object.

    Returns:
        str: Canonical absolute path.
    """
    return os.path.realpath(os.fspath(path))


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a user-supplied directory string into an absolute path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return absolute_path(p)
