from __future__ import annotations

"""
Directory Listing Domain Models.

Defines the value returned by a single directory listing, the error raised
when a directory cannot be opened, and the shape of a traversal result.
"""

from dataclasses import dataclass, field
from typing import Dict, List

# Absolute directory path -> absolute file paths, in traversal order.
WalkResult = Dict[str, List[str]]


@dataclass(frozen=True)
class DirectoryListing:
    """
    Immediate children of one directory, partitioned by kind.

    Attributes:
        files: Absolute paths of regular files, in OS enumeration order.
        directories: Absolute paths of subdirectories, in OS enumeration order.
    """
    files: List[str] = field(default_factory=list)
    directories: List[str] = field(default_factory=list)


class DirectoryListingError(OSError):
    """
    A directory could not be opened or enumerated.

    Raised instead of returning an empty listing, so that callers can tell
    "empty" apart from "unreadable".

    Attributes:
        path: Absolute path of the directory that failed.
        reason: Message of the underlying OS error.
    """

    def __init__(self, path: str, reason: str, errno_code: int | None = None) -> None:
        super().__init__(errno_code, reason, path)
        self.path = path
        self.reason = reason

    def __str__(self) -> str:
        return f"Cannot list directory '{self.path}': {self.reason}"

    def __reduce__(self):
        return (type(self), (self.path, self.reason, self.errno))
