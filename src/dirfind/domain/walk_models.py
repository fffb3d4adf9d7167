from __future__ import annotations

"""
Traversal State Model.

Holds everything a single walk owns: the pending work stack, the result
mapping being assembled, and the diagnostics gathered along the way.
"""

from dataclasses import dataclass, field
from typing import List, Set

from dirfind.domain.listing_models import DirectoryListingError, WalkResult


@dataclass
class WalkState:
    """
    Mutable state of one traversal.

    Attributes:
        root: Absolute path the traversal started from.
        stack: Pending directories; the last element is popped next.
        result: Directory -> kept files, for accepted directories only.
        errors: Listing failures skipped during the walk.
        visited: Real paths already listed (only used with cycle detection).
        listed: Number of directories listed so far.
    """
    root: str
    stack: List[str] = field(default_factory=list)
    result: WalkResult = field(default_factory=dict)
    errors: List[DirectoryListingError] = field(default_factory=list)
    visited: Set[str] = field(default_factory=set)
    listed: int = 0

    @property
    def done(self) -> bool:
        return not self.stack
