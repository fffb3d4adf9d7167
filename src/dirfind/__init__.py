from __future__ import annotations

from dirfind.core.services.lister import list_directory
from dirfind.core.services.walker import TreeWalker, walk
from dirfind.domain.listing_models import DirectoryListing, DirectoryListingError, WalkResult
from dirfind.domain.walk_models import WalkState

__version__ = "1.0.0"

__all__ = [
    "DirectoryListing",
    "DirectoryListingError",
    "TreeWalker",
    "WalkResult",
    "WalkState",
    "list_directory",
    "walk",
]
