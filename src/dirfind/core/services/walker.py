from __future__ import annotations

"""
Directory Tree Walker.

Enumerates a whole directory tree with an explicit work stack instead of
call recursion, so depth is bounded by memory rather than by the
interpreter's recursion limit. The directory filter only decides what is
recorded; every reachable directory is still descended into.
"""

import logging
from typing import Any, Callable, Optional

from dirfind.core.filters import as_predicate
from dirfind.core.services.lister import list_directory
from dirfind.domain.constants import DEFAULT_ON_ERROR, ON_ERROR_CHOICES, ON_ERROR_RAISE
from dirfind.domain.listing_models import (
    DirectoryListing,
    DirectoryListingError,
    WalkResult,
)
from dirfind.domain.walk_models import WalkState
from dirfind.infra.fs import PathInput, absolute_path, real_path

logger = logging.getLogger(__name__)

Lister = Callable[[str], DirectoryListing]


class TreeWalker:
    """
    Reusable traversal configured with two optional predicates.

    The walker itself only holds configuration; every call to `walk` (or
    `start`) creates a fresh WalkState. The state can also be driven one
    directory at a time through `step`, which keeps the pending stack
    observable between iterations.

    Args:
        file_filter: Keeps a file when truthy for its absolute path.
            None means every file is kept, without any per-file call.
        directory_filter: Records a directory when truthy for its absolute
            path. None means every directory is recorded.
        on_error: "skip" logs and records unreadable directories and
            continues; "raise" aborts with the DirectoryListingError.
        detect_cycles: List each real (symlink-resolved) directory at most
            once.
        lister: Function listing one directory; defaults to list_directory.
    """

    def __init__(
            self,
            file_filter: Any = None,
            directory_filter: Any = None,
            *,
            on_error: str = DEFAULT_ON_ERROR,
            detect_cycles: bool = False,
            lister: Lister = list_directory,
    ) -> None:
        if on_error not in ON_ERROR_CHOICES:
            raise ValueError(
                f"Invalid on_error '{on_error}': expected one of {', '.join(ON_ERROR_CHOICES)}."
            )
        self.file_filter = as_predicate(file_filter)
        self.directory_filter = as_predicate(directory_filter)
        self.on_error = on_error
        self.detect_cycles = detect_cycles
        self.lister = lister
        self.last_state: Optional[WalkState] = None

    def start(self, root: PathInput) -> WalkState:
        """Create the state for a traversal rooted at `root`."""
        root_path = absolute_path(root)
        state = WalkState(root=root_path, stack=[root_path])
        self.last_state = state
        return state

    def step(self, state: WalkState) -> Optional[str]:
        """
        Process the next pending directory.

        Returns:
            Optional[str]: The directory popped, or None if nothing was pending.

        Raises:
            DirectoryListingError: Listing failed and on_error is "raise".
        """
        if not state.stack:
            return None

        current_dir = state.stack.pop()

        if self.detect_cycles:
            key = real_path(current_dir)
            if key in state.visited:
                logger.debug(f"Skipping already visited directory '{current_dir}' ({key})")
                return current_dir
            state.visited.add(key)

        try:
            entries = self.lister(current_dir)
        except DirectoryListingError as e:
            if self.on_error == ON_ERROR_RAISE:
                raise
            logger.warning(f"Skipping unreadable directory '{e.path}': {e.reason}")
            state.errors.append(e)
            return current_dir

        state.listed += 1

        if self.directory_filter is None or self.directory_filter(current_dir):
            if self.file_filter is None:
                kept = list(entries.files)
            else:
                kept = [f for f in entries.files if self.file_filter(f)]
            state.result[current_dir] = kept

        # Descend regardless of whether current_dir was recorded
        state.stack.extend(entries.directories)
        return current_dir

    def walk(self, root: PathInput) -> WalkResult:
        """
        Traverse the tree rooted at `root`.

        Returns:
            WalkResult: Absolute directory path -> kept absolute file paths,
                for every directory accepted by the directory filter.
        """
        state = self.start(root)
        logger.debug(f"Walking '{state.root}'")

        while state.stack:
            self.step(state)

        logger.debug(
            f"Walk of '{state.root}' finished: {state.listed} directories listed, "
            f"{len(state.result)} recorded, {len(state.errors)} skipped"
        )
        return state.result


def walk(
        root: PathInput,
        file_filter: Any = None,
        directory_filter: Any = None,
        *,
        on_error: str = DEFAULT_ON_ERROR,
        detect_cycles: bool = False,
) -> WalkResult:
    """
    Map every accepted directory under `root` to its accepted files.

    Convenience wrapper around a one-shot TreeWalker.

    Args:
        root: Directory to start from, relative or absolute.
        file_filter: Optional file predicate (callable or `accepts` object).
        directory_filter: Optional directory predicate.
        on_error: Unreadable directory policy, "skip" or "raise".
        detect_cycles: Guard against symlink cycles.

    Returns:
        WalkResult: Absolute directory path -> absolute file paths.
    """
    walker = TreeWalker(
        file_filter,
        directory_filter,
        on_error=on_error,
        detect_cycles=detect_cycles,
    )
    return walker.walk(root)
