from __future__ import annotations

"""
Directory Listing Service.

Lists the immediate children of one directory, split into regular files
and subdirectories. This is the only place that touches directory handles.
"""

import logging
import os

from dirfind.domain.listing_models import DirectoryListing, DirectoryListingError
from dirfind.infra.fs import PathInput, absolute_path

logger = logging.getLogger(__name__)

_PSEUDO_ENTRIES = (".", "..")


def list_directory(path: PathInput) -> DirectoryListing:
    """
    List one directory without recursing.

    Each entry is classified with a stat that follows symlinks: regular
    files and directories are kept, everything else (sockets, FIFOs,
    devices, dangling links) is dropped from both lists. Entries come back
    in the order the OS enumerates them.

    Args:
        path: Directory to list, relative or absolute.

    Returns:
        DirectoryListing: Absolute file and subdirectory paths.

    Raises:
        DirectoryListingError: The directory does not exist, is not a
            directory, or cannot be read.
    """
    dir_path = absolute_path(path)
    files = []
    directories = []

    try:
        with os.scandir(dir_path) as it:
            for entry in it:
                if entry.name in _PSEUDO_ENTRIES:
                    continue
                entry_path = os.path.join(dir_path, entry.name)
                try:
                    if entry.is_file():
                        files.append(entry_path)
                    elif entry.is_dir():
                        directories.append(entry_path)
                except OSError as e:
                    # Entry vanished or became unreadable after enumeration
                    logger.debug(f"Dropping unclassifiable entry '{entry_path}': {e}")
    except OSError as e:
        raise DirectoryListingError(dir_path, e.strerror or str(e), e.errno) from e

    logger.debug(f"Listed '{dir_path}': {len(files)} files, {len(directories)} directories")
    return DirectoryListing(files=files, directories=directories)
