from __future__ import annotations

"""
Unit tests for the Directory Listing Service.

Verifies:
1. Partitioning of entries into files and subdirectories with absolute paths.
2. Failure signalling distinct from an empty listing.
3. Handling of special entries and handle release.
"""

import os
import socket
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from dirfind.core.services.lister import list_directory
from dirfind.domain.listing_models import DirectoryListing, DirectoryListingError


def test_list_directory_partitions_entries(c_tree: Path) -> None:
    """Files and subdirectories land in separate lists as absolute paths."""
    listing = list_directory(str(c_tree))

    assert sorted(listing.files) == sorted([str(c_tree / "a.c"), str(c_tree / "b.txt")])
    assert listing.directories == [str(c_tree / "sub")]
    assert all(os.path.isabs(p) for p in listing.files + listing.directories)


def test_list_directory_accepts_relative_path(c_tree: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A relative path is resolved against the working directory first."""
    monkeypatch.chdir(c_tree.parent)

    listing = list_directory("root")

    assert listing.directories == [str(c_tree / "sub")]
    assert str(c_tree / "a.c") in listing.files


def test_list_directory_accepts_pathlike(c_tree: Path) -> None:
    listing = list_directory(c_tree / "sub")
    assert listing.files == [str(c_tree / "sub" / "c.c")]
    assert listing.directories == []


def test_list_directory_empty_is_success(tmp_path: Path) -> None:
    """An empty directory is an empty listing, not a failure."""
    empty = tmp_path / "empty"
    empty.mkdir()

    listing = list_directory(str(empty))

    assert listing == DirectoryListing(files=[], directories=[])


def test_list_directory_missing_raises(tmp_path: Path) -> None:
    """A missing directory raises an error that names the path."""
    missing = tmp_path / "nope"

    with pytest.raises(DirectoryListingError) as exc_info:
        list_directory(str(missing))

    assert exc_info.value.path == str(missing)
    assert str(missing) in str(exc_info.value)
    assert isinstance(exc_info.value, OSError)


def test_list_directory_on_file_raises(c_tree: Path) -> None:
    """Listing a regular file is a failure, not an empty result."""
    with pytest.raises(DirectoryListingError) as exc_info:
        list_directory(str(c_tree / "a.c"))

    assert exc_info.value.path == str(c_tree / "a.c")


def test_list_directory_permission_denied_raises(tmp_path: Path) -> None:
    """OS permission errors are converted into DirectoryListingError."""
    with patch("dirfind.core.services.lister.os.scandir",
               side_effect=PermissionError(13, "Permission denied")):
        with pytest.raises(DirectoryListingError) as exc_info:
            list_directory(str(tmp_path))

    assert exc_info.value.reason == "Permission denied"
    assert exc_info.value.errno == 13


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX symlinks required")
def test_list_directory_follows_symlinks_and_drops_dangling(tmp_path: Path) -> None:
    """Links are classified by their target; dangling links are dropped."""
    root = tmp_path / "links"
    root.mkdir()
    (root / "real.txt").write_text("x", encoding="utf-8")
    (root / "realdir").mkdir()
    (root / "file_link").symlink_to(root / "real.txt")
    (root / "dir_link").symlink_to(root / "realdir")
    (root / "dangling").symlink_to(root / "missing_target")

    listing = list_directory(str(root))

    assert sorted(listing.files) == sorted([str(root / "real.txt"), str(root / "file_link")])
    assert sorted(listing.directories) == sorted([str(root / "realdir"), str(root / "dir_link")])
    assert str(root / "dangling") not in listing.files + listing.directories


@pytest.mark.skipif(not hasattr(socket, "AF_UNIX"), reason="UNIX sockets required")
def test_list_directory_drops_sockets(tmp_path: Path) -> None:
    """Entries that are neither files nor directories are dropped."""
    sock_dir = tmp_path / "s"
    sock_dir.mkdir()
    sock_path = sock_dir / "sock"
    server = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        server.bind(str(sock_path))
        listing = list_directory(str(sock_dir))
    finally:
        server.close()

    assert listing.files == []
    assert listing.directories == []


def test_list_directory_closes_handle_on_error(tmp_path: Path) -> None:
    """The scandir handle is released even when enumeration fails midway."""
    iterator = MagicMock()
    iterator.__enter__.return_value = iterator
    iterator.__exit__.return_value = False
    iterator.__iter__.side_effect = OSError(5, "Input/output error")

    with patch("dirfind.core.services.lister.os.scandir", return_value=iterator):
        with pytest.raises(DirectoryListingError):
            list_directory(str(tmp_path))

    iterator.__exit__.assert_called_once()


def test_list_directory_skips_pseudo_entries(tmp_path: Path) -> None:
    """'.' and '..' are never reported, even if the OS yields them."""
    def fake_entry(name: str, is_dir: bool) -> MagicMock:
        entry = MagicMock()
        entry.name = name
        entry.is_file.return_value = not is_dir
        entry.is_dir.return_value = is_dir
        return entry

    iterator = MagicMock()
    iterator.__enter__.return_value = iterator
    iterator.__exit__.return_value = False
    iterator.__iter__.return_value = iter([
        fake_entry(".", True),
        fake_entry("..", True),
        fake_entry("kept", True),
    ])

    with patch("dirfind.core.services.lister.os.scandir", return_value=iterator):
        listing = list_directory(str(tmp_path))

    assert listing.directories == [os.path.join(str(tmp_path), "kept")]
    assert listing.files == []
