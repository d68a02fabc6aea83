"""Tests for output directory creation."""

from __future__ import annotations

import os
import stat
import sys
from pathlib import Path

import pytest

from textpdf.io.dirs import ensure_directory
from textpdf.utils.errors import DirectoryCreateError


def test_creates_nested_directory(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "PDF"
    assert ensure_directory(target) is True
    assert target.is_dir()


def test_existing_directory_untouched(tmp_path: Path) -> None:
    target = tmp_path / "PDF"
    target.mkdir()
    keep = target / "keep.txt"
    keep.write_text("x")
    assert ensure_directory(target) is False
    assert keep.read_text() == "x"


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX permissions")
def test_mode_is_owner_rwx(tmp_path: Path) -> None:
    target = tmp_path / "PDF"
    old = os.umask(0o022)
    try:
        ensure_directory(target)
    finally:
        os.umask(old)
    assert stat.S_IMODE(target.stat().st_mode) == 0o755


def test_file_in_the_way(tmp_path: Path) -> None:
    blocker = tmp_path / "PDF"
    blocker.write_text("not a dir")
    with pytest.raises(DirectoryCreateError):
        ensure_directory(blocker)


def test_parent_is_a_file(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x")
    with pytest.raises(DirectoryCreateError):
        ensure_directory(blocker / "child")
