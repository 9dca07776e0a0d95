"""Unit tests for ZIP archive creation."""

import os
import sys
import zipfile
from pathlib import Path
from unittest.mock import patch

import pytest
from explorefs.core.archive import compress


class TestCompress:
    """Tests for compress()."""

    def test_directory_keeps_top_level_name(self, sample_tree: Path, tmp_path: Path) -> None:
        """Leaf files are stored under the input directory's own name."""
        archive = tmp_path / "out.zip"

        assert compress([str(sample_tree)], str(archive)) is True

        with zipfile.ZipFile(archive) as zf:
            assert sorted(zf.namelist()) == ["src/sub/y.txt", "src/x.txt"]
            assert zf.read("src/sub/y.txt") == b"hello"

    def test_files_at_root(self, sample_tree: Path, tmp_path: Path) -> None:
        """Plain files are stored at the archive root under their own name."""
        archive = tmp_path / "out.zip"

        assert compress([sample_tree / "sub" / "y.txt", sample_tree / "x.txt"], archive) is True

        with zipfile.ZipFile(archive) as zf:
            assert sorted(zf.namelist()) == ["x.txt", "y.txt"]
            assert zf.getinfo("x.txt").compress_type == zipfile.ZIP_DEFLATED

    def test_mixed_inputs(self, sample_tree: Path, tmp_path: Path) -> None:
        """Every leaf file under every input gets an entry."""
        other = tmp_path / "notes.md"
        other.write_text("# notes")
        archive = tmp_path / "out.zip"

        assert compress([str(sample_tree), str(other)], str(archive)) is True

        with zipfile.ZipFile(archive) as zf:
            assert sorted(zf.namelist()) == ["notes.md", "src/sub/y.txt", "src/x.txt"]

    def test_existing_archive_refused(self, sample_tree: Path, tmp_path: Path) -> None:
        """An existing archive is never overwritten."""
        archive = tmp_path / "out.zip"
        archive.write_bytes(b"original")

        assert compress([str(sample_tree)], str(archive)) is False
        assert archive.read_bytes() == b"original"

    def test_missing_input_fails(self, tmp_path: Path) -> None:
        """An unreadable input aborts with False."""
        archive = tmp_path / "out.zip"

        assert compress([str(tmp_path / "nope.txt")], str(archive)) is False

    def test_io_error_fails(self, sample_tree: Path, tmp_path: Path) -> None:
        """OSError while writing is reported as False."""
        with patch("explorefs.core.archive.zipfile.ZipFile", side_effect=OSError("disk full")):
            assert compress([str(sample_tree)], str(tmp_path / "out.zip")) is False

    def test_empty_directory_stores_nothing(self, tmp_path: Path) -> None:
        """Only leaf files are stored, so empty directories vanish."""
        empty = tmp_path / "empty"
        empty.mkdir()
        archive = tmp_path / "out.zip"

        assert compress([str(empty)], str(archive)) is True
        with zipfile.ZipFile(archive) as zf:
            assert zf.namelist() == []

    @pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges")
    def test_aliased_directory_stored_twice(self, sample_tree: Path, tmp_path: Path) -> None:
        """A symlink to a sibling directory is stored under both names."""
        os.symlink(sample_tree / "sub", sample_tree / "alias")
        archive = tmp_path / "out.zip"

        assert compress([str(sample_tree)], str(archive)) is True
        with zipfile.ZipFile(archive) as zf:
            assert sorted(zf.namelist()) == ["src/alias/y.txt", "src/sub/y.txt", "src/x.txt"]

    @pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges")
    def test_symlink_cycle_skipped(self, sample_tree: Path, tmp_path: Path) -> None:
        """A link back up the tree is not followed."""
        os.symlink(sample_tree, sample_tree / "sub" / "loop")
        archive = tmp_path / "out.zip"

        assert compress([str(sample_tree)], str(archive)) is True
        with zipfile.ZipFile(archive) as zf:
            assert sorted(zf.namelist()) == ["src/sub/y.txt", "src/x.txt"]
