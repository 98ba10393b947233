"""Tests for creating and clearing the output directory."""

import os
from pathlib import Path

import pytest

from playlist_folder.output_preparer import OutputPreparer

from conftest import create_file


class TestOutputPreparer:
    """Tests for OutputPreparer.prepare()."""

    def test_missing_directory_is_created_with_parents(self, tmp_path: Path) -> None:
        output = tmp_path / "deep" / "er" / "out"

        OutputPreparer(str(output)).prepare()

        assert output.is_dir()
        assert list(output.iterdir()) == []

    def test_nested_content_is_cleared_but_root_kept(self, tmp_path: Path) -> None:
        output = tmp_path / "out"
        create_file(output / "old.mp3")
        create_file(output / "sub" / "deep" / "file.txt")
        (output / "sub" / "empty").mkdir()
        output.chmod(0o750)
        inode = output.stat().st_ino

        OutputPreparer(str(output)).prepare()

        assert output.is_dir()
        assert list(output.iterdir()) == []
        assert output.stat().st_ino == inode
        assert output.stat().st_mode & 0o777 == 0o750

    def test_clearing_notice_printed_once(self, tmp_path: Path, capsys) -> None:
        output = tmp_path / "out"
        create_file(output / "a" / "b" / "c.txt")
        create_file(output / "d" / "e.txt")

        OutputPreparer(str(output)).prepare()

        assert capsys.readouterr().out == "Clearing output folder\n"

    def test_no_notice_when_created(self, tmp_path: Path, capsys) -> None:
        OutputPreparer(str(tmp_path / "new")).prepare()

        assert capsys.readouterr().out == ""

    def test_symlinked_directory_is_unlinked_not_followed(self, tmp_path: Path) -> None:
        keep = create_file(tmp_path / "keep" / "precious.mp3")
        output = tmp_path / "out"
        output.mkdir()
        try:
            os.symlink(keep.parent, output / "link", target_is_directory=True)
        except (OSError, NotImplementedError):
            pytest.skip("symlinks not supported")

        OutputPreparer(str(output)).prepare()

        assert list(output.iterdir()) == []
        assert keep.exists()

    def test_output_path_that_is_a_file_fails(self, tmp_path: Path) -> None:
        output = create_file(tmp_path / "out")

        with pytest.raises(FileExistsError):
            OutputPreparer(str(output)).prepare()
