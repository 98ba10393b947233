"""Shared test fixtures for Playlist Folder."""

from pathlib import Path

import pytest


def create_file(path: Path, content: bytes = b"dummy") -> Path:
    """Create a file with given content and return its path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    return path


@pytest.fixture
def music_dir(tmp_path: Path) -> Path:
    """A folder holding a playlist next to a few audio files."""
    folder = tmp_path / "music"
    create_file(folder / "a.mp3", b"aaa")
    create_file(folder / "b.flac", b"bbbb")
    create_file(folder / "c.mp3", b"ccccc")
    return folder


@pytest.fixture
def write_playlist(music_dir: Path):
    """Write the given lines to music/playlist.m3u and return its path."""
    def _write(*lines: str, name: str = "playlist.m3u") -> Path:
        playlist = music_dir / name
        playlist.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return playlist
    return _write
