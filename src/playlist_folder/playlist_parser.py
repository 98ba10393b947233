"""
PlaylistParser - Reads a playlist text file into an ordered inventory.
"""

import codecs
import os
from typing import Optional
from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape

error_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)

DEFAULT_ENCODING = "utf-8-sig"

# UTF-32 first: its little-endian mark starts with the UTF-16 one.
BYTE_ORDER_MARKS = [
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
]


@dataclass(frozen=True)
class PlaylistEntry:
    """Data class for a playlist entry that exists on disk."""
    index: int
    path: str

    @property
    def filename(self) -> str:
        """Base name of the source file, extension included."""
        return os.path.basename(self.path)


class PlaylistParser:
    """
    Reads a playlist file and resolves its lines to existing files.

    Lines starting with ``#`` are comments. Lines starting with ``.`` are
    joined to the playlist's own directory, every other line is checked
    as-is, so a bare relative path resolves against the working directory.
    """

    def __init__(self, playlist_path: str, encoding: Optional[str] = None):
        """
        Initialize the parser.

        Args:
            playlist_path: Path to the playlist file
            encoding: Text encoding of the playlist (defaults to env var
                PLAYLIST_FOLDER_ENCODING, otherwise detected from the
                byte order mark with utf-8 as fallback)
        """
        self.playlist_path = playlist_path
        self.encoding = encoding or os.environ.get("PLAYLIST_FOLDER_ENCODING")
        self.playlist_dir = os.path.dirname(os.path.abspath(playlist_path))

    def parse(self) -> list[PlaylistEntry]:
        """
        Collect the playlist's existing files in file order.

        Missing files are reported on stderr and skipped; indices stay
        dense over the entries that survive. Undecodable bytes become
        U+FFFD, so a damaged line is reported as missing instead of
        failing the whole playlist.

        Returns:
            List of PlaylistEntry objects indexed from 0
        """
        inventory: list[PlaylistEntry] = []
        encoding = self.encoding or self.detect_encoding()

        with open(self.playlist_path, "r", encoding=encoding, errors="replace") as playlist:
            for raw_line in playlist:
                line = raw_line.strip()

                if line.startswith("#"):
                    continue

                file_path = os.path.abspath(self.resolve(line))

                if not os.path.isfile(file_path):
                    error_console.print(
                        f"File {escape(line)} does not exist. Omitting."
                    )
                    continue

                inventory.append(PlaylistEntry(index=len(inventory), path=file_path))

        return inventory

    def detect_encoding(self) -> str:
        """
        Pick the playlist encoding from its byte order mark.

        Returns:
            utf-32, utf-16 or utf-8-sig for a matching mark, otherwise
            DEFAULT_ENCODING
        """
        with open(self.playlist_path, "rb") as playlist:
            head = playlist.read(4)

        for mark, encoding in BYTE_ORDER_MARKS:
            if head.startswith(mark):
                return encoding
        return DEFAULT_ENCODING

    def resolve(self, line: str) -> str:
        """
        Turn a trimmed playlist line into a filesystem path.

        Args:
            line: Trimmed, non-comment playlist line

        Returns:
            The line joined to the playlist directory if it starts with
            ``.``, otherwise the line unchanged
        """
        if line.startswith("."):
            return os.path.join(self.playlist_dir, line)
        return line
