"""
InventoryCopier - Copies playlist entries into the output directory
under numbered filenames.
"""

import os
import shutil

from rich.console import Console
from rich.markup import escape

from .playlist_parser import PlaylistEntry

console = Console(soft_wrap=True, highlight=False, emoji=False)


def get_file_prefix(entries_count: int, index: int) -> str:
    """
    Zero-padded position prefix that sorts in playlist order.

    The width depends only on the entry count: 1 digit below 10 entries,
    2 below 100, 3 below 1000 and 4 from there on. Longer numbers are
    never truncated.

    Args:
        entries_count: Total number of entries in the inventory
        index: Position of the entry

    Returns:
        The index as a left-padded decimal string
    """
    width = 1
    if entries_count >= 10:
        width = 2
    if entries_count >= 100:
        width = 3
    if entries_count >= 1000:
        width = 4

    return str(index).zfill(width)


class InventoryCopier:
    """Copies an inventory of playlist files into a prepared directory."""

    def __init__(self, output_dir: str):
        """
        Initialize the copier.

        Args:
            output_dir: Prepared (existing, empty) output directory
        """
        self.output_dir = output_dir

    def output_filename(self, entry: PlaylistEntry, entries_count: int) -> str:
        """Build ``"{prefix} - {original name}"`` for an entry."""
        prefix = get_file_prefix(entries_count, entry.index)
        return f"{prefix} - {entry.filename}"

    def copy_inventory(self, inventory: list[PlaylistEntry]) -> list[str]:
        """
        Copy every entry in index order.

        The first failure aborts the remaining copies.

        Args:
            inventory: Entries produced by PlaylistParser

        Returns:
            Paths of the files written
        """
        written = []
        for entry in sorted(inventory, key=lambda e: e.index):
            output_path = os.path.join(
                self.output_dir, self.output_filename(entry, len(inventory))
            )

            console.print(f"Copying {escape(entry.filename)}")
            self._copy_file(entry.path, output_path)
            written.append(output_path)

        return written

    def _copy_file(self, source: str, destination: str) -> None:
        """
        Copy file contents and metadata, refusing to overwrite.

        Raises:
            FileExistsError: If the destination already exists
        """
        with open(source, "rb") as src, open(destination, "xb") as dst:
            shutil.copyfileobj(src, dst)
        shutil.copystat(source, destination)
