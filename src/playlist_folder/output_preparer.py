"""
OutputPreparer - Makes sure the output directory exists and is empty.
"""

import os

from rich.console import Console

console = Console(soft_wrap=True, highlight=False, emoji=False)


class OutputPreparer:
    """
    Creates or clears the output directory.

    The directory itself is never removed, only its contents, so any
    permissions set on it survive a run.
    """

    def __init__(self, output_dir: str):
        """
        Initialize the preparer.

        Args:
            output_dir: Directory that will receive the copies
        """
        self.output_dir = output_dir

    def prepare(self) -> None:
        """Create the output directory, or empty it when it already exists."""
        if os.path.isdir(self.output_dir):
            self._clear_folder(self.output_dir)
        else:
            os.makedirs(self.output_dir)

    def _clear_folder(self, directory: str, depth: int = 0) -> None:
        """
        Remove everything below a directory, deepest entries first.

        Args:
            directory: Directory to clear
            depth: 0 for the output directory itself, which is kept
        """
        if depth == 0:
            console.print("Clearing output folder")

        with os.scandir(directory) as entries:
            children = list(entries)

        # symlinks are unlinked, never followed
        for entry in children:
            if not entry.is_dir(follow_symlinks=False):
                os.unlink(entry.path)

        for entry in children:
            if entry.is_dir(follow_symlinks=False):
                self._clear_folder(entry.path, depth + 1)

        if depth > 0:
            os.rmdir(directory)
