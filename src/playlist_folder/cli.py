"""
CLI - Command-line interface for Playlist Folder.
"""

import os
import sys
from enum import IntEnum

import click
from rich.console import Console

from .playlist_parser import PlaylistParser
from .output_preparer import OutputPreparer
from .copier import InventoryCopier

console = Console(soft_wrap=True, highlight=False, emoji=False)
error_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)

USAGE = "playlist-folder $PathToPlaylistFile $PathToOutputDirectory"


class ExitCode(IntEnum):
    """Process exit codes."""
    SUCCESS = 0
    ERROR = 1
    INVALID_ARGUMENTS = 2
    PLAYLIST_FILE_NOT_EXISTING = 3
    # Reserved: the output directory is created when missing.
    OUTPUT_DIRECTORY_NOT_EXISTING = 4


def print_help():
    """Print the one-line usage help."""
    console.print(USAGE, markup=False)


def execute(playlist_path: str, output_dir: str) -> list[str]:
    """
    Parse the playlist, prepare the output directory and copy the files.

    Args:
        playlist_path: Path to the playlist file
        output_dir: Directory to fill with numbered copies

    Returns:
        Paths of the copied files
    """
    inventory = PlaylistParser(playlist_path).parse()
    OutputPreparer(output_dir).prepare()
    return InventoryCopier(output_dir).copy_inventory(inventory)


@click.command(
    context_settings={"ignore_unknown_options": True, "help_option_names": []}
)
@click.argument(
    "paths",
    nargs=-1,
    type=click.Path(),
    metavar="PLAYLIST_FILE OUTPUT_DIRECTORY"
)
def cli(paths: tuple[str, ...]):
    """
    Playlist Folder - Copy playlist files into a numbered folder.

    Takes exactly PLAYLIST_FILE and OUTPUT_DIRECTORY. Arguments are never
    read as options, so paths may start with a dash. Every file listed in the
    playlist is copied as "{index} - {name}" so that players sorting by
    filename play them in playlist order. The output directory is emptied
    first.
    """
    if len(paths) != 2:
        error_console.print("Invalid arguments length.")
        print_help()
        sys.exit(ExitCode.INVALID_ARGUMENTS)

    playlist_path, output_dir = paths

    if not os.path.isfile(playlist_path):
        error_console.print("Playlist file doesnt exist.")
        print_help()
        sys.exit(ExitCode.PLAYLIST_FILE_NOT_EXISTING)

    try:
        execute(playlist_path, output_dir)
    except Exception:
        error_console.print_exception()
        sys.exit(ExitCode.ERROR)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
