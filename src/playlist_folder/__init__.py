"""
Playlist Folder - Copy the files of a playlist into a numbered folder.
"""

from .playlist_parser import PlaylistEntry, PlaylistParser
from .output_preparer import OutputPreparer
from .copier import InventoryCopier, get_file_prefix

__version__ = "1.0.0"
__all__ = [
    "PlaylistEntry",
    "PlaylistParser",
    "OutputPreparer",
    "InventoryCopier",
    "get_file_prefix",
]
