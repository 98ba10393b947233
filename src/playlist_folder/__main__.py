"""Entry point for ``python -m playlist_folder``."""

from playlist_folder.cli import main

if __name__ == "__main__":
    main()
