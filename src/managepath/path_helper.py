"""Path operations for ManagePath."""

import os
from pathlib import Path
from typing import Iterator


class PathHelper:
    """Utility class for path operations."""

    @staticmethod
    def get_config_path() -> Path | None:
        """Get the path to the config file."""
        # Check XDG_CONFIG_HOME first (standard location)
        if xdg_config_home := os.getenv("XDG_CONFIG_HOME"):
            config_path = Path(xdg_config_home) / "managepath.conf"
            if config_path.exists():
                return config_path

        # Fall back to HOME/.config/managepath.conf
        home = os.getenv("HOME")
        if home:
            config_path = Path(home) / ".config" / "managepath.conf"
            if config_path.exists():
                return config_path

        return None

    @staticmethod
    def directory_exists(path: str) -> bool:
        """Check if path currently resolves to a directory."""
        return os.path.isdir(path)

    @staticmethod
    def list_files(path: str) -> Iterator[os.DirEntry]:
        """
        Yield the immediate file entries of a directory.

        Subdirectories are skipped. Listing errors (OSError) propagate to
        the caller.
        """
        with os.scandir(path) as entries:
            for entry in entries:
                try:
                    if entry.is_file():
                        yield entry
                except OSError:
                    continue

    @staticmethod
    def file_mode(entry: os.DirEntry) -> int:
        """Return the permission bits of a directory entry."""
        return entry.stat().st_mode
