"""PATH retrieval for ManagePath."""

import logging
import os

from .environment_helper import EnvironmentHelper, debug_log
from .exceptions import InvalidTargetError
from .types import DirectoryList, PathTarget

EFFECTIVE_TARGET_NAME = "effective"


class PathService:
    """Reads and splits the PATH environment variable for a scope."""

    @staticmethod
    def get_directories(target: PathTarget | None = None) -> DirectoryList:
        """
        Retrieve directories from the PATH environment variable.

        Args:
            target: Scope to read (process, user, machine), or None for the
                effective PATH

        Returns:
            Directories in PATH order with blank entries removed
        """
        path_variable = EnvironmentHelper.read_path_variable(target)
        if path_variable is None:
            logging.warning(
                "Unable to get the %s PATH environment variable",
                PathService.get_target_display_name(target),
            )
            return []

        directories = [
            directory
            for directory in path_variable.split(os.pathsep)
            if directory.strip()
        ]
        debug_log(
            f"get_directories: {len(directories)} entries in "
            f"{PathService.get_target_display_name(target)} PATH"
        )
        return directories

    @staticmethod
    def get_target_display_name(target: PathTarget | None) -> str:
        """Get the display name of a PATH source."""
        if target is None:
            return "Effective"
        return target.value.capitalize()

    @staticmethod
    def parse_target(name: str) -> PathTarget | None:
        """Turn a scope name into a PathTarget; 'effective' maps to None."""
        normalized = name.strip().lower()
        if normalized == EFFECTIVE_TARGET_NAME:
            return None
        try:
            return PathTarget(normalized)
        except ValueError:
            raise InvalidTargetError(name) from None
