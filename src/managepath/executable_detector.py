"""Executable detection strategies for ManagePath.

Windows decides executability by file extension, POSIX systems by the
owner-execute permission bit. A validator picks exactly one strategy when it
is constructed; the two are never combined.
"""

import stat
from abc import ABC, abstractmethod
from typing import Iterable

from .environment_helper import debug_log
from .path_helper import PathHelper
from .types import ExtensionSet, PlatformFamily


class ExecutableDetector(ABC):
    """Decides whether an existing directory contains an executable file."""

    @abstractmethod
    def has_executables(self, directory: str) -> bool:
        """Check if directory holds at least one executable immediate file."""

    @staticmethod
    def for_platform(
        family: PlatformFamily, extensions: Iterable[str] = ()
    ) -> "ExecutableDetector":
        """Build the detector used on the given platform family."""
        if family is PlatformFamily.WINDOWS:
            return ExtensionMatchDetector(extensions)
        return PermissionBitDetector()


class ExtensionMatchDetector(ExecutableDetector):
    """Matches immediate file names against a list of executable extensions."""

    def __init__(self, extensions: Iterable[str], case_sensitive: bool = False):
        self._extensions: ExtensionSet = tuple(extensions)
        self._case_sensitive = case_sensitive

    @property
    def extensions(self) -> ExtensionSet:
        return self._extensions

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    def has_executables(self, directory: str) -> bool:
        if not self._extensions:
            return False

        try:
            names = [entry.name for entry in PathHelper.list_files(directory)]
        except OSError as e:
            debug_log(f"has_executables: cannot list {directory}: {e}")
            return False

        if not self._case_sensitive:
            names = [name.lower() for name in names]

        # Extensions are tried in order; first one with a match wins
        for ext in self._extensions:
            suffix = ext if self._case_sensitive else ext.lower()
            if any(name.endswith(suffix) for name in names):
                debug_log(f"has_executables: {directory} matched '{ext}'")
                return True
        return False


class PermissionBitDetector(ExecutableDetector):
    """Looks for an immediate file with the owner-execute bit set."""

    def has_executables(self, directory: str) -> bool:
        try:
            for entry in PathHelper.list_files(directory):
                try:
                    mode = PathHelper.file_mode(entry)
                except OSError:
                    continue
                if mode & stat.S_IXUSR:
                    debug_log(f"has_executables: {directory} has {entry.name}")
                    return True
        except OSError as e:
            # Unreadable directories count as having no executables
            debug_log(f"has_executables: cannot list {directory}: {e}")
        return False
