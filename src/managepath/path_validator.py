"""Directory validation for ManagePath."""

from typing import Iterable, Iterator

from .environment_helper import EnvironmentHelper, debug_log
from .executable_detector import ExecutableDetector
from .extension_set import default_executable_extensions
from .path_entry import PathEntry
from .path_helper import PathHelper
from .system_detector import SystemDetector
from .types import ExtensionSet, PlatformFamily


class PathValidator:
    """Validates PATH directories by checking existence and executable presence.

    The executable detection strategy and the extension set are fixed when
    the validator is created. On extension-matching platforms a missing
    ``extensions`` argument means the set is derived from PATHEXT; elsewhere
    extensions are kept but never consulted.
    """

    def __init__(
        self,
        extensions: Iterable[str] | None = None,
        platform_family: PlatformFamily | None = None,
    ):
        self._platform_family = platform_family or SystemDetector.platform_family()

        if extensions is not None:
            self._extensions: ExtensionSet = tuple(extensions)
        elif SystemDetector.uses_extension_matching(self._platform_family):
            self._extensions = default_executable_extensions(
                EnvironmentHelper.get_pathext()
            )
        else:
            self._extensions = ()

        self._detector = ExecutableDetector.for_platform(
            self._platform_family, self._extensions
        )
        debug_log(
            f"PathValidator: {self._platform_family.value} using "
            f"{type(self._detector).__name__}, extensions={list(self._extensions)}"
        )

    @property
    def platform_family(self) -> PlatformFamily:
        return self._platform_family

    @property
    def extensions(self) -> ExtensionSet:
        return self._extensions

    @property
    def detector(self) -> ExecutableDetector:
        return self._detector

    def validate(self, directory: str) -> PathEntry:
        """Validate a single directory path."""
        if not PathHelper.directory_exists(directory):
            return PathEntry(directory, exists=False, has_executables=False)

        return PathEntry(
            directory,
            exists=True,
            has_executables=self._detector.has_executables(directory),
        )

    def validate_many(self, directories: Iterable[str]) -> Iterator[PathEntry]:
        """Lazily validate directories, one entry per input in input order."""
        for directory in directories:
            yield self.validate(directory)
