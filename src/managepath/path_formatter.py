"""Console output for ManagePath."""

import sys
from typing import Iterable, TextIO

from .path_entry import PathEntry

DOES_NOT_EXIST = "    [Invalid: Directory does not exist]"
NO_EXECUTABLES = "    [Invalid: No executable files found]"
VALID = "    [Valid]"
EMPTY_PATH = "The PATH environment variable is empty."


class PathFormatter:
    """Formats and displays PATH entries."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def display(
        self, entries: Iterable[PathEntry], show_numbers: bool, show_validation: bool
    ) -> None:
        """Display PATH entries with optional numbering and validation results."""
        count = 0
        invalid_count = 0

        for entry in entries:
            count += 1
            prefix = f"{count}: " if show_numbers else ""
            self._write(f"{prefix}{entry.directory}")

            if show_validation:
                if not entry.exists:
                    invalid_count += 1
                    self._write(DOES_NOT_EXIST)
                elif not entry.has_executables:
                    invalid_count += 1
                    self._write(NO_EXECUTABLES)
                else:
                    self._write(VALID)

        if show_validation and invalid_count > 0:
            self._write(f"Total invalid directories: {invalid_count}")

        if count == 0:
            self._write(EMPTY_PATH)

    def display_simple(self, directories: Iterable[str], show_numbers: bool) -> None:
        """Display a plain directory list without validation."""
        entries = (PathEntry(d, False, False) for d in directories)
        self.display(entries, show_numbers, show_validation=False)

    def _write(self, line: str) -> None:
        print(line, file=self.stream)
