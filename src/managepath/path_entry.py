"""PATH entry record for ManagePath."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PathEntry:
    """Point-in-time validation snapshot of one PATH directory.

    Revalidating a directory produces a new instance; two entries with the
    same field values compare equal and hash the same.
    """

    directory: str
    exists: bool
    has_executables: bool

    @property
    def is_valid(self) -> bool:
        """Whether the directory exists and contains at least one executable."""
        return self.exists and self.has_executables
