"""System detection functionality for ManagePath."""

import os

from .types import PlatformFamily


class SystemDetector:
    """Handles host platform detection."""

    @staticmethod
    def platform_family() -> PlatformFamily:
        """Return the platform family of the running interpreter."""
        if os.name == "nt":
            return PlatformFamily.WINDOWS
        return PlatformFamily.POSIX

    @staticmethod
    def uses_extension_matching(family: PlatformFamily | None = None) -> bool:
        """Check if executables are recognized by file extension on this family."""
        return (family or SystemDetector.platform_family()) is PlatformFamily.WINDOWS
