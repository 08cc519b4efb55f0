"""Environment variable operations for ManagePath."""

import os
import sys

try:
    import winreg  # type: ignore
except ImportError:  # non-Windows
    winreg = None  # type: ignore

from .exceptions import EnvironmentVariableError
from .types import PathTarget

USER_ENVIRONMENT_KEY = r"Environment"
MACHINE_ENVIRONMENT_KEY = (
    r"SYSTEM\CurrentControlSet\Control\Session Manager\Environment"
)


def debug_log(message: str) -> None:
    """Log debug message when MANAGEPATH_DEBUG=1 is set."""
    if os.environ.get("MANAGEPATH_DEBUG", "").lower() in ("1", "true", "yes", "on"):
        print(f"[DEBUG] {message}", file=sys.stderr, flush=True)


class EnvironmentHelper:
    """Utility class for environment variable operations."""

    @staticmethod
    def get_pathext() -> str | None:
        """Get the raw PATHEXT value, or None when it is unset."""
        return os.environ.get("PATHEXT")

    @staticmethod
    def read_path_variable(target: PathTarget | None = None) -> str | None:
        """
        Read the raw PATH value for a scope.

        Args:
            target: Scope to read from; None means the effective PATH

        Returns:
            The unsplit PATH string, or None if the scope has no PATH

        Raises:
            EnvironmentVariableError: If the registry cannot be read
        """
        if target is None or target is PathTarget.PROCESS:
            return os.environ.get("PATH")

        if winreg is None:
            # User/machine scopes only exist in the Windows registry
            debug_log(f"read_path_variable: {target.value} scope unavailable")
            return None

        return EnvironmentHelper._read_registry_path(target)

    @staticmethod
    def _read_registry_path(target: PathTarget) -> str | None:
        """Read the Path value for the user or machine scope from the registry."""
        if target is PathTarget.USER:
            root, subkey = winreg.HKEY_CURRENT_USER, USER_ENVIRONMENT_KEY
        else:
            root, subkey = winreg.HKEY_LOCAL_MACHINE, MACHINE_ENVIRONMENT_KEY

        try:
            with winreg.OpenKey(root, subkey) as key:
                value, value_type = winreg.QueryValueEx(key, "Path")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise EnvironmentVariableError("PATH", str(e)) from e

        if not isinstance(value, str):
            debug_log(
                f"read_path_variable: {target.value} PATH is not a string "
                f"(registry type {value_type})"
            )
            return None

        if value_type == winreg.REG_EXPAND_SZ:
            value = winreg.ExpandEnvironmentStrings(value)

        debug_log(f"read_path_variable: read {target.value} PATH from registry")
        return value
