"""
Type aliases and enumerations for ManagePath.

This module provides centralized type definitions used throughout the application
to ensure consistency and maintainability.

Type Aliases:
    ArgsList: List of string arguments
    DirectoryList: List of directory paths taken from PATH
    ExtensionSet: Ordered tuple of executable file extensions
    ConfigData: Dictionary representing configuration data
    ExitCode: Integer representing exit codes

Enumerations:
    PathTarget: Environment scope a PATH value is read from
    PlatformFamily: Host family deciding how executables are recognized
"""

from enum import Enum
from typing import Dict, List, Tuple

# Common type aliases used throughout the application
ArgsList = List[str]
"""List of string arguments used for command-line arguments."""

DirectoryList = List[str]
"""List of directory paths in PATH order (e.g., ['/usr/local/bin', '/usr/bin'])."""

ExtensionSet = Tuple[str, ...]
"""Ordered, deduplicated executable extensions (e.g., ('.EXE', '.BAT', '.pl', '.PL'))."""

ConfigData = Dict[str, str]
"""Dictionary representing configuration data with string keys and values."""

ExitCode = int
"""Integer representing process exit codes (0 for success, non-zero for errors)."""


class PathTarget(Enum):
    """Environment scope holding a PATH value.

    ``None`` is used in place of a member to mean the effective PATH as seen
    by the running process.
    """

    PROCESS = "process"
    USER = "user"
    MACHINE = "machine"


class PlatformFamily(Enum):
    """Platform family of the host operating system."""

    WINDOWS = "windows"
    POSIX = "posix"
