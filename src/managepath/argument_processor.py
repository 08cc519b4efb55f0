"""Argument parsing functionality for ManagePath."""

import argparse

from .exceptions import ArgumentParseError
from .types import ArgsList

TARGET_NAMES = ("process", "user", "machine", "effective")


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting on bad input."""

    def error(self, message):
        raise ArgumentParseError(message)


class ArgumentProcessor:
    """Handles command-line argument parsing."""

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        """Build the `managepath path list` command-line parser."""
        parser = _RaisingArgumentParser(
            prog="managepath", description="Manage PATH environment variable"
        )
        commands = parser.add_subparsers(dest="command", metavar="COMMAND")
        commands.required = True

        path_parser = commands.add_parser(
            "path", help="Manage the PATH environment variable"
        )
        path_commands = path_parser.add_subparsers(dest="action", metavar="ACTION")
        path_commands.required = True

        list_parser = path_commands.add_parser(
            "list", help="List the directories in the PATH environment variable"
        )
        list_parser.add_argument(
            "-t",
            "--target",
            default=None,
            metavar="TARGET",
            help=f"PATH scope to read ({', '.join(TARGET_NAMES)}; default: process).",
        )
        list_parser.add_argument(
            "-n",
            "--number",
            action="store_true",
            help="Directories are numbered in the output.",
        )
        list_parser.add_argument(
            "-v",
            "--validate",
            action="store_true",
            help="Validate that each directory exists and contains at least one executable file.",
        )
        list_parser.add_argument(
            "-e",
            "--extensions",
            default=None,
            metavar="EXTS",
            help="Semicolon-separated executable extensions (Windows only, e.g. '.exe;.py').",
        )
        return parser

    @staticmethod
    def parse(args: ArgsList) -> argparse.Namespace:
        """
        Parse command-line arguments.

        Raises:
            ArgumentParseError: If the arguments are not a valid command
            SystemExit: When argparse prints help (-h/--help)
        """
        return ArgumentProcessor.build_parser().parse_args(args)
