#!/usr/bin/env python3
"""Main application orchestrator for ManagePath."""

import argparse
import logging
import sys
from typing import Optional

from .argument_processor import ArgumentProcessor
from .config_manager import ConfigManager
from .config_result import ConfigResult
from .environment_helper import debug_log
from .exceptions import ManagePathError
from .extension_set import parse_extensions
from .path_formatter import PathFormatter
from .path_service import PathService
from .path_validator import PathValidator
from .types import ArgsList, ExitCode

DEFAULT_TARGET = "process"


def print_help() -> None:
    """Print help message about managepath functionality."""
    ArgumentProcessor.build_parser().print_help()
    print(
        "\nExample:\n"
        "  managepath path list -n -v            # Number and validate process PATH\n"
        "  managepath path list -t user          # List the user PATH (Windows)\n"
        "\n"
        "  Config file: $XDG_CONFIG_HOME/managepath.conf or $HOME/.config/managepath.conf\n"
        "  Config format: KEY=VALUE (target, number, validate, extensions)\n"
        "  Set MANAGEPATH_DEBUG=1 for debug output on stderr"
    )


class Application:
    """Main application orchestrator."""

    def __init__(
        self,
        path_service: Optional[PathService] = None,
        config_manager: Optional[ConfigManager] = None,
        formatter: Optional[PathFormatter] = None,
    ):
        self.path_service = path_service or PathService()
        self.config_manager = config_manager or ConfigManager()
        self.formatter = formatter or PathFormatter()

    def run(self, args: ArgsList) -> ExitCode:
        """Run the application with the given arguments."""
        if not args:
            print_help()
            return 0

        try:
            options = ArgumentProcessor.parse(args)
        except SystemExit as e:
            # argparse already printed the help text
            return e.code or 0
        except ManagePathError as e:
            logging.error(str(e))
            return 1

        try:
            config = self.config_manager.load()
            return self._list_paths(options, config)
        except ManagePathError as e:
            logging.error(str(e))
            return 1

    def _list_paths(self, options: argparse.Namespace, config: ConfigResult) -> ExitCode:
        """List PATH directories, validating them when requested."""
        target = PathService.parse_target(
            options.target or config.target or DEFAULT_TARGET
        )
        show_numbers = options.number or config.number
        show_validation = options.validate or config.validate

        directories = self.path_service.get_directories(target)
        debug_log(
            f"_list_paths: target={PathService.get_target_display_name(target)} "
            f"number={show_numbers} validate={show_validation}"
        )

        if not show_validation:
            self.formatter.display_simple(directories, show_numbers)
            return 0

        if options.extensions is not None:
            extensions = parse_extensions(options.extensions)
        else:
            extensions = config.extensions

        validator = PathValidator(extensions)
        self.formatter.display(
            validator.validate_many(directories), show_numbers, show_validation=True
        )
        return 0


def main() -> ExitCode:
    """Main entry point."""
    try:
        app = Application()
        return app.run(sys.argv[1:])
    except ManagePathError as e:
        logging.error(str(e))
        return 1
    except Exception as e:
        logging.error(f"Unexpected error: {e}")
        return 1
