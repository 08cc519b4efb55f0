"""Configuration management functionality for ManagePath."""

from pathlib import Path

from .config_result import FALSE_VALUES, TRUE_VALUES, ConfigResult
from .exceptions import InvalidConfigError, InvalidTargetError
from .path_helper import PathHelper
from .path_service import PathService
from .types import ConfigData

BOOLEAN_KEYS = ("number", "validate")
KNOWN_KEYS = ("target", "extensions") + BOOLEAN_KEYS

MAX_CONFIG_SIZE = 10 * 1024 * 1024
MAX_LINE_LENGTH = 10000


class ConfigManager:
    """Manages configuration file loading."""

    @staticmethod
    def find_config_file() -> Path | None:
        """Find managepath.conf config file path."""
        return PathHelper.get_config_path()

    @staticmethod
    def load() -> ConfigResult:
        """Load the config file if there is one, otherwise return empty settings."""
        config_file = ConfigManager.find_config_file()
        if config_file is None:
            return ConfigResult()
        return ConfigManager.load_config(config_file)

    @staticmethod
    def load_config(config_file: Path) -> ConfigResult:
        """
        Load configuration from file.

        Args:
            config_file: Path to the configuration file

        Returns:
            ConfigResult containing the validated settings

        Raises:
            InvalidConfigError: If config file has invalid format or content
        """
        settings: ConfigData = {}

        file_size = config_file.stat().st_size
        if file_size > MAX_CONFIG_SIZE:
            raise InvalidConfigError(
                str(config_file), message=f"Config file too large ({file_size} bytes)"
            )

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                for line_num, line in enumerate(f, 1):
                    ConfigManager._process_config_line(
                        line, line_num, str(config_file), settings
                    )
        except UnicodeDecodeError as e:
            raise InvalidConfigError(
                str(config_file), message=f"Invalid file encoding: {e}"
            ) from e

        return ConfigResult(settings)

    @staticmethod
    def _process_config_line(
        line: str, line_num: int, config_file: str, settings: ConfigData
    ) -> None:
        """
        Process a single configuration line.

        Args:
            line: The configuration line to process
            line_num: Line number for error reporting
            config_file: Config file path for error reporting
            settings: Dictionary to store settings
        """
        # Skip empty lines and comments
        if not line.strip() or line.lstrip().startswith("#"):
            return

        # Handle lines without equals signs gracefully
        if "=" not in line:
            return

        if len(line) > MAX_LINE_LENGTH:
            raise InvalidConfigError(
                config_file,
                line_num,
                f"Line too long ({len(line)} characters)",
            )

        key, value = line.strip().split("=", 1)
        key = key.strip().lower()
        value = ConfigManager._strip_quotes_from_value(value.strip())

        if key not in KNOWN_KEYS:
            raise InvalidConfigError(config_file, line_num, f"Unknown setting: '{key}'")

        settings[key] = ConfigManager._validate_value(
            key, value, line_num, config_file
        )

    @staticmethod
    def _validate_value(key: str, value: str, line_num: int, config_file: str) -> str:
        """Check a setting value and return it in normalized form."""
        if key in BOOLEAN_KEYS:
            if value.lower() not in TRUE_VALUES + FALSE_VALUES:
                raise InvalidConfigError(
                    config_file, line_num, f"Invalid boolean for '{key}': '{value}'"
                )
            return value.lower()

        if key == "target":
            try:
                PathService.parse_target(value)
            except InvalidTargetError as e:
                raise InvalidConfigError(config_file, line_num, e.message) from e
            return value.lower()

        return value

    @staticmethod
    def _strip_quotes_from_value(value: str) -> str:
        """Strip quotes from value if present."""
        if ConfigManager._is_value_quoted(value):
            return value[1:-1]
        return value

    @staticmethod
    def _is_value_quoted(value: str) -> bool:
        """Check if value is quoted with matching quotes."""
        return len(value) >= 2 and (
            (value.startswith('"') and value.endswith('"'))
            or (value.startswith("'") and value.endswith("'"))
        )
