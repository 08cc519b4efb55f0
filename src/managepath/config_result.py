"""Config result container for ManagePath."""

from .extension_set import parse_extensions
from .types import ConfigData, ExtensionSet

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


class ConfigResult:
    """Class to hold settings loaded from managepath.conf."""

    def __init__(self, settings: ConfigData | None = None):
        self.settings: ConfigData = dict(settings or {})

    def __contains__(self, key):
        """Allow checking if a setting exists using 'in' operator."""
        return key in self.settings

    def __getitem__(self, key):
        """Allow dictionary-style access to settings."""
        return self.settings[key]

    def __eq__(self, other):
        """Allow comparison with dictionary or another result."""
        if isinstance(other, dict):
            return self.settings == other
        if isinstance(other, ConfigResult):
            return self.settings == other.settings
        return NotImplemented

    def get(self, key, default=None):
        """Allow .get() method access to settings."""
        return self.settings.get(key, default)

    @property
    def target(self) -> str | None:
        """Default PATH scope name, if configured."""
        return self.settings.get("target")

    @property
    def number(self) -> bool:
        return self.settings.get("number", "false").lower() in TRUE_VALUES

    @property
    def validate(self) -> bool:
        return self.settings.get("validate", "false").lower() in TRUE_VALUES

    @property
    def extensions(self) -> ExtensionSet | None:
        """Configured extension override, or None to use the platform default."""
        raw = self.settings.get("extensions")
        if raw is None:
            return None
        return parse_extensions(raw)
