"""Default executable extension set for extension-matching platforms."""

from .types import ExtensionSet

SCRIPT_EXTENSIONS: ExtensionSet = (".pl", ".PL")
"""Perl script extensions, added whether or not PATHEXT lists them."""

FALLBACK_EXTENSIONS: ExtensionSet = (
    ".exe",
    ".bat",
    ".cmd",
    ".com",
    ".ps1",
) + SCRIPT_EXTENSIONS
"""Used when PATHEXT is not set at all."""

PATHEXT_SEPARATOR = ";"


def parse_extensions(raw: str) -> ExtensionSet:
    """Split a semicolon-separated extension list into non-empty tokens."""
    return tuple(
        token.strip() for token in raw.split(PATHEXT_SEPARATOR) if token.strip()
    )


def dedupe_extensions(extensions) -> ExtensionSet:
    """Drop repeated extensions, keeping first-seen order."""
    return tuple(dict.fromkeys(extensions))


def default_executable_extensions(pathext: str | None) -> ExtensionSet:
    """
    Derive the extension set a validator uses when none is supplied.

    Args:
        pathext: Raw PATHEXT value, or None if the variable is unset

    Returns:
        Ordered extension tuple that always contains both script extensions
    """
    if pathext is None:
        return FALLBACK_EXTENSIONS

    return dedupe_extensions(parse_extensions(pathext) + SCRIPT_EXTENSIONS)
