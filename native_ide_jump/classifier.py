"""
File classification for native_ide_jump.
Maps a file path to the mobile platform whose IDE should open it.
"""
from enum import Enum

from .constants import (
    ANDROID_EXTENSIONS,
    ANDROID_EXTENSION_SET,
    IOS_EXTENSIONS,
    IOS_EXTENSION_SET,
)


class Platform(Enum):
    """Platform a file belongs to."""
    IOS = "ios"
    ANDROID = "android"
    UNSUPPORTED = "unsupported"


def extract_extension(file_path: str) -> str:
    """
    Extract the lowercase extension of a path, without the leading dot.

    Only the final path component is considered, so dots in directory
    names never count.

    Args:
        file_path: Path to inspect

    Returns:
        The extension, or an empty string when there is none
    """
    name = file_path.replace("\\", "/").rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1].lower()


def classify(file_path: str) -> Platform:
    """
    Classify a file path by its extension.

    The iOS table is checked first, then the Android table.

    Args:
        file_path: Path to classify

    Returns:
        The matching Platform, or Platform.UNSUPPORTED
    """
    extension = extract_extension(file_path)
    if not extension:
        return Platform.UNSUPPORTED
    if extension in IOS_EXTENSION_SET:
        return Platform.IOS
    if extension in ANDROID_EXTENSION_SET:
        return Platform.ANDROID
    return Platform.UNSUPPORTED


def format_extensions(extensions) -> str:
    """Render an extension table as a dotted, comma separated list."""
    return ", ".join(f".{ext}" for ext in extensions)


def supported_extensions_message() -> str:
    """Describe both extension tables for error messages and help text."""
    return (
        f"{format_extensions(IOS_EXTENSIONS)} (iOS), "
        f"{format_extensions(ANDROID_EXTENSIONS)} (Android)"
    )
