"""
Constants and configuration defaults for native_ide_jump.
"""
from pathlib import Path
from typing import Final, Tuple

APP_NAME: Final[str] = "native-ide"
APP_VERSION: Final[str] = "1.0.0"
APP_DESCRIPTION: Final[str] = "Jump from the editor to Xcode or Android Studio at the current line"

CONFIG_DIR: Final[Path] = Path.home() / ".native_ide_jump"
CONFIG_FILE: Final[Path] = CONFIG_DIR / "config.json"

SLASH_PREFIX: Final[str] = "/"
COMMAND_NAMESPACE: Final[str] = "native-ide"
NAMESPACE_SEPARATOR: Final[str] = ":"

DEFAULT_LINE: Final[int] = 1
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
LOG_LEVELS: Final[Tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR")

XCODE_BINARY: Final[str] = "xed"
XCODE_LINE_FLAG: Final[str] = "-l"
ANDROID_STUDIO_BINARY: Final[str] = "studio"
ANDROID_STUDIO_LINE_FLAG: Final[str] = "--line"

# Stored lowercase without the leading dot; declaration order is used in messages.
IOS_EXTENSIONS: Final[Tuple[str, ...]] = (
    "swift", "m", "mm", "h", "xib", "storyboard", "plist", "xcconfig",
    "entitlements", "pbxproj",
)

ANDROID_EXTENSIONS: Final[Tuple[str, ...]] = (
    "kt", "kts", "java", "xml", "gradle", "groovy", "properties",
    "aidl", "pro",
)

IOS_EXTENSION_SET: Final[frozenset] = frozenset(IOS_EXTENSIONS)
ANDROID_EXTENSION_SET: Final[frozenset] = frozenset(ANDROID_EXTENSIONS)

# Editor task variables describing the active buffer
ENV_ACTIVE_FILE: Final[str] = "ZED_FILE"
ENV_CURSOR_ROW: Final[str] = "ZED_ROW"

ENV_CONFIG_FILE: Final[str] = "NATIVE_IDE_CONFIG"
ENV_XCODE_BINARY: Final[str] = "NATIVE_IDE_XED"
ENV_ANDROID_STUDIO_BINARY: Final[str] = "NATIVE_IDE_STUDIO"
ENV_LOG_LEVEL: Final[str] = "NATIVE_IDE_LOG_LEVEL"
