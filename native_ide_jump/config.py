"""
Configuration management for native_ide_jump.
Handles loading, saving, and accessing configuration from a JSON file and environment variables.
"""
import json
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Mapping, Optional

from .constants import (
    ANDROID_STUDIO_BINARY,
    CONFIG_FILE,
    DEFAULT_LOG_LEVEL,
    ENV_ANDROID_STUDIO_BINARY,
    ENV_CONFIG_FILE,
    ENV_LOG_LEVEL,
    ENV_XCODE_BINARY,
    LOG_LEVELS,
    XCODE_BINARY,
)
from .errors import ConfigError


@dataclass
class LauncherConfig:
    """Binaries used to open each IDE."""
    xcode_binary: str = XCODE_BINARY
    android_studio_binary: str = ANDROID_STUDIO_BINARY


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = DEFAULT_LOG_LEVEL


@dataclass
class AppConfig:
    """Main application configuration."""
    launcher: LauncherConfig = field(default_factory=LauncherConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigManager:
    """
    Manages application configuration with support for a JSON file and environment variables.

    Environment variables take precedence over config file values. The file is
    never created implicitly; it is only written by save().
    """

    def __init__(
        self,
        config_file: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        if config_file is None:
            env_path = self._environ.get(ENV_CONFIG_FILE)
            config_file = Path(env_path).expanduser() if env_path else CONFIG_FILE
        self._config_file = Path(config_file)
        self._config: AppConfig = AppConfig()
        self._load_config()
        self._load_env_vars()

    def _load_config(self) -> None:
        """Load configuration from the JSON file."""
        if not self._config_file.exists():
            return

        try:
            with open(self._config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Malformed config file at line {e.lineno}, column {e.colno}: {e.msg}",
                path=str(self._config_file),
            ) from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file: {e}", path=str(self._config_file)) from e

        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a JSON object", path=str(self._config_file))

        try:
            if 'launcher' in data:
                self._config.launcher = LauncherConfig(**data['launcher'])
            if 'logging' in data:
                self._config.logging = LoggingConfig(**data['logging'])
        except TypeError as e:
            raise ConfigError(f"Invalid config section: {e}", path=str(self._config_file)) from e

        self._validate()

    def _load_env_vars(self) -> None:
        """Apply overrides from environment variables."""
        xcode = self._environ.get(ENV_XCODE_BINARY)
        if xcode:
            self._config.launcher.xcode_binary = xcode

        studio = self._environ.get(ENV_ANDROID_STUDIO_BINARY)
        if studio:
            self._config.launcher.android_studio_binary = studio

        level = self._environ.get(ENV_LOG_LEVEL)
        if level:
            self._config.logging.level = level.upper()

        self._validate()

    def _validate(self) -> None:
        """Reject values the launcher and logger cannot use."""
        launcher = self._config.launcher
        for name in ('xcode_binary', 'android_studio_binary'):
            value = getattr(launcher, name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"launcher.{name} must be a non-empty string")

        level = self._config.logging.level
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            raise ConfigError(
                f"Invalid log level: {level}. Must be one of {', '.join(LOG_LEVELS)}"
            )
        self._config.logging.level = level.upper()

    def _save_config(self) -> None:
        """Save current configuration to the JSON file."""
        data = {
            'launcher': asdict(self._config.launcher),
            'logging': asdict(self._config.logging),
        }

        self._config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self._config_file, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)

    @property
    def config(self) -> AppConfig:
        """Get the current configuration."""
        return self._config

    @property
    def launcher(self) -> LauncherConfig:
        """Get launcher configuration."""
        return self._config.launcher

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration."""
        return self._config.logging

    @property
    def config_file(self) -> Path:
        return self._config_file

    def update_launcher(self, **kwargs: Any) -> None:
        """Update launcher configuration."""
        for key, value in kwargs.items():
            if hasattr(self._config.launcher, key):
                setattr(self._config.launcher, key, value)
        self._validate()

    def save(self) -> None:
        """Explicitly save configuration."""
        self._save_config()

    def reload(self) -> None:
        """Reload configuration from file."""
        self._config = AppConfig()
        self._load_config()
        self._load_env_vars()


_config: Optional[ConfigManager] = None


def get_config(config_file: Optional[Path] = None) -> ConfigManager:
    """
    Get the global configuration manager instance.

    Passing a config file replaces the global instance.
    """
    global _config
    if _config is None or config_file is not None:
        _config = ConfigManager(config_file)
    return _config
