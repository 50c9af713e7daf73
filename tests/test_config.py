"""
Tests for configuration loading and environment overrides.
"""

import json

import allure
import pytest

from native_ide_jump.config import ConfigManager, LauncherConfig
from native_ide_jump.errors import ConfigError


@allure.feature("Configuration")
@allure.story("Defaults without a config file")
@allure.severity(allure.severity_level.NORMAL)
def test_defaults_when_file_is_missing(tmp_path):
    config_file = tmp_path / "config.json"

    manager = ConfigManager(config_file, environ={})

    assert manager.launcher == LauncherConfig()
    assert manager.launcher.xcode_binary == "xed"
    assert manager.launcher.android_studio_binary == "studio"
    assert manager.logging.level == "WARNING"
    assert not config_file.exists(), "Loading must not create the config file"


def test_file_values_are_loaded(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({
        "launcher": {"android_studio_binary": "/opt/android-studio/bin/studio.sh"},
        "logging": {"level": "debug"},
    }))

    manager = ConfigManager(config_file, environ={})

    assert manager.launcher.android_studio_binary == "/opt/android-studio/bin/studio.sh"
    assert manager.launcher.xcode_binary == "xed"
    assert manager.logging.level == "DEBUG"


@allure.feature("Configuration")
@allure.story("Environment overrides")
@allure.severity(allure.severity_level.NORMAL)
def test_environment_overrides_file(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"launcher": {"xcode_binary": "/usr/bin/xed"}}))

    manager = ConfigManager(config_file, environ={
        "NATIVE_IDE_XED": "/custom/xed",
        "NATIVE_IDE_STUDIO": "/custom/studio",
        "NATIVE_IDE_LOG_LEVEL": "info",
    })

    assert manager.launcher.xcode_binary == "/custom/xed"
    assert manager.launcher.android_studio_binary == "/custom/studio"
    assert manager.logging.level == "INFO"


def test_config_path_from_environment(tmp_path):
    config_file = tmp_path / "elsewhere.json"
    config_file.write_text(json.dumps({"launcher": {"xcode_binary": "xed-beta"}}))

    manager = ConfigManager(environ={"NATIVE_IDE_CONFIG": str(config_file)})

    assert manager.config_file == config_file
    assert manager.launcher.xcode_binary == "xed-beta"


@allure.feature("Configuration")
@allure.story("Malformed files are rejected")
@allure.severity(allure.severity_level.CRITICAL)
def test_malformed_json_reports_position(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text('{\n  "launcher": oops\n}')

    with pytest.raises(ConfigError) as exc_info:
        ConfigManager(config_file, environ={})

    message = str(exc_info.value)
    assert "line 2" in message
    assert str(config_file) in message


@pytest.mark.parametrize("payload, fragment", [
    ([1, 2, 3], "JSON object"),
    ({"launcher": {"unknown_key": "x"}}, "Invalid config section"),
    ({"launcher": {"xcode_binary": ""}}, "xcode_binary"),
    ({"launcher": {"android_studio_binary": 5}}, "android_studio_binary"),
    ({"logging": {"level": "LOUD"}}, "Invalid log level"),
])
def test_invalid_values_are_rejected(tmp_path, payload, fragment):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps(payload))

    with pytest.raises(ConfigError, match=fragment):
        ConfigManager(config_file, environ={})


def test_invalid_environment_level_is_rejected(tmp_path):
    with pytest.raises(ConfigError, match="Invalid log level"):
        ConfigManager(tmp_path / "config.json", environ={"NATIVE_IDE_LOG_LEVEL": "chatty"})


@allure.feature("Configuration")
@allure.story("Save and reload")
@allure.severity(allure.severity_level.NORMAL)
def test_save_then_reload(tmp_path):
    config_file = tmp_path / "nested" / "config.json"
    manager = ConfigManager(config_file, environ={})

    manager.update_launcher(android_studio_binary="/Applications/Android Studio.app/Contents/MacOS/studio")
    manager.save()

    reloaded = ConfigManager(config_file, environ={})
    assert reloaded.launcher.android_studio_binary == "/Applications/Android Studio.app/Contents/MacOS/studio"
    assert json.loads(config_file.read_text())["logging"] == {"level": "WARNING"}

    config_file.write_text(json.dumps({"launcher": {"xcode_binary": "xed2"}}))
    reloaded.reload()
    assert reloaded.launcher.xcode_binary == "xed2"
    assert reloaded.launcher.android_studio_binary == "studio"
