"""Tests for Usagi settings."""
from pathlib import Path

import pytest
from pydantic import ValidationError

from usagi.config.settings import (
    DEFAULT_LOG_FILE,
    USAGI_HOME,
    UsagiSettings,
    clear_settings_cache,
    get_settings,
)


def test_defaults():
    """Test the default settings."""
    settings = get_settings()
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_FILE is None  # disabled by the test environment
    assert settings.LOG_TO_CONSOLE is False
    assert settings.ASSISTANT_NAME == "Usagi"
    assert settings.COMMAND_PREFIX == "/"
    assert settings.FILE_ENCODING == "utf-8"


def test_settings_are_cached():
    """Test that get_settings returns the same instance until cleared."""
    first = get_settings()
    assert get_settings() is first
    clear_settings_cache()
    assert get_settings() is not first


def test_environment_override(monkeypatch):
    """Test reading settings from USAGI_ environment variables."""
    monkeypatch.setenv("USAGI_LOG_LEVEL", "debug")
    monkeypatch.setenv("USAGI_COMMAND_PREFIX", "!")
    clear_settings_cache()

    settings = get_settings()
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.COMMAND_PREFIX == "!"


def test_relative_log_file_resolves_under_usagi_home():
    """Test that a relative log path lands in the per-user directory."""
    settings = UsagiSettings(LOG_FILE=Path("custom/usagi.log"))
    assert settings.LOG_FILE == USAGI_HOME / "custom" / "usagi.log"


def test_log_file_directory_is_not_created(tmp_path):
    """Test that loading settings leaves the filesystem alone."""
    log_file = tmp_path / "logs" / "usagi.log"
    settings = UsagiSettings(LOG_FILE=log_file)
    assert settings.LOG_FILE == log_file
    assert not log_file.parent.exists()


def test_default_log_file_is_per_user():
    """Test that the default log file does not depend on the install location."""
    assert DEFAULT_LOG_FILE == Path.home() / ".usagi" / "logs" / "usagi.log"


@pytest.mark.parametrize("field,value", [
    ("LOG_LEVEL", "LOUD"),
    ("LOG_FORMAT", "fancy"),
    ("COMMAND_PREFIX", "//"),
    ("COMMAND_PREFIX", "a"),
    ("COMMAND_PREFIX", " "),
    ("FILE_ENCODING", "no-such-codec"),
])
def test_invalid_values(field, value):
    """Test that invalid settings are rejected."""
    with pytest.raises(ValidationError):
        UsagiSettings(**{field: value})
