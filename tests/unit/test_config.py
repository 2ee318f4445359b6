"""Tests for environment-driven settings."""

import logging

import pytest
from pydantic import ValidationError

from eitherkit import ConfigurationError, Left, Right
from eitherkit.config import (
    DEFAULT_LOG_FORMAT,
    Settings,
    load_settings,
    load_settings_or_raise,
    parse_bool,
)


class TestLoadSettings:
    def test_defaults_from_empty_environment(self):
        result = load_settings({})
        assert result == Right(Settings())
        settings = result.unwrap_right()
        assert settings.log_level == "WARNING"
        assert settings.log_format == DEFAULT_LOG_FORMAT
        assert settings.propagate is True

    def test_reads_prefixed_variables(self):
        settings = load_settings(
            {
                "EITHERKIT_LOG_LEVEL": "debug",
                "EITHERKIT_LOG_FORMAT": "%(message)s",
                "EITHERKIT_PROPAGATE": "no",
            }
        ).unwrap_right()
        assert settings.log_level == "DEBUG"
        assert settings.level_number == logging.DEBUG
        assert settings.log_format == "%(message)s"
        assert settings.propagate is False

    def test_empty_values_fall_back_to_defaults(self):
        result = load_settings({"EITHERKIT_LOG_LEVEL": "", "EITHERKIT_PROPAGATE": ""})
        assert result == Right(Settings())

    def test_ignores_unprefixed_variables(self):
        assert load_settings({"LOG_LEVEL": "DEBUG"}) == Right(Settings())

    def test_invalid_level_is_left(self, caplog):
        caplog.set_level(logging.WARNING, logger="eitherkit.config")
        result = load_settings({"EITHERKIT_LOG_LEVEL": "LOUD"})

        assert isinstance(result, Left)
        error = result.value
        assert isinstance(error, ConfigurationError)
        assert error.field_name == "log_level"
        assert error.invalid_value == "LOUD"
        assert "unknown log level" in error.message
        assert "Invalid eitherkit settings" in caplog.text

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("EITHERKIT_LOG_LEVEL", "error")
        assert load_settings().unwrap_right().log_level == "ERROR"


    def test_invalid_format_is_left(self):
        result = load_settings({"EITHERKIT_LOG_FORMAT": "hello"})

        assert isinstance(result, Left)
        assert result.value.field_name == "log_format"
        assert result.value.invalid_value == "hello"


class TestLoadSettingsOrRaise:
    def test_returns_settings(self):
        assert load_settings_or_raise({}) == Settings()

    def test_raises_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings_or_raise({"EITHERKIT_LOG_LEVEL": "chatty"})
        context = exc_info.value.get_error_context()
        assert context["error_code"] == "ConfigurationError"
        assert context["field_name"] == "log_level"
        assert context["invalid_value"] == "chatty"


class TestSettingsModel:
    def test_frozen(self):
        settings = Settings()
        with pytest.raises(ValidationError):
            settings.log_level = "DEBUG"  # type: ignore[misc]

    def test_level_is_normalised(self):
        assert Settings(log_level="  info ").log_level == "INFO"

    def test_empty_format_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_format="")

    def test_format_without_fields_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_format="hello")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("true", True),
        ("1", True),
        ("YES", True),
        ("on", True),
        ("false", False),
        ("0", False),
        ("whatever", False),
    ],
)
def test_parse_bool(raw, expected):
    assert parse_bool(raw, default=not expected) is expected


def test_parse_bool_default():
    assert parse_bool(None, default=True) is True
    assert parse_bool("", default=False) is False
