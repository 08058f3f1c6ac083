"""Test configuration defaults and environment overrides."""
import pytest
from salon.config import LoggingConfig, SalonConfig
from salon.errors import ConfigurationError, SalonError


def test_defaults():
    config = SalonConfig.default()
    assert config.logging.level == "warning"
    assert config.logging.format == "console"
    assert config.logger_name == "salon"


def test_from_env(monkeypatch):
    monkeypatch.setenv("SALON_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SALON_LOG_FORMAT", "json")
    config = SalonConfig.from_env()
    assert config.logging.level == "debug"
    assert config.logging.format == "json"


def test_from_env_custom_prefix(monkeypatch):
    monkeypatch.setenv("APP_LOG_LEVEL", "info")
    assert SalonConfig.from_env(prefix="APP_").logging.level == "info"


def test_from_env_without_overrides(monkeypatch):
    monkeypatch.delenv("SALON_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SALON_LOG_FORMAT", raising=False)
    assert SalonConfig.from_env() == SalonConfig.default()


def test_invalid_level_rejected(monkeypatch):
    monkeypatch.setenv("SALON_LOG_LEVEL", "loud")
    with pytest.raises(ConfigurationError) as exc_info:
        SalonConfig.from_env()
    assert exc_info.value.code == "CONFIGURATION_ERROR"
    assert exc_info.value.details == {"level": "loud"}


def test_invalid_format_rejected():
    with pytest.raises(ValueError):
        LoggingConfig(format="xml")


def test_error_to_dict():
    error = ConfigurationError("bad", details={"key": "value"})
    assert isinstance(error, SalonError)
    assert error.to_dict() == {
        "code": "CONFIGURATION_ERROR",
        "message": "bad",
        "details": {"key": "value"},
    }


def test_config_is_frozen():
    config = SalonConfig.default()
    with pytest.raises(AttributeError):
        config.logger_name = "other"
