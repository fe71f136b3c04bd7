import pytest
from pydantic import ValidationError

from prettifier.config import AppConfig, ObservabilityConfig, get_config, reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults():
    config = AppConfig()

    assert config.io.encoding == "utf-8"
    assert config.io.newline == "\n"
    assert config.observability.level == "WARNING"
    assert config.cli.color is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PRETTIFIER_IO_ENCODING", "latin-1")
    monkeypatch.setenv("PRETTIFIER_LOG_LEVEL", "debug")
    monkeypatch.setenv("PRETTIFIER_CLI_COLOR", "0")

    config = get_config()

    assert config.io.encoding == "latin-1"
    assert config.observability.level == "DEBUG"
    assert config.cli.color is False


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError):
        ObservabilityConfig(level="chatty")
