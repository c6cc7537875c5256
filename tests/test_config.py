"""Tests for environment configuration."""

from pathlib import Path

import pytest

from tally.config import DEFAULT_DB_PATH, DEFAULT_PORT, load_settings


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration variables from the environment."""
    for name in [
        "TALLY_DB_PATH",
        "TALLY_ALLOWED_ORIGINS",
        "TALLY_LOG_LEVEL",
        "HOST",
        "PORT",
        "RELOAD",
    ]:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    """Without overrides, defaults apply."""
    settings = load_settings()

    assert settings.db_path == DEFAULT_DB_PATH
    assert settings.allowed_origins == ("http://localhost:3000",)
    assert settings.host == "0.0.0.0"
    assert settings.port == DEFAULT_PORT == 5051
    assert settings.log_level == "INFO"
    assert settings.reload is False


def test_environment_overrides(clean_env, tmp_path):
    """Environment variables override defaults."""
    clean_env.setenv("TALLY_DB_PATH", str(tmp_path / "x.db"))
    clean_env.setenv("TALLY_ALLOWED_ORIGINS", "http://a.test, http://b.test,")
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("TALLY_LOG_LEVEL", "debug")
    clean_env.setenv("RELOAD", "TRUE")

    settings = load_settings()

    assert settings.db_path == Path(tmp_path / "x.db")
    assert settings.allowed_origins == ("http://a.test", "http://b.test")
    assert settings.port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.reload is True


def test_invalid_port(clean_env):
    """A non-numeric PORT is an error."""
    clean_env.setenv("PORT", "abc")

    with pytest.raises(ValueError):
        load_settings()
