"""Tests for the environment-driven application settings."""

from __future__ import annotations

import pathlib
import sys

import pytest

pytest.importorskip("pydantic_settings")
from pydantic import ValidationError

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from micfx.config import Settings, get_settings, reset_settings_cache  # noqa: E402

_ENV_VARS = ("APP_NAME", "ENVIRONMENT", "LOG_LEVEL", "HTTPS_REDIRECT", "HSTS_MAX_AGE")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: pathlib.Path):
    """Run each test without inherited settings or a local ``.env`` file."""

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings_cache()
    yield
    reset_settings_cache()


def test_defaults_describe_a_production_site() -> None:
    settings = Settings()

    assert settings.app_name == "MicFx"
    assert settings.environment == "production"
    assert settings.is_development is False
    assert settings.log_level == "INFO"
    assert settings.https_redirect is True
    assert settings.hsts_max_age == 30 * 24 * 60 * 60


def test_environment_variables_override_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "Development")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("HTTPS_REDIRECT", "false")

    settings = Settings()

    assert settings.is_development is True
    assert settings.log_level == "DEBUG"
    assert settings.https_redirect is False


def test_env_file_is_read(tmp_path: pathlib.Path) -> None:
    (tmp_path / ".env").write_text("APP_NAME=Starter\n", encoding="utf-8")

    assert Settings().app_name == "Starter"


def test_invalid_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")


@pytest.mark.parametrize("level", ["WARN", "FATAL", "NOTSET"])
def test_log_level_aliases_unknown_to_uvicorn_are_rejected(level: str) -> None:
    with pytest.raises(ValidationError):
        Settings(log_level=level)


@pytest.mark.parametrize("level", ["critical", "error", "warning", "info", "debug"])
def test_standard_log_levels_are_accepted(level: str) -> None:
    assert Settings(log_level=level).log_level == level.upper()


def test_hsts_max_age_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        Settings(hsts_max_age=0)


def test_settings_are_cached_until_reset(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("APP_NAME", "Renamed")

    assert get_settings() is first

    reset_settings_cache()
    assert get_settings().app_name == "Renamed"
