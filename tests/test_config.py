# test_config.py

import logging

import pytest
from unittest.mock import MagicMock, patch

from storefront import config
from storefront.config import (
    DEFAULT_API_URL,
    get_api_settings,
    get_setting,
)


def secrets_st(values=None, missing_file=False):
    mock_st = MagicMock()
    if missing_file:
        mock_st.secrets.get.side_effect = FileNotFoundError("no secrets.toml")
    else:
        values = values or {}
        mock_st.secrets.get.side_effect = lambda name, default="": values.get(name, default)
    return mock_st


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("STOREFRONT_API_URL", "STOREFRONT_API_TIMEOUT_S", "STOREFRONT_LOG_LEVEL", "SOME_SETTING"):
        monkeypatch.delenv(name, raising=False)


def test_secrets_win_over_environment(monkeypatch):
    monkeypatch.setenv("SOME_SETTING", "from-env")
    with patch("storefront.config.st", secrets_st({"SOME_SETTING": "from-secrets"})):
        assert get_setting("SOME_SETTING") == "from-secrets"


def test_environment_used_when_secret_missing(monkeypatch):
    monkeypatch.setenv("SOME_SETTING", "from-env")
    with patch("storefront.config.st", secrets_st()):
        assert get_setting("SOME_SETTING") == "from-env"


def test_missing_secrets_file_is_not_an_error(monkeypatch):
    monkeypatch.setenv("SOME_SETTING", "from-env")
    with patch("storefront.config.st", secrets_st(missing_file=True)):
        assert get_setting("SOME_SETTING") == "from-env"
        assert get_setting("OTHER_SETTING", "fallback") == "fallback"


def test_api_settings_defaults():
    with patch("storefront.config.st", secrets_st(missing_file=True)):
        settings = get_api_settings()

    assert settings.base_url == DEFAULT_API_URL
    assert settings.timeout_s == 30


def test_api_settings_strip_trailing_slash(monkeypatch):
    monkeypatch.setenv("STOREFRONT_API_URL", "https://api.littlelovely.vn/")
    monkeypatch.setenv("STOREFRONT_API_TIMEOUT_S", "7.5")
    with patch("storefront.config.st", secrets_st()):
        settings = get_api_settings()

    assert settings.base_url == "https://api.littlelovely.vn"
    assert settings.timeout_s == 7.5


def test_api_settings_bad_timeout(monkeypatch):
    monkeypatch.setenv("STOREFRONT_API_TIMEOUT_S", "soon")
    with patch("storefront.config.st", secrets_st()):
        with pytest.raises(ValueError):
            get_api_settings()


def test_configure_logging_runs_once(monkeypatch):
    monkeypatch.setattr(config, "_logging_configured", False)
    monkeypatch.setenv("STOREFRONT_LOG_LEVEL", "debug")
    with patch("storefront.config.st", secrets_st()), patch("storefront.config.logging.basicConfig") as basic:
        config.configure_logging()
        config.configure_logging()

    basic.assert_called_once_with(level=logging.DEBUG, format=config.LOG_FORMAT)
