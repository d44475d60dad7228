"""Tests for configuration loading."""

import pytest

from helium_api.config.settings import APISettings, APIUrls, VERSION
from helium_api.core.exceptions import ConfigurationError


def test_defaults(monkeypatch):
    monkeypatch.delenv("HELIUM_API_URL", raising=False)
    monkeypatch.delenv("HELIUM_API_TIMEOUT", raising=False)
    monkeypatch.delenv("HELIUM_API_USER_AGENT", raising=False)

    api = APISettings()

    assert api.base_url == APIUrls.MAINNET
    assert api.timeout == 30.0
    assert api.user_agent == f"helium-api-py/{VERSION}"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("HELIUM_API_URL", APIUrls.STAGING)
    monkeypatch.setenv("HELIUM_API_TIMEOUT", "5")

    api = APISettings()

    assert api.base_url == APIUrls.STAGING
    assert api.timeout == 5.0


def test_invalid_timeout_raises(monkeypatch):
    monkeypatch.setenv("HELIUM_API_TIMEOUT", "soon")

    with pytest.raises(ConfigurationError):
        APISettings()


def test_explicit_values_win(monkeypatch):
    monkeypatch.setenv("HELIUM_API_URL", "https://ignored.test")

    assert APISettings(base_url="https://explicit.test").base_url == "https://explicit.test"
