"""
Tests for configuration loading.
"""

import pytest

from artifactory_client.config import APIConfig, Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove ARTIFACTORY_* variables from the environment."""
    for name in [
        "ARTIFACTORY_URL",
        "ARTIFACTORY_TOKEN",
        "ARTIFACTORY_USERNAME",
        "ARTIFACTORY_PASSWORD",
        "ARTIFACTORY_AUTH_METHOD",
        "ARTIFACTORY_VERIFY_SSL",
        "ARTIFACTORY_TIMEOUT",
    ]:
        monkeypatch.delenv(name, raising=False)


def test_api_config_defaults():
    """Test default API configuration."""
    config = APIConfig()
    assert config.url == "http://localhost:8080/artifactory"
    assert config.auth_method == "token"
    assert config.verify_ssl is True
    assert config.max_retries == 0


def test_settings_from_env(monkeypatch):
    """Test settings are read from ARTIFACTORY_* variables."""
    monkeypatch.setenv("ARTIFACTORY_URL", "https://art.example.com/artifactory")
    monkeypatch.setenv("ARTIFACTORY_TOKEN", "env-token")
    monkeypatch.setenv("ARTIFACTORY_VERIFY_SSL", "false")
    monkeypatch.setenv("ARTIFACTORY_TIMEOUT", "10")

    config = Settings().to_api_config()

    assert config.url == "https://art.example.com/artifactory"
    assert config.token == "env-token"
    assert config.auth_method == "token"
    assert config.verify_ssl is False
    assert config.timeout == 10


def test_overrides_take_precedence(monkeypatch):
    """Test explicit values win over the environment and None is ignored."""
    monkeypatch.setenv("ARTIFACTORY_URL", "https://art.example.com/artifactory")
    monkeypatch.setenv("ARTIFACTORY_TOKEN", "env-token")

    config = Settings().to_api_config(url="http://other/artifactory", token=None)

    assert config.url == "http://other/artifactory"
    assert config.token == "env-token"


def test_basic_auth_selected_for_credentials(monkeypatch):
    """Test username and password alone select basic auth."""
    monkeypatch.setenv("ARTIFACTORY_USERNAME", "admin")
    monkeypatch.setenv("ARTIFACTORY_PASSWORD", "password")

    assert Settings().to_api_config().auth_method == "basic"


def test_explicit_auth_method(monkeypatch):
    """Test an explicit auth method is kept."""
    monkeypatch.setenv("ARTIFACTORY_USERNAME", "admin")
    monkeypatch.setenv("ARTIFACTORY_PASSWORD", "password")
    monkeypatch.setenv("ARTIFACTORY_AUTH_METHOD", "token")

    assert Settings().to_api_config().auth_method == "token"
