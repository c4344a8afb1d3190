import pytest

from rentwheels import config
from rentwheels.app import token_secret, ConfigurationError


def test_configured_secret(monkeypatch):
    monkeypatch.setattr(config, "access_token_secret", "configured")
    assert token_secret() == "configured"


def test_development_secret(monkeypatch):
    monkeypatch.setattr(config, "access_token_secret", None)
    monkeypatch.setattr(config, "server_mode", "development")
    assert token_secret() == config.development_token_secret


def test_missing_secret_in_production(monkeypatch):
    """Assert that the server refuses to sign tokens with a well known secret in production."""
    monkeypatch.setattr(config, "access_token_secret", None)
    monkeypatch.setattr(config, "server_mode", "production")
    with pytest.raises(ConfigurationError):
        token_secret()
