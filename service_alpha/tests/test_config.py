"""
Unit tests for service configuration.
"""

import pytest
from pydantic import ValidationError

from shared.config import BINANCE_ALPHA_API, get_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "PORT",
        "ALPHA_ENV",
        "ALPHA_LOG_LEVEL",
        "ALPHA_UPSTREAM_URL",
        "ALPHA_UPSTREAM_TIMEOUT_SECONDS",
        "ALPHA_CACHE_TTL_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = get_config("alpha")

    assert config.service_name == "alpha"
    assert config.port == 3000
    assert config.host == "0.0.0.0"
    assert config.upstream_url == BINANCE_ALPHA_API
    assert config.upstream_timeout_seconds == 10.0
    assert config.cache_ttl_seconds == 30.0


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")

    assert get_config("alpha").port == 8080


def test_explicit_overrides():
    config = get_config("alpha", port=9000, cache_ttl_seconds=2.5)

    assert config.port == 9000
    assert config.cache_ttl_seconds == 2.5


def test_rejects_non_positive_ttl(monkeypatch):
    monkeypatch.setenv("ALPHA_CACHE_TTL_SECONDS", "0")

    with pytest.raises(ValidationError):
        get_config("alpha")
