import pytest

from config import build_settings
from core.exceptions import ConfigError


def test_env_overrides_routing(monkeypatch):
    monkeypatch.setenv("ROUTING_ENABLED", "true")
    monkeypatch.setenv("ROUTING_CACHE_TTL_MS", "5000")
    monkeypatch.setenv("HTTP_TIMEOUT_S", "2.5")
    cfg = build_settings()
    assert cfg.routing.enabled is True
    assert cfg.routing.cache_ttl_ms == 5000
    assert cfg.routing.timeout_s == 2.5


@pytest.mark.parametrize("name", ["ROUTING_CACHE_TTL_MS", "HTTP_TIMEOUT_S"])
def test_non_numeric_env_is_config_error(monkeypatch, name):
    monkeypatch.setenv(name, "soon")
    with pytest.raises(ConfigError, match=name):
        build_settings()


def test_overrides_win_over_env(monkeypatch):
    monkeypatch.setenv("DEFAULT_TRANSPORT", "bus")
    assert build_settings().defaults.transport == "bus"
    assert build_settings({"defaults": {"transport": "truck"}}).defaults.transport == "truck"
