from __future__ import annotations

from proxy_providers.base.timeouts import TimeoutConfig, get_timeout_config


def test_defaults():
    cfg = get_timeout_config()
    assert cfg == TimeoutConfig()
    t = cfg.for_request()
    assert t.read == 30.0
    assert t.connect == 10.0


def test_env_overrides_are_picked_up(monkeypatch):
    monkeypatch.setenv("PT_TIMEOUT_HTTP_SECONDS", "5")
    monkeypatch.setenv("PT_TIMEOUT_STREAM_SECONDS", "120")
    monkeypatch.setenv("PT_TIMEOUT_CONNECT_SECONDS", "bogus")
    cfg = get_timeout_config()
    assert cfg.http_timeout_seconds == 5.0
    assert cfg.stream_timeout_seconds == 120.0
    assert cfg.connect_timeout_seconds == 10.0


def test_per_request_override_caps_connect():
    t = TimeoutConfig().for_request(2.0)
    assert t.read == 2.0
    assert t.connect == 2.0


def test_stream_timeout_uses_stream_read_bound():
    t = TimeoutConfig(stream_timeout_seconds=45.0).for_stream(12.0)
    assert t.read == 45.0
    assert t.connect == 10.0
    assert t.write == 12.0
