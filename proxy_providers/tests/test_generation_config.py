"""Configuration model and layered loading tests."""

from __future__ import annotations

import json

import pytest

from proxy_providers import ErrorCode, GenerationConfig, ProviderError
from proxy_providers.base.dto import coerce_generation_config
from proxy_providers.config import get_provider_config, load_generation_config, reset_config_cache
from proxy_providers.config.defaults import (
    CUSTOM_PROXY_DEFAULT_BASE_URL,
    CUSTOM_PROXY_DEFAULT_MAX_TOKENS,
    CUSTOM_PROXY_DEFAULT_MODEL,
    CUSTOM_PROXY_DEFAULT_TEMPERATURE,
)
from proxy_providers.config.env import get_env_var_candidates, is_placeholder, resolve_provider_key


def test_defaults():
    cfg = GenerationConfig()
    assert cfg.api_key is None
    assert cfg.model == CUSTOM_PROXY_DEFAULT_MODEL == "gemini-3-pro-preview"
    assert cfg.temperature == CUSTOM_PROXY_DEFAULT_TEMPERATURE == 0.7
    assert cfg.max_tokens == CUSTOM_PROXY_DEFAULT_MAX_TOKENS == 4096
    assert cfg.base_url == CUSTOM_PROXY_DEFAULT_BASE_URL
    assert cfg.timeout_seconds is None


def test_base_url_is_normalised():
    cfg = GenerationConfig(base_url="http://localhost:8080/ ")
    assert cfg.base_url == "http://localhost:8080"


@pytest.mark.parametrize(
    "overrides",
    [
        {"temperature": -0.1},
        {"temperature": 2.5},
        {"max_tokens": 0},
        {"base_url": "ftp://proxy"},
        {"model": "  "},
        {"timeout_seconds": 0},
        {"maxTokens": 10},
        {"baseURL": "https://x"},
        {"base_url": "http://[::1"},
        {"api_key": "ключ"},
    ],
)
def test_invalid_values_raise_validation(overrides):
    with pytest.raises(ProviderError) as exc_info:
        coerce_generation_config(**overrides)
    assert exc_info.value.code is ErrorCode.VALIDATION


def test_config_is_immutable():
    cfg = GenerationConfig(api_key="k")
    with pytest.raises(Exception):
        cfg.model = "other"  # type: ignore[misc]


def test_keyword_overrides_win_over_config_object():
    base = GenerationConfig(api_key="k", model="m1", max_tokens=10)
    cfg = coerce_generation_config(base, model="m2")
    assert cfg.model == "m2"
    assert cfg.max_tokens == 10
    assert cfg.api_key == "k"


def test_mapping_and_wrong_types():
    assert coerce_generation_config({"api_key": "k"}).api_key == "k"
    with pytest.raises(ProviderError):
        coerce_generation_config(["not", "a", "mapping"])


def test_env_layer_overrides_defaults(monkeypatch):
    monkeypatch.setenv("CUSTOM_PROXY_API_KEY", "env-key")
    monkeypatch.setenv("CUSTOM_PROXY_MODEL", "env-model")
    monkeypatch.setenv("CUSTOM_PROXY_MAX_TOKENS", "512")
    monkeypatch.setenv("CUSTOM_PROXY_BASE_URL", "https://env.example.com/")
    cfg = load_generation_config()
    assert cfg.api_key == "env-key"
    assert cfg.model == "env-model"
    assert cfg.max_tokens == 512
    assert cfg.base_url == "https://env.example.com"


def test_explicit_overrides_beat_env_and_none_is_ignored(monkeypatch):
    monkeypatch.setenv("CUSTOM_PROXY_MODEL", "env-model")
    cfg = load_generation_config(model="flag-model", temperature=None)
    assert cfg.model == "flag-model"
    assert cfg.temperature == CUSTOM_PROXY_DEFAULT_TEMPERATURE


def test_key_aliases_and_placeholders(monkeypatch):
    assert list(get_env_var_candidates("custom_proxy")) == ["CUSTOM_PROXY_API_KEY", "PROXY_API_KEY"]
    monkeypatch.setenv("CUSTOM_PROXY_API_KEY", "your-key-here")
    monkeypatch.setenv("PROXY_API_KEY", "alias-key")
    assert resolve_provider_key("custom_proxy") == ("alias-key", "PROXY_API_KEY")
    assert is_placeholder("ChangeMe")
    assert not is_placeholder("sk-real")


def test_json_config_file_layer(monkeypatch, tmp_path):
    path = tmp_path / "providers.json"
    path.write_text(json.dumps({"custom_proxy": {"model": "file-model", "temperature": 0.2}}), encoding="utf-8")
    monkeypatch.setenv("PROVIDERS_CONFIG_FILE", str(path))
    reset_config_cache()
    cfg = get_provider_config("custom_proxy")
    assert cfg["model"] == "file-model"
    assert cfg["temperature"] == 0.2
    assert cfg["max_tokens"] == CUSTOM_PROXY_DEFAULT_MAX_TOKENS


def test_yaml_config_file_layer_is_below_env(monkeypatch, tmp_path):
    path = tmp_path / "providers.yaml"
    path.write_text("custom_proxy:\n  model: yaml-model\n  max_tokens: 64\n", encoding="utf-8")
    monkeypatch.setenv("PROVIDERS_CONFIG_FILE", str(path))
    monkeypatch.setenv("CUSTOM_PROXY_MODEL", "env-model")
    reset_config_cache()
    cfg = load_generation_config()
    assert cfg.model == "env-model"
    assert cfg.max_tokens == 64


def test_unknown_field_in_config_file_is_rejected(monkeypatch, tmp_path):
    path = tmp_path / "providers.yaml"
    path.write_text("custom_proxy:\n  stream: true\n", encoding="utf-8")
    monkeypatch.setenv("PROVIDERS_CONFIG_FILE", str(path))
    reset_config_cache()
    with pytest.raises(ProviderError) as exc_info:
        load_generation_config()
    assert exc_info.value.code is ErrorCode.VALIDATION


def test_rejected_key_is_not_echoed_in_the_error():
    with pytest.raises(ProviderError) as exc_info:
        coerce_generation_config(api_key="sk-секрет")
    assert "секрет" not in exc_info.value.message
