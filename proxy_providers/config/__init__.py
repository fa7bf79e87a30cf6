"""Layered configuration for providers.

Merge order (later wins):
    1. Built-in defaults (``config.defaults``)
    2. Optional external file pointed to by ``PROVIDERS_CONFIG_FILE``
       (JSON, or YAML through PyYAML), section named after the provider
    3. Environment variables (``CUSTOM_PROXY_MODEL``, ``CUSTOM_PROXY_API_KEY`` ...)
    4. Explicit overrides passed by the caller (``None`` values ignored)

Example file::

    custom_proxy:
      model: gemini-3-pro-preview
      base_url: https://gcli2api.fuzhouxing.cn
      temperature: 0.2

Public API
----------
* ``get_provider_config(provider, overrides=None) -> dict``
* ``load_generation_config(provider="custom_proxy", **overrides) -> GenerationConfig``
* ``reset_config_cache()`` (tests)
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
import json
import os

import yaml

from .defaults import (
    CUSTOM_PROXY_DEFAULT_BASE_URL,
    CUSTOM_PROXY_DEFAULT_MAX_TOKENS,
    CUSTOM_PROXY_DEFAULT_MODEL,
    CUSTOM_PROXY_DEFAULT_TEMPERATURE,
    CUSTOM_PROXY_PROVIDER_NAME,
)
from .env import ENV_FIELD_MAP, env_var_name, resolve_provider_key

DEFAULTS: Dict[str, Dict[str, Any]] = {
    CUSTOM_PROXY_PROVIDER_NAME: {
        "model": CUSTOM_PROXY_DEFAULT_MODEL,
        "base_url": CUSTOM_PROXY_DEFAULT_BASE_URL,
        "temperature": CUSTOM_PROXY_DEFAULT_TEMPERATURE,
        "max_tokens": CUSTOM_PROXY_DEFAULT_MAX_TOKENS,
    },
}

_FILE_CACHE: Optional[Dict[str, Any]] = None


def reset_config_cache() -> None:
    """Forget the parsed external config file (re-read on next access)."""
    global _FILE_CACHE
    _FILE_CACHE = None


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv("PROVIDERS_CONFIG_FILE")
    if not path or not Path(path).is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        # YAML is a superset of JSON; parse errors propagate to the caller
        data = yaml.safe_load(text) or {}
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field in ENV_FIELD_MAP:
        if field == "api_key":
            continue
        name = env_var_name(provider, field)
        val = os.getenv(name) if name else None
        if val is not None and val != "":
            out[field] = val
    key, _ = resolve_provider_key(provider)
    if key:
        out["api_key"] = key
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged configuration mapping for a provider.

    Values from the environment are strings; type coercion happens when the
    mapping is turned into a ``GenerationConfig``.
    """
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}
    cfg |= DEFAULTS.get(name, {})
    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg
    cfg |= _env_overrides(name)
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


def load_generation_config(provider: str = CUSTOM_PROXY_PROVIDER_NAME, **overrides: Any):
    """Return a validated ``GenerationConfig`` built from all config layers.

    Raises:
        ProviderError: ``VALIDATION`` when a layer carries an unknown field or
            a value of the wrong type.
    """
    # Local import: base.dto imports config.defaults during package init
    from ..base.dto.generation_config import coerce_generation_config

    return coerce_generation_config(get_provider_config(provider, overrides))


__all__ = [
    "DEFAULTS",
    "get_provider_config",
    "load_generation_config",
    "reset_config_cache",
]
