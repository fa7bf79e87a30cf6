"""proxy_providers.config.env
==========================

Environment variable names and small lookup helpers for provider settings.

Conventions
-----------
``<PROVIDER>_<FIELD>`` where the provider slug is upper-cased, e.g.
``CUSTOM_PROXY_API_KEY`` or ``CUSTOM_PROXY_BASE_URL``. ``ENV_ALIASES`` lists
extra accepted names for the API key, canonical name first.

Failure Modes
-------------
Helpers never raise on unknown providers or unset variables; they return
``None`` and let callers decide how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

# Config field -> env var suffix
ENV_FIELD_MAP: Dict[str, str] = {
    "api_key": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "model": "MODEL",
    "base_url": "BASE_URL",
    "temperature": "TEMPERATURE",
    "max_tokens": "MAX_TOKENS",
    "timeout_seconds": "TIMEOUT_SECONDS",
}

# Provider -> ordered tuple of acceptable API key env var names (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "custom_proxy": ("CUSTOM_PROXY_API_KEY", "PROXY_API_KEY"),
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder value.

    Heuristics: contains 'placeholder', 'changeme' or 'your-key', or
    starts with 'test_'. Case-insensitive.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "your-key" in v or v.startswith("test_")


def env_var_name(provider: str, field: str) -> Optional[str]:
    """Return the env var name for ``field`` of ``provider`` (None if unknown field)."""
    suffix = ENV_FIELD_MAP.get(field)
    if not suffix or not provider:
        return None
    return f"{provider.strip().upper()}_{suffix}"


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield acceptable API key environment variable names, canonical first."""
    p = (provider or "").lower().strip()
    canonical = env_var_name(p, "api_key")
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve an API key from the process environment.

    Returns:
        ``(value, env_var_used)`` for the first non-empty, non-placeholder
        candidate, or ``(None, None)``.
    """
    for name in get_env_var_candidates(provider):
        val = os.environ.get(name)
        if val and not is_placeholder(val):
            return val, name
    return None, None


__all__ = [
    "ENV_FIELD_MAP",
    "ENV_ALIASES",
    "is_placeholder",
    "env_var_name",
    "get_env_var_candidates",
    "resolve_provider_key",
]
