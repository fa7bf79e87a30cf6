"""proxy_providers.config.defaults
===============================

Central place for small, stable default values used across the package and
the developer CLI. These defaults can be overridden via environment variables,
an external configuration file, or explicit arguments.

Only plain constants live here; the module imports nothing from the package.
"""

from __future__ import annotations

# ---- Provider identity ----
CUSTOM_PROXY_PROVIDER_NAME = "custom_proxy"

# ---- Custom proxy defaults ----
CUSTOM_PROXY_DEFAULT_BASE_URL = "https://gcli2api.fuzhouxing.cn"
CUSTOM_PROXY_DEFAULT_MODEL = "gemini-3-pro-preview"
CUSTOM_PROXY_DEFAULT_TEMPERATURE = 0.7
CUSTOM_PROXY_DEFAULT_MAX_TOKENS = 4096

# ---- Speech input ----
STT_DEFAULT_LANGUAGE = "en"

# ---- CLI defaults ----
# Prompt used by the smoke subcommand when none is given.
PROVIDER_CLI_SMOKE_DEFAULT_PROMPT = "Introduce yourself in one sentence."
# The smoke run keeps the completion short.
PROVIDER_CLI_SMOKE_MAX_TOKENS = 100


__all__ = [
    "CUSTOM_PROXY_PROVIDER_NAME",
    "CUSTOM_PROXY_DEFAULT_BASE_URL",
    "CUSTOM_PROXY_DEFAULT_MODEL",
    "CUSTOM_PROXY_DEFAULT_TEMPERATURE",
    "CUSTOM_PROXY_DEFAULT_MAX_TOKENS",
    "STT_DEFAULT_LANGUAGE",
    "PROVIDER_CLI_SMOKE_DEFAULT_PROMPT",
    "PROVIDER_CLI_SMOKE_MAX_TOKENS",
]
