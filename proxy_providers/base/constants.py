"""Shared constants for the proxy adapter.

Generic sentinel strings only; no credentials are embedded.

# pragma: allowlist secret
"""
from __future__ import annotations

# Missing credential sentinel
MISSING_API_KEY_ERROR = "missing_api_key"  # pragma: allowlist secret - generic placeholder string

# Key validation outcome messages
INVALID_KEY_FORMAT_ERROR = "invalid API key format"
AUTH_FAILED_ERROR = "API key authentication failed"
VALIDATION_NETWORK_ERROR = "network error, cannot validate API key"

# Substring marking a plain-text input part as a system prompt (case-sensitive).
SYSTEM_PROMPT_MARKER = "You are"

# Prefix of the message carried by upstream request failures.
UPSTREAM_ERROR_PREFIX = "custom proxy API error"

# Upper bound on how much of an error body is embedded in exception messages.
ERROR_BODY_EXCERPT_CHARS = 2000

__all__ = [
    "MISSING_API_KEY_ERROR",
    "INVALID_KEY_FORMAT_ERROR",
    "AUTH_FAILED_ERROR",
    "VALIDATION_NETWORK_ERROR",
    "SYSTEM_PROMPT_MARKER",
    "UPSTREAM_ERROR_PREFIX",
    "ERROR_BODY_EXCERPT_CHARS",
]
