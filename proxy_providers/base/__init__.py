"""
Providers Base Package

Exports the provider-agnostic pieces the proxy adapter is built on:

- Models: input parts, chat messages, completion and validation results
- DTOs: validated configuration and response-body schemas
- Errors: normalized ``ProviderError`` taxonomy
- Timeouts: per-request ``httpx`` timeout policy
"""

from .errors import ErrorCode, ProviderError, classify_exception
from .models import (
    ChatMessage,
    CompletionResult,
    GeneratedContent,
    InlineData,
    InputPart,
    Role,
    TextPart,
    ValidationResult,
)
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    # Errors
    "ErrorCode",
    "ProviderError",
    "classify_exception",
    # Models
    "ChatMessage",
    "CompletionResult",
    "GeneratedContent",
    "InlineData",
    "InputPart",
    "Role",
    "TextPart",
    "ValidationResult",
    # Timeouts
    "TimeoutConfig",
    "get_timeout_config",
]
