"""Custom proxy (OpenAI-compatible) provider package."""

from .client import (
    CustomProxyLLM,
    CustomProxyProvider,
    CustomProxyStreamingLLM,
    create_llm,
    create_streaming_llm,
)
from .stt import CustomProxySTTSession, create_stt
from .validation import validate_api_key

__all__ = [
    "CustomProxyLLM",
    "CustomProxyProvider",
    "CustomProxySTTSession",
    "CustomProxyStreamingLLM",
    "create_llm",
    "create_streaming_llm",
    "create_stt",
    "validate_api_key",
]
