"""proxy_providers package

Adapter for OpenAI-compatible chat-completion proxies behind the uniform
provider surface used by the calling application.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`ProviderError`, :class:`ErrorCode`
    - Entry points: :func:`validate_api_key`, :func:`create_stt`,
      :func:`create_llm`, :func:`create_streaming_llm`,
      :class:`CustomProxyProvider`
    - Models: :class:`GenerationConfig`, :class:`TextPart`,
      :class:`InlineData`, :class:`ChatMessage`, :class:`CompletionResult`,
      :class:`ValidationResult`, :class:`ChatStream`

Example::

    from proxy_providers import create_llm

    llm = create_llm(api_key="sk-...", max_tokens=100)
    print(llm.chat([{"role": "user", "content": "Hello"}]).content)
"""

from .base.errors import ErrorCode, ProviderError
from .base.dto import GenerationConfig, STTConfig
from .base.models import (
    ChatMessage,
    CompletionResult,
    GeneratedContent,
    InlineData,
    TextPart,
    ValidationResult,
)
from .base.streaming import ChatStream
from .custom_proxy import (
    CustomProxyLLM,
    CustomProxyProvider,
    CustomProxySTTSession,
    CustomProxyStreamingLLM,
    create_llm,
    create_streaming_llm,
    create_stt,
    validate_api_key,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Exceptions
    "ProviderError",
    "ErrorCode",
    # Entry points
    "validate_api_key",
    "create_stt",
    "create_llm",
    "create_streaming_llm",
    "CustomProxyProvider",
    # Clients
    "CustomProxyLLM",
    "CustomProxyStreamingLLM",
    "CustomProxySTTSession",
    # Models
    "GenerationConfig",
    "STTConfig",
    "ChatMessage",
    "CompletionResult",
    "GeneratedContent",
    "InlineData",
    "TextPart",
    "ValidationResult",
    "ChatStream",
]
