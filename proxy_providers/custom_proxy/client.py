"""Custom proxy provider adapter (OpenAI-compatible over HTTP).

Summary:
- ``CustomProxyLLM``: ``generate_content`` (multimodal parts, normalised) and
  ``chat`` (provider-native messages passed through)
- ``CustomProxyStreamingLLM``: ``stream_chat`` returning an unread
  :class:`~proxy_providers.base.streaming.ChatStream`
- ``CustomProxyProvider``: facade grouping key validation and the factories

Configuration is captured by value when a client is created and never
mutated, so concurrent calls on one client share no request state. There is
no retry: every call issues exactly one HTTP request.

Errors:
- Completion calls raise :class:`~proxy_providers.base.errors.ProviderError`.
- Key validation returns a ``ValidationResult`` and never raises.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from ..base.dto import GenerationConfig, coerce_generation_config
from ..base.logging import get_logger
from ..base.models import ChatMessage, CompletionResult, GeneratedContent, ValidationResult, message_to_dict
from ..base.streaming import ChatStream
from ..base.utils.messages import build_messages
from ..config.defaults import CUSTOM_PROXY_PROVIDER_NAME
from .chat_helpers import CustomProxyChatMixin
from .helpers import CustomProxyCommonMixin
from .stream_helpers import CustomProxyStreamingMixin
from .stt import CustomProxySTTSession, create_stt
from .validation import validate_api_key

MessageLike = Union[ChatMessage, Mapping[str, Any]]


class _CustomProxyBase(CustomProxyCommonMixin):
    """Shared construction for the non-streaming and streaming clients."""

    def __init__(self, config: GenerationConfig) -> None:
        self._config = config
        self._logger = get_logger("custom_proxy")

    @property
    def provider_name(self) -> str:
        """Canonical provider slug used in logs and errors."""
        return CUSTOM_PROXY_PROVIDER_NAME

    @property
    def config(self) -> GenerationConfig:
        return self._config

    def default_model(self) -> str:
        return self._config.model


class CustomProxyLLM(CustomProxyChatMixin, _CustomProxyBase):
    """Non-streaming client.

    Parameters:
        config: Validated ``GenerationConfig``.
    """

    def generate_content(self, parts: Iterable[Any]) -> GeneratedContent:
        """Normalise input parts, request one completion.

        Parameters:
            parts: Ordered ``str``, ``TextPart``, ``InlineData`` or
                ``{"inlineData": {...}}`` items. See
                :func:`~proxy_providers.base.utils.messages.build_messages`
                for the system prompt rules.

        Returns:
            ``GeneratedContent`` whose ``response.text()`` is the completion
            text and whose ``raw`` is the decoded body.

        Raises:
            ProviderError: on invalid parts or any request failure.
        """
        messages = build_messages(parts)
        return GeneratedContent.from_result(self._complete(messages))

    def chat(self, messages: Sequence[MessageLike]) -> CompletionResult:
        """Send provider-native messages as-is and return the completion."""
        return self._complete([message_to_dict(m) for m in messages])


class CustomProxyStreamingLLM(CustomProxyStreamingMixin, _CustomProxyBase):
    """Streaming client; messages must already be provider-native."""

    def stream_chat(self, messages: Sequence[MessageLike]) -> ChatStream:
        """Open a streamed completion and return it unread.

        Raises:
            ProviderError: on a missing key, transport failure or non-2xx
                status (body text included in the message).
        """
        return self._open_stream([message_to_dict(m) for m in messages])


def create_llm(config: Any = None, **kwargs: Any) -> CustomProxyLLM:
    """Create a non-streaming client.

    Parameters:
        config: ``GenerationConfig``, mapping or ``None`` (all defaults).
        **kwargs: Field overrides; unknown names are rejected.

    Raises:
        ProviderError: ``VALIDATION`` on unknown fields or invalid values.
    """
    return CustomProxyLLM(coerce_generation_config(config, **kwargs))


def create_streaming_llm(config: Any = None, **kwargs: Any) -> CustomProxyStreamingLLM:
    """Create a streaming client; same configuration rules as :func:`create_llm`."""
    return CustomProxyStreamingLLM(coerce_generation_config(config, **kwargs))


class CustomProxyProvider:
    """Entry points of the custom proxy backend grouped under one name."""

    provider_name = CUSTOM_PROXY_PROVIDER_NAME

    @staticmethod
    def validate_api_key(
        key: Any,
        *,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
    ) -> ValidationResult:
        return validate_api_key(key, base_url=base_url, timeout_seconds=timeout_seconds)

    @staticmethod
    def create_stt(config: Any = None, **kwargs: Any) -> CustomProxySTTSession:
        return create_stt(config, **kwargs)

    @staticmethod
    def create_llm(config: Any = None, **kwargs: Any) -> CustomProxyLLM:
        return create_llm(config, **kwargs)

    @staticmethod
    def create_streaming_llm(config: Any = None, **kwargs: Any) -> CustomProxyStreamingLLM:
        return create_streaming_llm(config, **kwargs)


__all__ = [
    "CustomProxyLLM",
    "CustomProxyStreamingLLM",
    "CustomProxyProvider",
    "create_llm",
    "create_streaming_llm",
]
