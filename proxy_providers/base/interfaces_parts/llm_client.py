"""LLMClient Protocol (single-class module).

Non-streaming call surface shared by every backend adapter.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Protocol, Sequence, runtime_checkable

from ..models import CompletionResult, GeneratedContent


@runtime_checkable
class LLMClient(Protocol):
    """Single-shot generation and chat-style invocation.

    Implementations raise ``ProviderError`` on failure; there is no
    error-in-response convention.
    """

    def generate_content(self, parts: Iterable[Any]) -> GeneratedContent:
        """Normalise multimodal input parts and return one completion."""
        ...

    def chat(self, messages: Sequence[Mapping[str, Any]]) -> CompletionResult:
        """Send already provider-native messages and return one completion."""
        ...
