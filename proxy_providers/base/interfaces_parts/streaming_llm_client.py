"""StreamingLLMClient Protocol (single-class module)."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

from ..streaming import ChatStream


@runtime_checkable
class StreamingLLMClient(Protocol):
    """Capability marker for clients returning a lazily consumed stream."""

    def stream_chat(self, messages: Sequence[Mapping[str, Any]]) -> ChatStream:
        """Open a streamed completion and return it unread."""
        ...
