"""Provider interface contracts public surface.

Re-exports the one-class-per-file Protocols under
``proxy_providers.base.interfaces_parts``.
"""

from .interfaces_parts.llm_client import LLMClient
from .interfaces_parts.streaming_llm_client import StreamingLLMClient
from .interfaces_parts.stt_session import STTSession

__all__ = ["LLMClient", "StreamingLLMClient", "STTSession"]
