"""Interfaces (Protocols) split into single-class modules.

``proxy_providers.base.interfaces`` re-exports these as the stable API.
"""

from .llm_client import LLMClient
from .streaming_llm_client import StreamingLLMClient
from .stt_session import STTSession

__all__ = ["LLMClient", "StreamingLLMClient", "STTSession"]
