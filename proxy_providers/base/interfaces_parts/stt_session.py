"""STTSession Protocol (single-class module).

Shape of a real-time speech-to-text session as the calling application
expects it from every backend.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class STTSession(Protocol):
    """Minimal real-time speech input session."""

    def send_realtime_input(self, audio_chunk: Any) -> None:
        """Feed one chunk of audio to the session."""
        ...

    def close(self) -> None:
        """Terminate the session; must be idempotent."""
        ...
