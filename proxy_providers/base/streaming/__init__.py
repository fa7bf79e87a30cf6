"""Streaming package for the provider layer.

Exposes the lazy ``ChatStream`` handle returned by streaming clients.
"""

from .chat_stream import ChatStream

__all__ = ["ChatStream"]
