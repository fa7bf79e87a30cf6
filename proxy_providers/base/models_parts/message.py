"""
Provider-native chat message model.

``ChatMessage`` mirrors the OpenAI-compatible ``{"role", "content"}`` shape.
Content is either a plain string or a list of typed content blocks
(``{"type": "text", ...}`` / ``{"type": "image_url", ...}``).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Mapping, Union

from ..errors import ErrorCode, ProviderError


Role = Literal["system", "user", "assistant", "tool"]
MessageContent = Union[str, List[Dict[str, Any]]]


@dataclass(frozen=True)
class ChatMessage:
    """A chat message in provider-native shape.

    Attributes:
        role: Author role (``"system"``, ``"user"``, ``"assistant"``, ``"tool"``).
        content: A plain string or an ordered list of content blocks.
    """

    role: Role
    content: MessageContent

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON body representation of the message."""
        return {"role": self.role, "content": self.content}


def message_to_dict(message: Union[ChatMessage, Mapping[str, Any]]) -> Dict[str, Any]:
    """Convert a ``ChatMessage`` or role/content mapping into a request dict.

    Mappings are copied as-is (extra keys such as ``name`` are preserved);
    only the presence of ``role`` and ``content`` is checked.

    Raises:
        ProviderError: ``VALIDATION`` when the item is neither shape.
    """
    if isinstance(message, ChatMessage):
        return message.to_dict()
    if isinstance(message, Mapping) and "role" in message and "content" in message:
        return dict(message)
    raise ProviderError(
        code=ErrorCode.VALIDATION,
        message="chat messages must be ChatMessage objects or mappings with 'role' and 'content'",
        provider="custom_proxy",
    )


__all__ = [
    "ChatMessage",
    "Role",
    "MessageContent",
    "message_to_dict",
]
