"""
Input part models for multimodal prompts.

A prompt handed to ``generate_content`` is an ordered sequence of parts. Each
part is a plain ``str``, an explicitly tagged :class:`TextPart`, or an
:class:`InlineData` image payload. Mapping shapes produced by other provider
SDKs (``{"inlineData": {"mimeType": ..., "data": ...}}``) are coerced by
:func:`coerce_input_part`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping, Union

from ..errors import ErrorCode, ProviderError

PartRole = Literal["system", "user"]


@dataclass(frozen=True)
class TextPart:
    """A text fragment with an explicit role tag.

    Attributes:
        text: The text content.
        role: ``"system"`` to mark the fragment as the system prompt, or
            ``"user"`` to force it into the user message even when it looks
            like a system prompt.
    """

    text: str
    role: PartRole = "user"


@dataclass(frozen=True)
class InlineData:
    """Embedded binary media (an image) carried as base64 text.

    Attributes:
        mime_type: Media type such as ``"image/png"``.
        data: Base64-encoded payload (not re-validated here).
    """

    mime_type: str
    data: str

    def data_uri(self) -> str:
        """Return the ``data:`` URI form used by OpenAI-style image blocks."""
        return f"data:{self.mime_type};base64,{self.data}"


InputPart = Union[str, TextPart, InlineData]


def _inline_from_mapping(payload: Mapping[str, Any]) -> InlineData:
    mime = payload.get("mimeType", payload.get("mime_type"))
    data = payload.get("data")
    if not isinstance(mime, str) or not isinstance(data, str):
        raise ProviderError(
            code=ErrorCode.VALIDATION,
            message="inline data requires string 'mimeType' and 'data' fields",
            provider="custom_proxy",
        )
    return InlineData(mime_type=mime, data=data)


def coerce_input_part(part: Any) -> InputPart:
    """Return ``part`` as one of the supported input part types.

    Accepted shapes:
        - ``str``, :class:`TextPart`, :class:`InlineData` (returned unchanged)
        - ``{"inlineData": {...}}`` / ``{"inline_data": {...}}`` mappings
        - ``{"text": ..., "role": ...}`` mappings

    Raises:
        ProviderError: ``VALIDATION`` for any other shape.
    """
    if isinstance(part, (str, TextPart, InlineData)):
        return part
    if isinstance(part, Mapping):
        inline = part.get("inlineData", part.get("inline_data"))
        if isinstance(inline, Mapping):
            return _inline_from_mapping(inline)
        text = part.get("text")
        if isinstance(text, str):
            role = part.get("role", "user")
            if role not in ("system", "user"):
                raise ProviderError(
                    code=ErrorCode.VALIDATION,
                    message=f"unsupported text part role: {role!r}",
                    provider="custom_proxy",
                )
            return TextPart(text=text, role=role)
    raise ProviderError(
        code=ErrorCode.VALIDATION,
        message=f"unsupported input part type: {type(part).__name__}",
        provider="custom_proxy",
    )


__all__ = [
    "PartRole",
    "TextPart",
    "InlineData",
    "InputPart",
    "coerce_input_part",
]
