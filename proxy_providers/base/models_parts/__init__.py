"""Models parts package public surface.

Re-exports individual models so callers can import from
`proxy_providers.base.models_parts` if needed, while `proxy_providers.base.models`
remains the primary stable import path.
"""

from .input_part import InlineData, InputPart, PartRole, TextPart, coerce_input_part
from .message import ChatMessage, MessageContent, Role, message_to_dict
from .completion_result import CompletionResult, GeneratedContent, GeneratedResponse
from .validation_result import ValidationResult

__all__ = [
    "InlineData",
    "InputPart",
    "PartRole",
    "TextPart",
    "coerce_input_part",
    "ChatMessage",
    "MessageContent",
    "Role",
    "message_to_dict",
    "CompletionResult",
    "GeneratedContent",
    "GeneratedResponse",
    "ValidationResult",
]
