"""
Provider-agnostic domain models public surface.

This module re-exports the one-class-per-file implementations under
``proxy_providers.base.models_parts`` to keep a stable import path.
"""

from .models_parts.input_part import InlineData, InputPart, PartRole, TextPart, coerce_input_part
from .models_parts.message import ChatMessage, MessageContent, Role, message_to_dict
from .models_parts.completion_result import CompletionResult, GeneratedContent, GeneratedResponse
from .models_parts.validation_result import ValidationResult

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
