"""Validated configuration and response-body DTOs."""

from .generation_config import GenerationConfig, STTConfig, coerce_generation_config, coerce_stt_config
from .completion_body import CompletionBody, parse_completion_body

__all__ = [
    "GenerationConfig",
    "STTConfig",
    "coerce_generation_config",
    "coerce_stt_config",
    "CompletionBody",
    "parse_completion_body",
]
