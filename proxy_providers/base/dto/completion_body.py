"""Schema for non-streaming chat completion response bodies.

Only the fields the adapter reads are declared; everything else in the body
is tolerated and preserved in ``CompletionResult.raw``. A body that lacks
``choices[0].message.content`` as a string fails validation and surfaces as a
``MALFORMED_RESPONSE`` provider error rather than an attribute fault.
"""
from __future__ import annotations

from typing import Any, List, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import ErrorCode, ProviderError


class CompletionMessageBody(BaseModel):
    model_config = ConfigDict(extra="allow")

    role: str | None = None
    content: str


class CompletionChoiceBody(BaseModel):
    model_config = ConfigDict(extra="allow")

    index: int | None = None
    message: CompletionMessageBody
    finish_reason: str | None = None


class CompletionBody(BaseModel):
    """Decoded ``/v1/chat/completions`` body (first choice is what matters)."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    model: str | None = None
    choices: List[CompletionChoiceBody] = Field(min_length=1)

    def first_content(self) -> str:
        return self.choices[0].message.content


def parse_completion_body(data: Any, *, model: str | None = None) -> CompletionBody:
    """Validate a decoded response body.

    Parameters:
        data: Result of ``response.json()``.
        model: Model name attached to the error for context.

    Raises:
        ProviderError: ``MALFORMED_RESPONSE`` when the body is not an object or
            misses ``choices[0].message.content``.
    """
    if not isinstance(data, Mapping):
        raise ProviderError(
            code=ErrorCode.MALFORMED_RESPONSE,
            message=f"unexpected response shape: expected JSON object, got {type(data).__name__}",
            provider="custom_proxy",
            model=model,
        )
    try:
        return CompletionBody.model_validate(data)
    except ValidationError as e:
        raise ProviderError(
            code=ErrorCode.MALFORMED_RESPONSE,
            message=f"unexpected response shape: missing choices[0].message.content ({e.error_count()} issue(s))",
            provider="custom_proxy",
            model=model,
            raw=e,
        ) from e


__all__ = [
    "CompletionBody",
    "CompletionChoiceBody",
    "CompletionMessageBody",
    "parse_completion_body",
]
