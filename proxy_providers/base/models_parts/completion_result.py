"""
Completion result models.

``CompletionResult`` is returned by ``chat``; ``GeneratedContent`` wraps the
same data for ``generate_content`` callers that expect a
``result.response.text()`` accessor.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class CompletionResult:
    """Outcome of one non-streaming completion.

    Attributes:
        content: Text of the first choice's message.
        raw: Full decoded response body.
    """

    content: str
    raw: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class GeneratedResponse:
    """Text accessor wrapper used by :class:`GeneratedContent`."""

    _text: str

    def text(self) -> str:
        return self._text


@dataclass(frozen=True)
class GeneratedContent:
    """Outcome of ``generate_content``.

    Attributes:
        response: Object whose ``text()`` returns the completion content.
        raw: Full decoded response body.
    """

    response: GeneratedResponse
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_result(cls, result: CompletionResult) -> "GeneratedContent":
        return cls(response=GeneratedResponse(result.content), raw=result.raw)


__all__ = [
    "CompletionResult",
    "GeneratedResponse",
    "GeneratedContent",
]
