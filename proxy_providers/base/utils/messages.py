"""Message normalisation helpers.

Folds an ordered sequence of input parts into the OpenAI-compatible message
list sent to ``/v1/chat/completions``. Helpers here are pure: no I/O and no
state shared between calls.

System prompt selection
-----------------------
At most one system message is produced. The first explicit
``TextPart(role="system")`` always supplies it, wherever it appears. Without
one, plain strings fall back to a wording heuristic: the first string
containing the literal, case-sensitive ``"You are"`` becomes the system
prompt. A string picked this way returns to its place in the user content
when an explicit system part follows it. The heuristic is English-only and
can misfire in both directions (a user question quoting "You are" is taken
as a system prompt; a system prompt worded differently stays in the user
message). Pass
``TextPart(..., role="user")`` to opt a string out of the heuristic.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from ..constants import SYSTEM_PROMPT_MARKER
from ..models import InlineData, TextPart, coerce_input_part


def looks_like_system_prompt(text: str) -> bool:
    """Return True when ``text`` matches the plain-string system prompt heuristic."""
    return SYSTEM_PROMPT_MARKER in text


def text_block(text: str) -> Dict[str, Any]:
    return {"type": "text", "text": text}


def image_block(part: InlineData) -> Dict[str, Any]:
    return {"type": "image_url", "image_url": {"url": part.data_uri()}}


def build_messages(parts: Iterable[Any]) -> List[Dict[str, Any]]:
    """Normalise input parts into provider-native messages.

    Parameters:
        parts: Ordered input parts (``str``, ``TextPart``, ``InlineData`` or
            coercible mappings such as ``{"inlineData": {...}}``).

    Returns:
        ``[system?, user?]`` message dicts. The user content collapses to a
        bare string when it is exactly one text block; otherwise it is the
        ordered list of blocks. Returns an empty list for empty input.

    Raises:
        ProviderError: ``VALIDATION`` for an unsupported part.
    """
    if isinstance(parts, (str, bytes)):
        parts = [parts]
    system_prompt: Optional[str] = None
    explicit = False
    # user_blocks index the heuristic pick came from, while it holds the slot
    guessed_at: Optional[int] = None
    user_blocks: List[Dict[str, Any]] = []

    for raw in parts:
        part = coerce_input_part(raw)
        if isinstance(part, InlineData):
            user_blocks.append(image_block(part))
        elif isinstance(part, TextPart):
            if part.role == "system" and not explicit:
                if guessed_at is not None:
                    user_blocks.insert(guessed_at, text_block(system_prompt))
                    guessed_at = None
                system_prompt = part.text
                explicit = True
            else:
                user_blocks.append(text_block(part.text))
        elif not explicit and not system_prompt and looks_like_system_prompt(part):
            system_prompt = part
            guessed_at = len(user_blocks)
        else:
            user_blocks.append(text_block(part))

    messages: List[Dict[str, Any]] = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    if user_blocks:
        if len(user_blocks) == 1 and user_blocks[0]["type"] == "text":
            content: Any = user_blocks[0]["text"]
        else:
            content = user_blocks
        messages.append({"role": "user", "content": content})
    return messages


__all__ = [
    "build_messages",
    "looks_like_system_prompt",
    "text_block",
    "image_block",
]
