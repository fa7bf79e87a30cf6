"""
Key validation result model.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of an API key validation request.

    Attributes:
        success: ``True`` when the key is considered usable.
        error: Human-readable reason when ``success`` is ``False``.
    """

    success: bool
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.success

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["ValidationResult"]
