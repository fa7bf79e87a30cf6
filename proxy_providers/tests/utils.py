"""Shared testing helpers for the proxy provider suite.

Exports:
    - log_events(text) -> list of decoded structured log lines
    - events_named(text, name) -> the subset whose ``event`` equals ``name``
"""
from __future__ import annotations

import json
from typing import Any, Dict, List


def log_events(text: str) -> List[Dict[str, Any]]:
    """Decode every JSON log line in captured stderr.

    Lines that are not JSON objects (CLI error payloads excluded) are skipped
    so callers can pass the raw ``capsys`` buffer.
    """
    out: List[Dict[str, Any]] = []
    for line in text.splitlines():
        line = line.strip()
        if not line.startswith("{"):
            continue
        try:
            data = json.loads(line)
        except ValueError:
            continue
        if isinstance(data, dict) and "event" in data:
            out.append(data)
    return out


def events_named(text: str, name: str) -> List[Dict[str, Any]]:
    return [e for e in log_events(text) if e.get("event") == name]
