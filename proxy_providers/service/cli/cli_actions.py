"""CLI action handlers.

Purpose
-------
Subcommand handlers for the proxy CLI, keeping the entrypoint thin. This
module has no top-level side effects and is safe to import in tests.

Exit codes
----------
- ``0``: success
- ``1``: the remote call failed (validation rejected, ``ProviderError``)
- ``2``: local misconfiguration (missing API key, invalid option values)

Errors are printed as one JSON object on stderr; results go to stdout.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from ...base.dto import GenerationConfig
from ...base.errors import ProviderError
from ...base.logging import configure_logger
from ...config import load_generation_config
from ...config.defaults import CUSTOM_PROXY_PROVIDER_NAME, PROVIDER_CLI_SMOKE_MAX_TOKENS
from ...config.env import get_env_var_candidates
from ...custom_proxy import create_llm, create_streaming_llm, validate_api_key


def _print_err(payload: Dict[str, Any]) -> None:
    print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)


def _error_payload(err: ProviderError) -> Dict[str, Any]:
    return {
        "error": err.message,
        "code": err.code.value,
        "http_status": err.http_status,
        "provider": err.provider,
    }


def _overrides(args: argparse.Namespace, **extra: Any) -> Dict[str, Any]:
    out = {
        "api_key": args.api_key,
        "base_url": args.base_url,
        "model": args.model,
        "temperature": args.temperature,
        "max_tokens": args.max_tokens,
        "timeout_seconds": args.timeout_seconds,
    }
    out.update(extra)
    return out


def resolve_config(args: argparse.Namespace, **extra: Any) -> Optional[GenerationConfig]:
    """Build the call configuration, printing guidance when it is unusable.

    Returns:
        The validated config, or ``None`` after printing a JSON error (missing
        key or invalid option values).
    """
    if args.log_level:
        configure_logger(level=args.log_level)
    try:
        cfg = load_generation_config(CUSTOM_PROXY_PROVIDER_NAME, **_overrides(args, **extra))
    except ProviderError as e:
        _print_err(_error_payload(e))
        return None
    if not cfg.api_key:
        _print_err(
            {
                "error": "missing API key",
                "set_one_of_env": list(get_env_var_candidates(CUSTOM_PROXY_PROVIDER_NAME)),
                "or_flag": "--api-key",
            }
        )
        return None
    return cfg


def _messages(prompt: str, system: Optional[str]) -> List[Dict[str, Any]]:
    messages: List[Dict[str, Any]] = []
    if system:
        messages.append({"role": "system", "content": system})
    messages.append({"role": "user", "content": prompt})
    return messages


def handle_validate(args: argparse.Namespace) -> int:
    """Check the proxy with the configured key and print the result as JSON."""
    cfg = resolve_config(args)
    if cfg is None:
        return 2
    result = validate_api_key(cfg.api_key, base_url=cfg.base_url, timeout_seconds=cfg.timeout_seconds)
    print(json.dumps(result.to_dict(), ensure_ascii=False))
    return 0 if result.success else 1


def handle_chat(args: argparse.Namespace) -> int:
    """Send one prompt and print the completion text (or raw body with --json)."""
    cfg = resolve_config(args)
    if cfg is None:
        return 2
    try:
        result = create_llm(cfg).chat(_messages(args.prompt, args.system))
    except ProviderError as e:
        _print_err(_error_payload(e))
        return 1
    if args.json:
        print(json.dumps(result.raw, ensure_ascii=False))
    else:
        print(result.content)
    return 0


def handle_stream(args: argparse.Namespace) -> int:
    """Send one prompt with streaming and echo raw lines as they arrive."""
    cfg = resolve_config(args)
    if cfg is None:
        return 2
    try:
        with create_streaming_llm(cfg).stream_chat(_messages(args.prompt, args.system)) as stream:
            for line in stream:
                if line:
                    print(line, flush=True)
    except ProviderError as e:
        _print_err(_error_payload(e))
        return 1
    return 0


def handle_smoke(args: argparse.Namespace) -> int:
    """Validate the key, then run a short chat call; stop at the first failure.

    Prints one status line per step (or a JSON summary with ``--json``).
    Returns ``0`` only when both steps succeed.
    """
    max_tokens = args.max_tokens if args.max_tokens is not None else PROVIDER_CLI_SMOKE_MAX_TOKENS
    cfg = resolve_config(args, max_tokens=max_tokens)
    if cfg is None:
        return 2

    steps: List[Dict[str, Any]] = []
    validation = validate_api_key(cfg.api_key, base_url=cfg.base_url, timeout_seconds=cfg.timeout_seconds)
    steps.append({"step": "validate", "ok": validation.success, "error": validation.error})
    if validation.success:
        try:
            result = create_llm(cfg).chat([{"role": "user", "content": args.prompt}])
            steps.append({"step": "chat", "ok": True, "error": None, "content": result.content})
        except ProviderError as e:
            steps.append({"step": "chat", "ok": False, "error": e.message})

    if args.json:
        print(json.dumps({"provider": CUSTOM_PROXY_PROVIDER_NAME, "model": cfg.model, "steps": steps}, ensure_ascii=False))
    else:
        for s in steps:
            status = "ok" if s["ok"] else f"fail: {s['error']}"
            print(f"[{s['step']}] {status}")
            if s.get("content"):
                print(s["content"])
    return 0 if len(steps) == 2 and all(s["ok"] for s in steps) else 1


__all__ = [
    "resolve_config",
    "handle_validate",
    "handle_chat",
    "handle_stream",
    "handle_smoke",
]
