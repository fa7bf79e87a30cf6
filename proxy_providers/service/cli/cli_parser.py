"""CLI parser construction for proxy-providers.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions`` to keep files small and testable.
"""

from __future__ import annotations

import argparse

from ...config.defaults import PROVIDER_CLI_SMOKE_DEFAULT_PROMPT

SUBCOMMANDS = ("validate", "chat", "stream", "smoke")


def add_connection_flags(parser: argparse.ArgumentParser) -> None:
    """Attach the configuration override flags shared by every subcommand.

    Omitted flags stay ``None`` so the layered config (defaults, config
    file, environment) decides.
    """
    parser.add_argument("--api-key", default=None, help="Bearer token (default: CUSTOM_PROXY_API_KEY)")
    parser.add_argument("--base-url", default=None)
    parser.add_argument("--model", default=None)
    parser.add_argument("--temperature", type=float, default=None)
    parser.add_argument("--max-tokens", type=int, default=None)
    parser.add_argument("--timeout", dest="timeout_seconds", type=float, default=None)
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR or CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Parser with ``validate``, ``chat``, ``stream`` and ``smoke``
        subcommands. No I/O happens here.
    """
    p = argparse.ArgumentParser(
        prog="proxy-providers", description="Custom proxy debugging CLI"
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    p_validate = sub.add_parser("validate", help="Check an API key against the proxy")
    add_connection_flags(p_validate)

    p_chat = sub.add_parser("chat", help="Send one prompt and print the completion")
    add_connection_flags(p_chat)
    p_chat.add_argument("--prompt", required=True)
    p_chat.add_argument("--system", default=None, help="Optional system message")
    p_chat.add_argument("--json", action="store_true", help="Print the raw response body")

    p_stream = sub.add_parser("stream", help="Send one prompt and print raw stream lines")
    add_connection_flags(p_stream)
    p_stream.add_argument("--prompt", required=True)
    p_stream.add_argument("--system", default=None, help="Optional system message")

    p_smoke = sub.add_parser("smoke", help="Validate the key, then run one chat call")
    add_connection_flags(p_smoke)
    p_smoke.add_argument("--prompt", default=PROVIDER_CLI_SMOKE_DEFAULT_PROMPT)
    p_smoke.add_argument("--json", action="store_true", help="Print a JSON summary")

    return p


__all__ = ["build_parser", "add_connection_flags", "SUBCOMMANDS"]
