"""Proxy debugging CLI (package entrypoint).

Wires argument parsing to the action handlers in ``cli_actions``; performs no
provider logic directly.

Public API re-exports:
- ``main``: CLI entrypoint callable
"""

from __future__ import annotations

import sys
from typing import Optional

from .cli_actions import handle_chat, handle_smoke, handle_stream, handle_validate
from .cli_parser import build_parser

_HANDLERS = {
    "validate": handle_validate,
    "chat": handle_chat,
    "stream": handle_stream,
    "smoke": handle_smoke,
}


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code (0 success, 1 remote failure, 2 usage or config error).
    """
    p = build_parser()
    try:
        args = p.parse_args(list(sys.argv[1:] if argv is None else argv))
    except SystemExit as e:
        # argparse exits on usage errors and --help; report the code instead
        return int(e.code or 0)
    return _HANDLERS[args.cmd](args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
