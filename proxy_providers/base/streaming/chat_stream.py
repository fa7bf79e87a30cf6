"""Lazy handle over an open streaming chat response.

``ChatStream`` wraps an ``httpx.Response`` that was opened with
``stream=True`` and has not been read. Nothing is decoded until the caller
iterates. The adapter does not interpret the server-sent-events framing:
lines such as ``data: {...}`` and ``data: [DONE]`` are yielded verbatim, and
extracting deltas is the caller's job.

The handle is single-pass. Exhausting any iterator, calling :meth:`close`,
or leaving a ``with`` block releases the connection back to the pool. A
transport failure while reading is logged as ``stream.error`` and re-raised as
a ``ProviderError`` (``network`` or ``timeout``) chained to the httpx error.
"""
from __future__ import annotations

import logging
from typing import Iterator, Optional

import httpx

from ..errors import transport_error
from ..logging import LogContext, normalized_log_event


class ChatStream:
    """Iterable view of a streamed ``/v1/chat/completions`` response.

    Parameters:
        response: Unread ``httpx.Response`` with a 2xx status.
        logger: Optional logger used for the close event.
        ctx: Optional log context attached to the close event.

    Iteration yields decoded text lines (``iter_lines``). ``iter_text`` and
    ``iter_bytes`` expose the same body at other granularities; only one of
    them may be used per stream.
    """

    def __init__(
        self,
        response: httpx.Response,
        *,
        logger: Optional[logging.Logger] = None,
        ctx: Optional[LogContext] = None,
    ) -> None:
        self._response = response
        self._logger = logger
        self._ctx = ctx
        self._chunks = 0
        self._closed = False
        self._failed = False

    @property
    def response(self) -> httpx.Response:
        """The underlying ``httpx.Response`` (unread until iterated)."""
        return self._response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def chunks_read(self) -> int:
        """Number of lines or chunks handed to the caller so far."""
        return self._chunks

    def _drain(self, source: Iterator) -> Iterator:
        try:
            for item in source:
                self._chunks += 1
                yield item
        except httpx.HTTPError as e:
            self._failed = True
            err = transport_error(
                e,
                provider=(self._ctx.provider if self._ctx else None) or "unknown",
                model=self._ctx.model if self._ctx else None,
            )
            if self._logger is not None:
                normalized_log_event(
                    self._logger,
                    "stream.error",
                    self._ctx,
                    phase="stream",
                    emitted=False,
                    error_code=err.code.value,
                    error=err.message,
                    chunks=self._chunks,
                    level=logging.ERROR,
                )
            raise err from e
        finally:
            self.close()

    def iter_lines(self) -> Iterator[str]:
        """Yield decoded body lines without their line terminators."""
        return self._drain(self._response.iter_lines())

    def iter_text(self) -> Iterator[str]:
        """Yield decoded text chunks as they arrive."""
        return self._drain(self._response.iter_text())

    def iter_bytes(self) -> Iterator[bytes]:
        """Yield raw body bytes as they arrive."""
        return self._drain(self._response.iter_bytes())

    def __iter__(self) -> Iterator[str]:
        return self.iter_lines()

    def close(self) -> None:
        """Close the response; safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._response.close()
        if self._logger is not None:
            normalized_log_event(
                self._logger,
                "stream.close",
                self._ctx,
                phase="finalize",
                emitted=self._chunks > 0 and not self._failed,
                chunks=self._chunks,
            )

    def __enter__(self) -> "ChatStream":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        state = "closed" if self._closed else "open"
        return f"<ChatStream status={self.status_code} {state}>"


__all__ = ["ChatStream"]
