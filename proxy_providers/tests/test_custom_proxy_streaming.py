"""Streaming client tests: the handle is returned unread and drained lazily."""

from __future__ import annotations

from typing import Iterator, List

import httpx
import pytest

from proxy_providers import ChatStream, ErrorCode, ProviderError, create_streaming_llm
from proxy_providers.base.interfaces import StreamingLLMClient
from proxy_providers.tests.utils import events_named

SSE_LINES = [
    b'data: {"choices":[{"delta":{"content":"Hel"}}]}\n\n',
    b'data: {"choices":[{"delta":{"content":"lo"}}]}\n\n',
    b"data: [DONE]\n\n",
]


class _RecordingBody:
    """Byte iterator that remembers how many chunks were pulled."""

    def __init__(self, chunks: List[bytes]) -> None:
        self._chunks = chunks
        self.pulled = 0

    def __iter__(self) -> Iterator[bytes]:
        for chunk in self._chunks:
            self.pulled += 1
            yield chunk


def _streaming_llm():
    return create_streaming_llm(api_key="sk-test", base_url="https://proxy.example.com")


def test_stream_chat_returns_unread_handle(fake_proxy):
    body = _RecordingBody(SSE_LINES)
    fake_proxy.handler = lambda request: httpx.Response(
        200, headers={"Content-Type": "text/event-stream"}, content=body
    )
    stream = _streaming_llm().stream_chat([{"role": "user", "content": "Hello"}])
    assert isinstance(stream, ChatStream)
    assert stream.status_code == 200
    assert body.pulled == 0
    assert stream.chunks_read == 0
    stream.close()


def test_stream_lines_are_passed_through_verbatim(fake_proxy):
    fake_proxy.handler = lambda request: httpx.Response(200, content=_RecordingBody(SSE_LINES))
    with _streaming_llm().stream_chat([{"role": "user", "content": "Hello"}]) as stream:
        lines = [line for line in stream if line]
    assert lines == [
        'data: {"choices":[{"delta":{"content":"Hel"}}]}',
        'data: {"choices":[{"delta":{"content":"lo"}}]}',
        "data: [DONE]",
    ]
    assert stream.closed


def test_stream_request_sets_stream_flag(fake_proxy):
    fake_proxy.respond(200, content=b"data: [DONE]\n\n")
    messages = [{"role": "user", "content": "Hello"}]
    _streaming_llm().stream_chat(messages).close()
    req = fake_proxy.last_request
    assert str(req.url) == "https://proxy.example.com/v1/chat/completions"
    assert req.headers["Authorization"] == "Bearer sk-test"
    body = fake_proxy.last_json()
    assert body["stream"] is True
    assert body["messages"] == messages


def test_stream_error_status_includes_body(fake_proxy):
    fake_proxy.respond(429, text="slow down")
    with pytest.raises(ProviderError) as exc_info:
        _streaming_llm().stream_chat([{"role": "user", "content": "Hello"}])
    err = exc_info.value
    assert err.code is ErrorCode.RATE_LIMIT
    assert err.retryable is True
    assert err.http_status == 429
    assert "429" in str(err)
    assert "slow down" in str(err)


def test_stream_transport_failure_is_wrapped(fake_proxy):
    fake_proxy.fail_with(lambda request: httpx.ConnectError("connection refused", request=request))
    with pytest.raises(ProviderError) as exc_info:
        _streaming_llm().stream_chat([{"role": "user", "content": "Hello"}])
    assert exc_info.value.code is ErrorCode.NETWORK


def test_stream_missing_key_fails_before_io(fake_proxy):
    with pytest.raises(ProviderError) as exc_info:
        create_streaming_llm().stream_chat([{"role": "user", "content": "Hello"}])
    assert exc_info.value.code is ErrorCode.AUTH
    assert fake_proxy.requests == []


def test_close_is_idempotent_and_logged(fake_proxy, capsys):
    fake_proxy.respond(200, content=b"data: [DONE]\n\n")
    stream = _streaming_llm().stream_chat([{"role": "user", "content": "Hello"}])
    capsys.readouterr()
    stream.close()
    stream.close()
    assert stream.closed
    closes = events_named(capsys.readouterr().err, "stream.close")
    assert len(closes) == 1
    assert closes[0]["phase"] == "finalize"
    assert closes[0]["emitted"] is False


def test_iter_bytes_counts_chunks(fake_proxy):
    fake_proxy.handler = lambda request: httpx.Response(200, content=_RecordingBody(SSE_LINES))
    stream = _streaming_llm().stream_chat([{"role": "user", "content": "Hello"}])
    data = b"".join(stream.iter_bytes())
    assert data == b"".join(SSE_LINES)
    assert stream.chunks_read >= 1
    assert stream.closed


def test_streaming_client_satisfies_protocol():
    assert isinstance(_streaming_llm(), StreamingLLMClient)


class _StallingBody:
    """Byte iterator that yields one chunk and then times out."""

    def __iter__(self) -> Iterator[bytes]:
        yield SSE_LINES[0]
        raise httpx.ReadTimeout("stalled")


def test_mid_stream_transport_failure_is_wrapped_and_logged(fake_proxy, capsys):
    fake_proxy.handler = lambda request: httpx.Response(200, content=_StallingBody())
    stream = _streaming_llm().stream_chat([{"role": "user", "content": "Hello"}])
    received = []
    with pytest.raises(ProviderError) as exc_info:
        for line in stream:
            received.append(line)
    err = exc_info.value
    assert err.code is ErrorCode.TIMEOUT
    assert err.retryable is True
    assert err.provider == "custom_proxy"
    assert isinstance(err.__cause__, httpx.ReadTimeout)
    assert received[0] == 'data: {"choices":[{"delta":{"content":"Hel"}}]}'
    assert stream.closed

    logged = capsys.readouterr().err
    (error_event,) = events_named(logged, "stream.error")
    assert error_event["level"] == "ERROR"
    assert error_event["error_code"] == "timeout"
    (close_event,) = events_named(logged, "stream.close")
    assert close_event["emitted"] is False
