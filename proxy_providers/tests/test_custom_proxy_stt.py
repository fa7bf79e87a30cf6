"""Speech-input placeholder session tests."""

from __future__ import annotations

import pytest

from proxy_providers import CustomProxyProvider, ErrorCode, ProviderError, STTConfig, create_stt
from proxy_providers.base.interfaces import STTSession
from proxy_providers.tests.utils import events_named


def test_create_stt_warns_and_returns_open_session(capsys):
    session = create_stt(api_key="sk-test", language="de")
    assert isinstance(session, STTSession)
    assert session.closed is False
    assert session.config.language == "de"
    (warning,) = events_named(capsys.readouterr().err, "stt.unsupported")
    assert warning["level"] == "WARNING"


def test_send_and_close_never_touch_the_network(fake_proxy):
    session = create_stt()
    session.send_realtime_input(b"\x00\x01")
    session.close()
    session.send_realtime_input(b"\x02")
    session.close()
    assert session.closed is True
    assert fake_proxy.requests == []


def test_callbacks_are_kept_but_never_invoked():
    calls = []
    session = CustomProxyProvider.create_stt({"callbacks": {"on_transcript": calls.append}})
    with session:
        session.send_realtime_input(b"pcm")
    assert session.closed
    assert calls == []
    assert "on_transcript" in session.config.callbacks


def test_unknown_stt_option_is_rejected():
    with pytest.raises(ProviderError) as exc_info:
        create_stt(sample_rate=16000)
    assert exc_info.value.code is ErrorCode.VALIDATION


def test_stt_config_defaults():
    assert STTConfig().language == "en"
    assert STTConfig().callbacks == {}
