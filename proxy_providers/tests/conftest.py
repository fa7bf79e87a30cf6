"""Pytest configuration for the proxy provider test suite.

Every test runs offline: the ``fake_proxy`` fixture swaps the pooled HTTP
client factory for one backed by ``httpx.MockTransport`` and records the
requests the adapter sends.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Iterator, List

import httpx
import pytest

from proxy_providers.base.http import close_all_clients
from proxy_providers.config import reset_config_cache

_ENV_VARS = (
    "CUSTOM_PROXY_API_KEY",
    "PROXY_API_KEY",
    "CUSTOM_PROXY_MODEL",
    "CUSTOM_PROXY_BASE_URL",
    "CUSTOM_PROXY_TEMPERATURE",
    "CUSTOM_PROXY_MAX_TOKENS",
    "CUSTOM_PROXY_TIMEOUT_SECONDS",
    "PROVIDERS_CONFIG_FILE",
    "PROVIDERS_LOG_LEVEL",
    "PT_TIMEOUT_HTTP_SECONDS",
    "PT_TIMEOUT_CONNECT_SECONDS",
    "PT_TIMEOUT_STREAM_SECONDS",
)


class FakeProxy:
    """Programmable stand-in for the remote proxy.

    ``handler`` receives each ``httpx.Request`` and returns an
    ``httpx.Response`` (or raises a transport exception).
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={"choices": [{"message": {"role": "assistant", "content": "ok"}}]}
        )

    def respond(self, status_code: int = 200, **kwargs: Any) -> None:
        self.handler = lambda request: httpx.Response(status_code, **kwargs)

    def fail_with(self, exc_factory: Callable[[httpx.Request], Exception]) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc_factory(request)

        self.handler = _raise

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture(autouse=True)
def clean_provider_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from ambient provider configuration."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()
    close_all_clients()


@pytest.fixture()
def fake_proxy(monkeypatch: pytest.MonkeyPatch) -> Iterator[FakeProxy]:
    """Route every adapter HTTP call to a ``FakeProxy`` instance."""
    proxy = FakeProxy()
    clients: List[httpx.Client] = []

    def _client(base_url, purpose):
        client = httpx.Client(transport=httpx.MockTransport(proxy), base_url=base_url or "")
        clients.append(client)
        return client

    monkeypatch.setattr("proxy_providers.custom_proxy.helpers.get_httpx_client", _client)
    monkeypatch.setattr("proxy_providers.custom_proxy.validation.get_httpx_client", _client)
    yield proxy
    for client in clients:
        client.close()
