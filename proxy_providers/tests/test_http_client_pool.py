"""Unit tests for shared httpx client pool.

Covers:
- Same key (base_url, purpose) returns the same instance.
- Different purpose or base_url yields different instances.
- Closed clients are replaced on the next lookup.
"""
from __future__ import annotations

from proxy_providers.base.http import close_all_clients, get_httpx_client


def setup_function(_):
    close_all_clients()


def teardown_function(_):
    close_all_clients()


def test_same_key_returns_same_instance():
    c1 = get_httpx_client("https://proxy.example.com", purpose="custom_proxy.chat")
    c2 = get_httpx_client("https://proxy.example.com", purpose="custom_proxy.chat")
    assert c1 is c2, "Expected pooled client instances to be identical for same key"


def test_different_purpose_returns_different_instances():
    c1 = get_httpx_client("https://proxy.example.com", purpose="custom_proxy.chat")
    c2 = get_httpx_client("https://proxy.example.com", purpose="custom_proxy.stream")
    assert c1 is not c2, "Different purposes should not share the same client instance"


def test_different_base_url_returns_different_instances():
    c1 = get_httpx_client("https://proxy.example.com", purpose="custom_proxy.chat")
    c2 = get_httpx_client("https://proxy.other.com", purpose="custom_proxy.chat")
    assert c1 is not c2, "Different base URLs should not share the same client instance"


def test_closed_client_is_replaced():
    c1 = get_httpx_client("https://proxy.example.com", purpose="custom_proxy.validate")
    c1.close()
    c2 = get_httpx_client("https://proxy.example.com", purpose="custom_proxy.validate")
    assert c2 is not c1
    assert not c2.is_closed
    assert str(c2.base_url) == "https://proxy.example.com"
