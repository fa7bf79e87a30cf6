"""Key validation: input checks and models-route status classification."""

from __future__ import annotations

import httpx
import pytest

from proxy_providers import CustomProxyProvider, validate_api_key
from proxy_providers.base.constants import AUTH_FAILED_ERROR, INVALID_KEY_FORMAT_ERROR, VALIDATION_NETWORK_ERROR
from proxy_providers.tests.utils import events_named


@pytest.mark.parametrize("bad_key", [None, "", 123, b"bytes-key", ["k"], "ключ-123", "sk-\u00e9t\u00e9"])
def test_malformed_key_fails_without_network(fake_proxy, bad_key):
    result = validate_api_key(bad_key)
    assert result.success is False
    assert result.error == INVALID_KEY_FORMAT_ERROR
    assert fake_proxy.requests == []


@pytest.mark.parametrize("status", [401, 403])
def test_auth_statuses_fail(fake_proxy, status):
    fake_proxy.respond(status, text="denied")
    result = validate_api_key("sk-test")
    assert result.success is False
    assert result.error == AUTH_FAILED_ERROR


@pytest.mark.parametrize("status", [200, 204, 404])
def test_ok_and_not_found_succeed(fake_proxy, status):
    fake_proxy.respond(status)
    result = validate_api_key("sk-test")
    assert result.success is True
    assert result.error is None


@pytest.mark.parametrize("status", [301, 400, 429, 500, 502, 503])
def test_other_statuses_are_permissively_valid(fake_proxy, status):
    fake_proxy.respond(status)
    assert validate_api_key("sk-test").success is True


def test_network_failure_is_reported_not_raised(fake_proxy):
    fake_proxy.fail_with(lambda request: httpx.ConnectError("connection refused", request=request))
    result = validate_api_key("sk-test")
    assert result.success is False
    assert result.error == VALIDATION_NETWORK_ERROR


def test_timeout_is_reported_as_network_failure(fake_proxy):
    fake_proxy.fail_with(lambda request: httpx.ReadTimeout("slow", request=request))
    result = validate_api_key("sk-test")
    assert result.error == VALIDATION_NETWORK_ERROR


def test_models_request_shape(fake_proxy):
    fake_proxy.respond(200, json={"data": []})
    validate_api_key("sk-abc", base_url="https://proxy.example.com/")
    req = fake_proxy.last_request
    assert req.method == "GET"
    assert str(req.url) == "https://proxy.example.com/v1/models"
    assert req.headers["Authorization"] == "Bearer sk-abc"


def test_facade_static_method_delegates(fake_proxy):
    fake_proxy.respond(403)
    result = CustomProxyProvider.validate_api_key("sk-test")
    assert not result
    assert result.to_dict() == {"success": False, "error": AUTH_FAILED_ERROR}


def test_unparseable_base_url_is_reported_not_raised(fake_proxy, capsys):
    result = validate_api_key("sk-test", base_url="http://[::1")
    assert result.success is False
    assert result.error == VALIDATION_NETWORK_ERROR
    assert fake_proxy.requests == []
    (event,) = events_named(capsys.readouterr().err, "validate.error")
    assert event["error_code"] == "validation"
