# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx
import pytest

from echoverify.client import EchoClient
from echoverify.config import EchoSettings
from echoverify.errors import EchoTransportError, ErrorCategory
from echoverify.models import ForwardEchoRequest, ParsedResponses
from echoverify.transport import HttpxEchoTransport, StubEchoTransport


def echo_replies(request):
    host = (request.headers or {}).get("Host", "unknown")
    return [f"StatusCode=200\nHost={host}\nHostname=pod-{i}" for i in range(request.count)]


def test_forward_echo_parses_outputs_in_order():
    transport = StubEchoTransport(responder=echo_replies)
    request = ForwardEchoRequest(url="http://b:80", count=3, headers={"Host": "b.com"})

    with EchoClient("a:8079", transport=transport) as client:
        responses = client.forward_echo(request)

    assert isinstance(responses, ParsedResponses)
    assert len(responses) == 3
    assert [r.hostname for r in responses] == ["pod-0", "pod-1", "pod-2"]
    assert responses.check_ok() is None
    assert responses.check_host("b.com") is None
    assert transport.requests == [request]


def test_forward_echo_passes_timeout_through():
    transport = StubEchoTransport(["StatusCode=200"])
    client = EchoClient("a:8079", transport=transport)
    client.forward_echo(ForwardEchoRequest(url="http://b"), timeout=2.5)
    client.forward_echo(ForwardEchoRequest(url="http://b"))
    assert transport.timeouts == [2.5, None]
    client.close()


def test_forward_echo_empty_output_builds_empty_batch():
    client = EchoClient("a:8079", transport=StubEchoTransport([]))
    responses = client.forward_echo(ForwardEchoRequest(url="http://b"))
    assert len(responses) == 0
    assert responses.check_ok() is not None


def test_forward_echo_propagates_transport_error():
    error = EchoTransportError("connection refused", ErrorCategory.CONNECTION_ERROR)
    transport = StubEchoTransport(error=error)
    with EchoClient("a:8079", transport=transport) as client:
        with pytest.raises(EchoTransportError) as excinfo:
            client.forward_echo(ForwardEchoRequest(url="http://b"))
    assert excinfo.value is error
    assert transport.close_calls == 1


def test_malformed_outputs_never_fail_forward():
    client = EchoClient("a:8079", transport=StubEchoTransport(["\x00garbage", ""]))
    responses = client.forward_echo(ForwardEchoRequest(url="http://b", count=2))
    assert [r.body for r in responses] == ["\x00garbage", ""]
    assert all(r.code is None for r in responses)


def test_close_is_idempotent_and_blocks_further_use():
    transport = StubEchoTransport(["StatusCode=200"])
    client = EchoClient("a:8079", transport=transport)
    assert client.closed is False
    client.close()
    client.close()
    assert client.closed is True
    assert transport.close_calls == 1
    with pytest.raises(RuntimeError):
        client.forward_echo(ForwardEchoRequest(url="http://b"))


def test_context_manager_releases_on_error_path():
    transport = StubEchoTransport(["StatusCode=200"])
    with pytest.raises(ValueError):
        with EchoClient("a:8079", transport=transport):
            raise ValueError("boom")
    assert transport.close_calls == 1


def test_default_transport_is_created_from_address(monkeypatch):
    created = {}

    def fake_factory(address, settings=None):
        created["address"] = address
        created["settings"] = settings
        return StubEchoTransport(["StatusCode=200"])

    monkeypatch.setattr("echoverify.client.create_default_transport", fake_factory)
    with EchoClient("a:8079") as client:
        assert client.forward_echo(ForwardEchoRequest(url="http://b")).check_ok() is None
    assert created == {"address": "a:8079", "settings": None}


def test_forward_request_validation_and_payload():
    with pytest.raises(ValueError):
        ForwardEchoRequest(url="")
    with pytest.raises(ValueError):
        ForwardEchoRequest(url="http://b", count=0)
    with pytest.raises(ValueError):
        ForwardEchoRequest(url="http://b", qps=-1)

    assert ForwardEchoRequest(url="http://b").to_payload() == {"url": "http://b", "count": 1}
    payload = ForwardEchoRequest(
        url="http://b",
        count=2,
        qps=10,
        timeout=0.5,
        headers={"Host": "b.com"},
        message="hi",
    ).to_payload()
    assert payload == {
        "url": "http://b",
        "count": 2,
        "qps": 10,
        "timeoutMicros": 500000,
        "headers": [{"key": "Host", "value": "b.com"}],
        "message": "hi",
    }


def test_network_failure_is_logged_once_as_warning(caplog):
    def handler(request):
        raise httpx.ConnectError("refused")

    transport = HttpxEchoTransport(
        "a:8079",
        EchoSettings(),
        client=httpx.Client(transport=httpx.MockTransport(handler)),
    )
    with caplog.at_level("DEBUG", logger="echoverify"):
        with EchoClient("a:8079", transport=transport) as client:
            with pytest.raises(EchoTransportError):
                client.forward_echo(ForwardEchoRequest(url="http://b"))

    warnings = [r for r in caplog.records if r.levelname == "WARNING"]
    assert len(warnings) == 1
    assert warnings[0].name == "echoverify.client"
