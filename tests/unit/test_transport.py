from __future__ import annotations

import httpx
import pytest

from gocardless_pro.config import GoCardlessClientConfig
from gocardless_pro.core.errors import GoCardlessTransportError
from gocardless_pro.core.transport import (
    SyncTransport,
    build_auth,
    build_default_headers,
)
from tests.shared.transport import Response, SequencedClient, build_config


def test_send_normalizes_path_and_passes_params_and_body():
    client = SequencedClient([Response(200, {})])
    transport = SyncTransport(build_config(), client=client)
    response = transport.send("POST", "/customers", params={}, body={"given_name": "Frank"})
    assert response.status_code == 200
    call = client.calls[0]
    assert call.method == "POST"
    assert call.url == "customers"
    assert call.params is None
    assert call.json == {"given_name": "Frank"}


def test_network_error_is_wrapped_as_transport_error():
    client = SequencedClient([httpx.ConnectError("connection refused")])
    transport = SyncTransport(build_config(), client=client)
    with pytest.raises(GoCardlessTransportError) as exc_info:
        transport.send("GET", "/customers/CU1")
    assert exc_info.value.cause == "network"
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_closed_transport_rejects_requests():
    transport = SyncTransport(build_config(), client=SequencedClient([]))
    transport.close()
    with pytest.raises(GoCardlessTransportError, match="closed"):
        transport.send("GET", "/customers")


def test_default_headers_include_accept_and_version():
    headers = build_default_headers(GoCardlessClientConfig(api_version="2015-07-06"))
    assert headers["Accept"] == "application/json"
    assert "Content-Type" not in headers
    assert headers["GoCardless-Version"] == "2015-07-06"


def test_build_auth_only_when_credentials_configured():
    assert build_auth(GoCardlessClientConfig()) is None
    assert isinstance(
        build_auth(GoCardlessClientConfig(api_key="AK1", api_secret="secret")),
        httpx.BasicAuth,
    )


def test_transport_owns_default_httpx_client():
    transport = SyncTransport(GoCardlessClientConfig(base_url="https://api.example.test/v1"))
    try:
        assert str(transport._client.base_url) == "https://api.example.test/v1/"
    finally:
        transport.close()
