from __future__ import annotations

import base64
import json

import httpx
import pytest

from gocardless_pro.client import GoCardlessClient
from gocardless_pro.config import Environment, GoCardlessClientConfig
from gocardless_pro.core.errors import GoCardlessTransportError
from gocardless_pro.core.transport import (
    SyncTransport,
    build_auth,
    build_default_headers,
)
from gocardless_pro.resources.customers import CustomerParams


def _build_client(handler) -> tuple[GoCardlessClient, httpx.Client]:
    config = GoCardlessClientConfig(
        environment=Environment.SANDBOX,
        api_key="AK1",
        api_secret="secret",
    )
    http_client = httpx.Client(
        base_url=config.resolved_base_url + "/",
        headers=build_default_headers(config),
        auth=build_auth(config),
        transport=httpx.MockTransport(handler),
    )
    transport = SyncTransport(config, client=http_client)
    return GoCardlessClient(config=config, transport=transport), http_client


def test_request_carries_auth_version_headers_and_json_body():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"customers": {"id": "CU1", "given_name": "Frank"}})

    client, http_client = _build_client(handler)
    with client:
        customer = client.customers.create(CustomerParams(given_name="Frank"))
    http_client.close()

    assert customer.given_name == "Frank"
    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api-sandbox.gocardless.com/customers"
    assert request.headers["GoCardless-Version"] == "2015-07-06"
    assert request.headers["Content-Type"] == "application/json"
    expected_auth = base64.b64encode(b"AK1:secret").decode("ascii")
    assert request.headers["Authorization"] == f"Basic {expected_auth}"
    assert json.loads(request.content) == {"given_name": "Frank"}


def test_query_string_is_encoded_on_the_wire():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={"payouts": [], "meta": {"cursors": {"before": None, "after": None}, "limit": 50}},
        )

    client, http_client = _build_client(handler)
    with client:
        page = client.payouts.list()
    http_client.close()

    assert page.items == ()
    assert seen[0].url.params == httpx.QueryParams()
    assert seen[0].content == b""
    assert "Content-Type" not in seen[0].headers


def test_network_failure_is_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client, http_client = _build_client(handler)
    with client, pytest.raises(GoCardlessTransportError) as exc_info:
        client.customers.get("CU1")
    http_client.close()
    assert exc_info.value.cause == "network"
