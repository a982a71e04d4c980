from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from gocardless_pro.core.errors import GoCardlessConfigurationError
from gocardless_pro.core.request import ApiRequest, RequestKind, ResultShape
from gocardless_pro.resources.customers import CUSTOMER_SCHEMA


@pytest.mark.parametrize(
    ("kind", "method", "shape"),
    [
        (RequestKind.GET, "GET", ResultShape.SINGLE),
        (RequestKind.POST, "POST", ResultShape.SINGLE),
        (RequestKind.PUT, "PUT", ResultShape.SINGLE),
        (RequestKind.LIST, "GET", ResultShape.LIST),
    ],
)
def test_request_kind_fixes_method_and_shape(kind, method, shape):
    request = ApiRequest(kind=kind, path_template="/customers", envelope="customers", schema=CUSTOMER_SCHEMA)
    assert request.method == method
    assert request.shape is shape
    assert request.has_body is False


@pytest.mark.parametrize("kind", [RequestKind.GET, RequestKind.LIST])
def test_get_requests_cannot_carry_a_body(kind):
    with pytest.raises(GoCardlessConfigurationError, match="cannot carry a body"):
        ApiRequest(
            kind=kind,
            path_template="/customers",
            envelope="customers",
            schema=CUSTOMER_SCHEMA,
            body={"given_name": "Frank"},
        )


def test_request_requires_envelope():
    with pytest.raises(GoCardlessConfigurationError):
        ApiRequest(kind=RequestKind.GET, path_template="/customers", envelope="", schema=CUSTOMER_SCHEMA)


def test_request_is_immutable_and_copies_mappings():
    query = {"limit": 10}
    request = ApiRequest(
        kind=RequestKind.LIST,
        path_template="/customers",
        envelope="customers",
        schema=CUSTOMER_SCHEMA,
        query_params=query,
    )
    query["limit"] = 99
    assert request.query_params["limit"] == 10
    with pytest.raises(FrozenInstanceError):
        request.envelope = "mandates"  # type: ignore[misc]
    with pytest.raises(TypeError):
        request.query_params["limit"] = 5  # type: ignore[index]


def test_with_query_returns_updated_copy():
    request = ApiRequest(
        kind=RequestKind.LIST,
        path_template="/customers",
        envelope="customers",
        schema=CUSTOMER_SCHEMA,
        query_params={"limit": 10},
    )
    next_request = request.with_query(after="CU2")
    assert dict(next_request.query_params) == {"limit": 10, "after": "CU2"}
    assert "after" not in request.query_params


def test_empty_body_still_counts_as_body():
    request = ApiRequest(
        kind=RequestKind.POST,
        path_template="/customers",
        envelope="customers",
        schema=CUSTOMER_SCHEMA,
        body={},
    )
    assert request.has_body is True
