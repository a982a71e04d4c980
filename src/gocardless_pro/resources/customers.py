"""Customer resources."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from ..core.executor import RequestExecutor
from ..core.models import Page
from ..core.params import build_body
from ..core.request import ApiRequest, RequestKind
from ..core.schema import Field, ResourceSchema, as_metadata

ENVELOPE = "customers"

_WRITABLE_FIELDS: tuple[str, ...] = (
    "email",
    "given_name",
    "family_name",
    "address_line1",
    "address_line2",
    "address_line3",
    "city",
    "region",
    "postal_code",
    "country_code",
    "language",
)


@dataclass(slots=True, frozen=True)
class Customer:
    id: str | None = None
    created_at: str | None = None
    email: str | None = None
    given_name: str | None = None
    family_name: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    address_line3: str | None = None
    city: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country_code: str | None = None
    language: str | None = None
    metadata: dict[str, str] | None = None


CUSTOMER_SCHEMA = ResourceSchema(
    Customer,
    (
        Field("id"),
        Field("created_at"),
        *(Field(name) for name in _WRITABLE_FIELDS),
        Field("metadata", as_metadata),
    ),
)


@dataclass(slots=True, frozen=True)
class CustomerParams:
    """Writable customer fields, shared by create and update."""

    email: str | None = None
    given_name: str | None = None
    family_name: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    address_line3: str | None = None
    city: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country_code: str | None = None
    language: str | None = None
    metadata: Mapping[str, str] | None = None


@dataclass(slots=True, frozen=True)
class CustomerListQuery:
    after: str | None = None
    before: str | None = None
    limit: int | None = None
    created_at_gt: str | None = None
    created_at_gte: str | None = None
    created_at_lt: str | None = None
    created_at_lte: str | None = None


def build_customer_body(params: CustomerParams) -> dict[str, object]:
    fields: dict[str, object] = {name: getattr(params, name) for name in _WRITABLE_FIELDS}
    fields["metadata"] = dict(params.metadata) if params.metadata is not None else None
    return build_body(fields)


def build_customer_list_params(query: CustomerListQuery) -> dict[str, object]:
    return {
        "after": query.after,
        "before": query.before,
        "limit": query.limit,
        "created_at[gt]": query.created_at_gt,
        "created_at[gte]": query.created_at_gte,
        "created_at[lt]": query.created_at_lt,
        "created_at[lte]": query.created_at_lte,
    }


class CustomerService:
    """Customers hold the contact details of the people you collect from."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    def create(self, params: CustomerParams) -> Customer:
        request = ApiRequest(
            kind=RequestKind.POST,
            path_template="/customers",
            envelope=ENVELOPE,
            schema=CUSTOMER_SCHEMA,
            body=build_customer_body(params),
        )
        return self._executor.execute_single(request)

    def list(self, query: CustomerListQuery | None = None) -> Page[Customer]:
        return self._executor.execute_page(self._list_request(query))

    def iter_pages(self, query: CustomerListQuery | None = None) -> Iterator[Page[Customer]]:
        return self._executor.iter_pages(self._list_request(query))

    def get(self, identity: str) -> Customer:
        request = ApiRequest(
            kind=RequestKind.GET,
            path_template="/customers/:identity",
            envelope=ENVELOPE,
            schema=CUSTOMER_SCHEMA,
            path_params={"identity": identity},
        )
        return self._executor.execute_single(request)

    def update(self, identity: str, params: CustomerParams | None = None) -> Customer:
        body = build_customer_body(params or CustomerParams())
        request = ApiRequest(
            kind=RequestKind.PUT,
            path_template="/customers/:identity",
            envelope=ENVELOPE,
            schema=CUSTOMER_SCHEMA,
            path_params={"identity": identity},
            body=body or None,
        )
        return self._executor.execute_single(request)

    @staticmethod
    def _list_request(query: CustomerListQuery | None) -> ApiRequest[Customer]:
        return ApiRequest(
            kind=RequestKind.LIST,
            path_template="/customers",
            envelope=ENVELOPE,
            schema=CUSTOMER_SCHEMA,
            query_params=build_customer_list_params(query or CustomerListQuery()),
        )


__all__ = [
    "Customer",
    "CUSTOMER_SCHEMA",
    "CustomerParams",
    "CustomerListQuery",
    "build_customer_body",
    "build_customer_list_params",
    "CustomerService",
]
