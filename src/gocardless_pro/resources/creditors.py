"""Creditor resources."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from ..core.executor import RequestExecutor
from ..core.models import Page
from ..core.params import build_body
from ..core.request import ApiRequest, RequestKind
from ..core.schema import Field, ResourceSchema, as_nested

ENVELOPE = "creditors"

_ADDRESS_FIELDS: tuple[str, ...] = (
    "address_line1",
    "address_line2",
    "address_line3",
    "city",
    "region",
    "postal_code",
    "country_code",
)


@dataclass(slots=True, frozen=True)
class CreditorLinks:
    default_gbp_payout_account: str | None = None
    default_eur_payout_account: str | None = None


@dataclass(slots=True, frozen=True)
class Creditor:
    id: str | None = None
    created_at: str | None = None
    name: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    address_line3: str | None = None
    city: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country_code: str | None = None
    logo_url: str | None = None
    links: CreditorLinks | None = None


CREDITOR_LINKS_SCHEMA = ResourceSchema(
    CreditorLinks,
    (
        Field("default_gbp_payout_account"),
        Field("default_eur_payout_account"),
    ),
)

CREDITOR_SCHEMA = ResourceSchema(
    Creditor,
    (
        Field("id"),
        Field("created_at"),
        Field("name"),
        *(Field(name) for name in _ADDRESS_FIELDS),
        Field("logo_url"),
        Field("links", as_nested(CREDITOR_LINKS_SCHEMA)),
    ),
)


@dataclass(slots=True, frozen=True)
class CreditorCreateParams:
    name: str
    address_line1: str | None = None
    address_line2: str | None = None
    address_line3: str | None = None
    city: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country_code: str | None = None


@dataclass(slots=True, frozen=True)
class CreditorUpdateParams:
    name: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    address_line3: str | None = None
    city: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country_code: str | None = None
    default_gbp_payout_account: str | None = None
    default_eur_payout_account: str | None = None


@dataclass(slots=True, frozen=True)
class CreditorListQuery:
    after: str | None = None
    before: str | None = None
    limit: int | None = None


def _address(params: CreditorCreateParams | CreditorUpdateParams) -> dict[str, object]:
    return {name: getattr(params, name) for name in _ADDRESS_FIELDS}


def build_creditor_create_body(params: CreditorCreateParams) -> dict[str, object]:
    return {"name": params.name, **_address(params)}


def build_creditor_update_body(params: CreditorUpdateParams) -> dict[str, object] | None:
    body = build_body(
        {
            "name": params.name,
            **_address(params),
            "links": {
                "default_gbp_payout_account": params.default_gbp_payout_account,
                "default_eur_payout_account": params.default_eur_payout_account,
            },
        }
    )
    return body or None


class CreditorService:
    """Creditors are the entities payments are collected on behalf of."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    def create(self, params: CreditorCreateParams) -> Creditor:
        request = ApiRequest(
            kind=RequestKind.POST,
            path_template="/creditors",
            envelope=ENVELOPE,
            schema=CREDITOR_SCHEMA,
            body=build_creditor_create_body(params),
        )
        return self._executor.execute_single(request)

    def list(self, query: CreditorListQuery | None = None) -> Page[Creditor]:
        return self._executor.execute_page(self._list_request(query))

    def iter_pages(self, query: CreditorListQuery | None = None) -> Iterator[Page[Creditor]]:
        return self._executor.iter_pages(self._list_request(query))

    def get(self, identity: str) -> Creditor:
        request = ApiRequest(
            kind=RequestKind.GET,
            path_template="/creditors/:identity",
            envelope=ENVELOPE,
            schema=CREDITOR_SCHEMA,
            path_params={"identity": identity},
        )
        return self._executor.execute_single(request)

    def update(self, identity: str, params: CreditorUpdateParams | None = None) -> Creditor:
        request = ApiRequest(
            kind=RequestKind.PUT,
            path_template="/creditors/:identity",
            envelope=ENVELOPE,
            schema=CREDITOR_SCHEMA,
            path_params={"identity": identity},
            body=build_creditor_update_body(params or CreditorUpdateParams()),
        )
        return self._executor.execute_single(request)

    @staticmethod
    def _list_request(query: CreditorListQuery | None) -> ApiRequest[Creditor]:
        query = query or CreditorListQuery()
        return ApiRequest(
            kind=RequestKind.LIST,
            path_template="/creditors",
            envelope=ENVELOPE,
            schema=CREDITOR_SCHEMA,
            query_params={
                "after": query.after,
                "before": query.before,
                "limit": query.limit,
            },
        )


__all__ = [
    "Creditor",
    "CreditorLinks",
    "CREDITOR_SCHEMA",
    "CreditorCreateParams",
    "CreditorUpdateParams",
    "CreditorListQuery",
    "build_creditor_create_body",
    "build_creditor_update_body",
    "CreditorService",
]
