"""Mandate resources."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum

from ..core.executor import RequestExecutor
from ..core.models import Page
from ..core.params import build_body
from ..core.request import ApiRequest, RequestKind
from ..core.schema import Field, ResourceSchema, as_enum, as_metadata, as_nested

ENVELOPE = "mandates"


class MandateStatus(Enum):
    PENDING_SUBMISSION = "pending_submission"
    SUBMITTED = "submitted"
    ACTIVE = "active"
    FAILED = "failed"
    CANCELLED = "cancelled"
    EXPIRED = "expired"


@dataclass(slots=True, frozen=True)
class MandateLinks:
    creditor: str | None = None
    customer_bank_account: str | None = None


@dataclass(slots=True, frozen=True)
class Mandate:
    id: str | None = None
    created_at: str | None = None
    reference: str | None = None
    scheme: str | None = None
    status: MandateStatus | str | None = None
    next_possible_charge_date: str | None = None
    metadata: dict[str, str] | None = None
    links: MandateLinks | None = None


MANDATE_LINKS_SCHEMA = ResourceSchema(
    MandateLinks,
    (
        Field("creditor"),
        Field("customer_bank_account"),
    ),
)

MANDATE_SCHEMA = ResourceSchema(
    Mandate,
    (
        Field("id"),
        Field("created_at"),
        Field("reference"),
        Field("scheme"),
        Field("status", as_enum(MandateStatus)),
        Field("next_possible_charge_date"),
        Field("metadata", as_metadata),
        Field("links", as_nested(MANDATE_LINKS_SCHEMA)),
    ),
)


@dataclass(slots=True, frozen=True)
class MandateCreateParams:
    customer_bank_account: str
    creditor: str | None = None
    scheme: str | None = None
    reference: str | None = None
    metadata: Mapping[str, str] | None = None


@dataclass(slots=True, frozen=True)
class MandateListQuery:
    after: str | None = None
    before: str | None = None
    creditor: str | None = None
    customer: str | None = None
    customer_bank_account: str | None = None
    limit: int | None = None
    reference: str | None = None
    status: MandateStatus | None = None


def _metadata_body(metadata: Mapping[str, str] | None) -> dict[str, object] | None:
    body = build_body({"metadata": dict(metadata) if metadata is not None else None})
    return body or None


def build_mandate_create_body(params: MandateCreateParams) -> dict[str, object]:
    return build_body(
        {
            "scheme": params.scheme,
            "reference": params.reference,
            "metadata": dict(params.metadata) if params.metadata is not None else None,
            "links": {
                "creditor": params.creditor,
                "customer_bank_account": params.customer_bank_account,
            },
        }
    )


def build_mandate_list_params(query: MandateListQuery) -> dict[str, object]:
    return {
        "after": query.after,
        "before": query.before,
        "creditor": query.creditor,
        "customer": query.customer,
        "customer_bank_account": query.customer_bank_account,
        "limit": query.limit,
        "reference": query.reference,
        "status": query.status,
    }


class MandateService:
    """Mandates authorise a creditor to collect from a customer bank account."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    def create(self, params: MandateCreateParams) -> Mandate:
        request = ApiRequest(
            kind=RequestKind.POST,
            path_template="/mandates",
            envelope=ENVELOPE,
            schema=MANDATE_SCHEMA,
            body=build_mandate_create_body(params),
        )
        return self._executor.execute_single(request)

    def list(self, query: MandateListQuery | None = None) -> Page[Mandate]:
        return self._executor.execute_page(self._list_request(query))

    def iter_pages(self, query: MandateListQuery | None = None) -> Iterator[Page[Mandate]]:
        return self._executor.iter_pages(self._list_request(query))

    def get(self, identity: str) -> Mandate:
        request = ApiRequest(
            kind=RequestKind.GET,
            path_template="/mandates/:identity",
            envelope=ENVELOPE,
            schema=MANDATE_SCHEMA,
            path_params={"identity": identity},
        )
        return self._executor.execute_single(request)

    def update(self, identity: str, *, metadata: Mapping[str, str] | None = None) -> Mandate:
        request = ApiRequest(
            kind=RequestKind.PUT,
            path_template="/mandates/:identity",
            envelope=ENVELOPE,
            schema=MANDATE_SCHEMA,
            path_params={"identity": identity},
            body=_metadata_body(metadata),
        )
        return self._executor.execute_single(request)

    def cancel(self, identity: str, *, metadata: Mapping[str, str] | None = None) -> Mandate:
        return self._action(identity, "cancel", metadata)

    def reactivate(self, identity: str, *, metadata: Mapping[str, str] | None = None) -> Mandate:
        return self._action(identity, "reactivate", metadata)

    def _action(
        self,
        identity: str,
        action: str,
        metadata: Mapping[str, str] | None,
    ) -> Mandate:
        request = ApiRequest(
            kind=RequestKind.POST,
            path_template="/mandates/:identity/actions/:action",
            envelope=ENVELOPE,
            schema=MANDATE_SCHEMA,
            path_params={"identity": identity, "action": action},
            body=_metadata_body(metadata),
        )
        return self._executor.execute_single(request)

    @staticmethod
    def _list_request(query: MandateListQuery | None) -> ApiRequest[Mandate]:
        return ApiRequest(
            kind=RequestKind.LIST,
            path_template="/mandates",
            envelope=ENVELOPE,
            schema=MANDATE_SCHEMA,
            query_params=build_mandate_list_params(query or MandateListQuery()),
        )


__all__ = [
    "MandateStatus",
    "Mandate",
    "MandateLinks",
    "MANDATE_SCHEMA",
    "MandateCreateParams",
    "MandateListQuery",
    "build_mandate_create_body",
    "build_mandate_list_params",
    "MandateService",
]
