"""Payout resources."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from ..core.executor import RequestExecutor
from ..core.models import Page
from ..core.request import ApiRequest, RequestKind
from ..core.schema import Field, ResourceSchema, as_enum, as_int, as_nested

ENVELOPE = "payouts"


class PayoutStatus(Enum):
    PENDING = "pending"
    PAID = "paid"


@dataclass(slots=True, frozen=True)
class PayoutLinks:
    creditor: str | None = None
    creditor_bank_account: str | None = None


@dataclass(slots=True, frozen=True)
class Payout:
    id: str | None = None
    amount: int | None = None
    created_at: str | None = None
    currency: str | None = None
    reference: str | None = None
    status: PayoutStatus | str | None = None
    links: PayoutLinks | None = None


PAYOUT_LINKS_SCHEMA = ResourceSchema(
    PayoutLinks,
    (
        Field("creditor"),
        Field("creditor_bank_account"),
    ),
)

PAYOUT_SCHEMA = ResourceSchema(
    Payout,
    (
        Field("id"),
        Field("amount", as_int),
        Field("created_at"),
        Field("currency"),
        Field("reference"),
        Field("status", as_enum(PayoutStatus)),
        Field("links", as_nested(PAYOUT_LINKS_SCHEMA)),
    ),
)


@dataclass(slots=True, frozen=True)
class PayoutListQuery:
    after: str | None = None
    before: str | None = None
    creditor: str | None = None
    creditor_bank_account: str | None = None
    limit: int | None = None
    status: PayoutStatus | None = None


def build_payout_list_params(query: PayoutListQuery) -> dict[str, object]:
    return {
        "after": query.after,
        "before": query.before,
        "creditor": query.creditor,
        "creditor_bank_account": query.creditor_bank_account,
        "limit": query.limit,
        "status": query.status,
    }


class PayoutService:
    """Payouts are read-only transfers of collected funds to a creditor."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    def list(self, query: PayoutListQuery | None = None) -> Page[Payout]:
        return self._executor.execute_page(self._list_request(query))

    def iter_pages(self, query: PayoutListQuery | None = None) -> Iterator[Page[Payout]]:
        return self._executor.iter_pages(self._list_request(query))

    def get(self, identity: str) -> Payout:
        request = ApiRequest(
            kind=RequestKind.GET,
            path_template="/payouts/:identity",
            envelope=ENVELOPE,
            schema=PAYOUT_SCHEMA,
            path_params={"identity": identity},
        )
        return self._executor.execute_single(request)

    @staticmethod
    def _list_request(query: PayoutListQuery | None) -> ApiRequest[Payout]:
        return ApiRequest(
            kind=RequestKind.LIST,
            path_template="/payouts",
            envelope=ENVELOPE,
            schema=PAYOUT_SCHEMA,
            query_params=build_payout_list_params(query or PayoutListQuery()),
        )


__all__ = [
    "PayoutStatus",
    "Payout",
    "PayoutLinks",
    "PAYOUT_SCHEMA",
    "PayoutListQuery",
    "build_payout_list_params",
    "PayoutService",
]
