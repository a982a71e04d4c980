"""Redirect flow resources.

Redirect flows send a customer to the hosted payment pages to set up a
mandate. The flow is created, the customer fills in their details and is
sent back to ``success_redirect_url``, and the integration then completes
the flow, which creates the customer, bank account and mandate.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..core.executor import RequestExecutor
from ..core.params import build_body
from ..core.request import ApiRequest, RequestKind
from ..core.schema import Field, ResourceSchema, as_enum, as_nested

ENVELOPE = "redirect_flows"


class RedirectFlowScheme(Enum):
    BACS = "bacs"
    SEPA_CORE = "sepa_core"


@dataclass(slots=True, frozen=True)
class RedirectFlowLinks:
    creditor: str | None = None
    mandate: str | None = None


@dataclass(slots=True, frozen=True)
class RedirectFlow:
    id: str | None = None
    created_at: str | None = None
    description: str | None = None
    redirect_url: str | None = None
    scheme: RedirectFlowScheme | str | None = None
    session_token: str | None = None
    success_redirect_url: str | None = None
    links: RedirectFlowLinks | None = None


REDIRECT_FLOW_LINKS_SCHEMA = ResourceSchema(
    RedirectFlowLinks,
    (
        Field("creditor"),
        Field("mandate"),
    ),
)

REDIRECT_FLOW_SCHEMA = ResourceSchema(
    RedirectFlow,
    (
        Field("id"),
        Field("created_at"),
        Field("description"),
        Field("redirect_url"),
        Field("scheme", as_enum(RedirectFlowScheme)),
        Field("session_token"),
        Field("success_redirect_url"),
        Field("links", as_nested(REDIRECT_FLOW_LINKS_SCHEMA)),
    ),
)


@dataclass(slots=True, frozen=True)
class RedirectFlowCreateParams:
    session_token: str
    success_redirect_url: str
    description: str | None = None
    creditor: str | None = None
    scheme: RedirectFlowScheme | None = None


def build_redirect_flow_create_body(params: RedirectFlowCreateParams) -> dict[str, object]:
    return build_body(
        {
            "description": params.description,
            "scheme": params.scheme,
            "session_token": params.session_token,
            "success_redirect_url": params.success_redirect_url,
            "links": {"creditor": params.creditor},
        }
    )


class RedirectFlowService:
    """Create, fetch and complete redirect flows.

    A flow expires 30 minutes after creation and cannot be completed twice;
    completing it again raises ``GoCardlessInvalidStateError``.
    """

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    def create(self, params: RedirectFlowCreateParams) -> RedirectFlow:
        request = ApiRequest(
            kind=RequestKind.POST,
            path_template="/redirect_flows",
            envelope=ENVELOPE,
            schema=REDIRECT_FLOW_SCHEMA,
            body=build_redirect_flow_create_body(params),
        )
        return self._executor.execute_single(request)

    def get(self, identity: str) -> RedirectFlow:
        request = ApiRequest(
            kind=RequestKind.GET,
            path_template="/redirect_flows/:identity",
            envelope=ENVELOPE,
            schema=REDIRECT_FLOW_SCHEMA,
            path_params={"identity": identity},
        )
        return self._executor.execute_single(request)

    def complete(self, identity: str, *, session_token: str) -> RedirectFlow:
        """Create the customer, bank account and mandate from a finished flow.

        ``session_token`` must match the token supplied on creation.
        """

        request = ApiRequest(
            kind=RequestKind.POST,
            path_template="/redirect_flows/:identity/actions/complete",
            envelope=ENVELOPE,
            schema=REDIRECT_FLOW_SCHEMA,
            path_params={"identity": identity},
            body={"session_token": session_token},
        )
        return self._executor.execute_single(request)


__all__ = [
    "RedirectFlowScheme",
    "RedirectFlow",
    "RedirectFlowLinks",
    "REDIRECT_FLOW_SCHEMA",
    "RedirectFlowCreateParams",
    "build_redirect_flow_create_body",
    "RedirectFlowService",
]
