"""API key resources."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from ..core.executor import RequestExecutor
from ..core.models import Page
from ..core.params import build_body
from ..core.request import ApiRequest, RequestKind
from ..core.schema import Field, ResourceSchema, as_bool, as_nested

ENVELOPE = "api_keys"


@dataclass(slots=True, frozen=True)
class ApiKeyLinks:
    role: str | None = None


@dataclass(slots=True, frozen=True)
class ApiKey:
    id: str | None = None
    created_at: str | None = None
    enabled: bool | None = None
    key: str | None = None
    name: str | None = None
    webhook_url: str | None = None
    links: ApiKeyLinks | None = None


API_KEY_LINKS_SCHEMA = ResourceSchema(ApiKeyLinks, (Field("role"),))

API_KEY_SCHEMA = ResourceSchema(
    ApiKey,
    (
        Field("id"),
        Field("created_at"),
        Field("enabled", as_bool),
        Field("key"),
        Field("name"),
        Field("webhook_url"),
        Field("links", as_nested(API_KEY_LINKS_SCHEMA)),
    ),
)


@dataclass(slots=True, frozen=True)
class ApiKeyCreateParams:
    name: str | None = None
    role: str | None = None
    webhook_url: str | None = None


@dataclass(slots=True, frozen=True)
class ApiKeyUpdateParams:
    name: str | None = None
    webhook_url: str | None = None


@dataclass(slots=True, frozen=True)
class ApiKeyListQuery:
    after: str | None = None
    before: str | None = None
    enabled: bool | None = None
    limit: int | None = None
    role: str | None = None


def build_api_key_create_body(params: ApiKeyCreateParams) -> dict[str, object]:
    return {
        "name": params.name,
        "webhook_url": params.webhook_url,
        "links": {"role": params.role},
    }


def build_api_key_update_body(params: ApiKeyUpdateParams) -> dict[str, object] | None:
    body = build_body({"name": params.name, "webhook_url": params.webhook_url})
    return body or None


def build_api_key_list_params(query: ApiKeyListQuery) -> dict[str, object]:
    return {
        "after": query.after,
        "before": query.before,
        "enabled": query.enabled,
        "limit": query.limit,
        "role": query.role,
    }


class ApiKeyService:
    """Create, list, update and disable API keys."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    def create(self, params: ApiKeyCreateParams) -> ApiKey:
        request = ApiRequest(
            kind=RequestKind.POST,
            path_template="/api_keys",
            envelope=ENVELOPE,
            schema=API_KEY_SCHEMA,
            body=build_api_key_create_body(params),
        )
        return self._executor.execute_single(request)

    def list(self, query: ApiKeyListQuery | None = None) -> Page[ApiKey]:
        return self._executor.execute_page(self._list_request(query))

    def iter_pages(self, query: ApiKeyListQuery | None = None) -> Iterator[Page[ApiKey]]:
        return self._executor.iter_pages(self._list_request(query))

    def get(self, identity: str) -> ApiKey:
        request = ApiRequest(
            kind=RequestKind.GET,
            path_template="/api_keys/:identity",
            envelope=ENVELOPE,
            schema=API_KEY_SCHEMA,
            path_params={"identity": identity},
        )
        return self._executor.execute_single(request)

    def update(self, identity: str, params: ApiKeyUpdateParams | None = None) -> ApiKey:
        request = ApiRequest(
            kind=RequestKind.PUT,
            path_template="/api_keys/:identity",
            envelope=ENVELOPE,
            schema=API_KEY_SCHEMA,
            path_params={"identity": identity},
            body=build_api_key_update_body(params or ApiKeyUpdateParams()),
        )
        return self._executor.execute_single(request)

    def disable(self, identity: str) -> ApiKey:
        request = ApiRequest(
            kind=RequestKind.POST,
            path_template="/api_keys/:identity/actions/disable",
            envelope=ENVELOPE,
            schema=API_KEY_SCHEMA,
            path_params={"identity": identity},
        )
        return self._executor.execute_single(request)

    @staticmethod
    def _list_request(query: ApiKeyListQuery | None) -> ApiRequest[ApiKey]:
        return ApiRequest(
            kind=RequestKind.LIST,
            path_template="/api_keys",
            envelope=ENVELOPE,
            schema=API_KEY_SCHEMA,
            query_params=build_api_key_list_params(query or ApiKeyListQuery()),
        )


__all__ = [
    "ApiKey",
    "ApiKeyLinks",
    "API_KEY_SCHEMA",
    "ApiKeyCreateParams",
    "ApiKeyUpdateParams",
    "ApiKeyListQuery",
    "build_api_key_create_body",
    "build_api_key_update_body",
    "build_api_key_list_params",
    "ApiKeyService",
]
