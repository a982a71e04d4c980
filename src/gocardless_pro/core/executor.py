"""Generic request dispatch shared by every resource service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from typing import Protocol, TypeVar

from .errors import GoCardlessApiError, GoCardlessConfigurationError, raise_for_error_response
from .models import Page
from .pagination import DEFAULT_MAX_PAGES, iterate_pages
from .params import build_body, build_path, build_query_params
from .request import ApiRequest, RequestKind, ResultShape
from .response_parsing import parse_json_payload, parse_page, parse_single
from .transport import TransportResponse

T = TypeVar("T")

logger = logging.getLogger("gocardless_pro")


class Transport(Protocol):
    def send(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        body: Mapping[str, object] | None = None,
    ) -> TransportResponse: ...

    def close(self) -> None: ...


def _is_success(http_status: int) -> bool:
    return 200 <= http_status < 300


class RequestExecutor:
    """Dispatches ``ApiRequest`` values and unwraps their envelopes."""

    def __init__(
        self,
        transport: Transport,
        *,
        max_pages: int = DEFAULT_MAX_PAGES,
        ensure_open: Callable[[], None] | None = None,
    ) -> None:
        self._transport = transport
        self._max_pages = max_pages
        self._ensure_open = ensure_open or _noop

    def execute(self, request: ApiRequest[T]) -> T | Page[T]:
        self._ensure_open()
        path = build_path(request.path_template, request.path_params)
        params = build_query_params(request.query_params)
        body = build_body(request.body) if request.body is not None else None

        response = self._transport.send(request.method, path, params=params, body=body)
        http_status = response.status_code
        if not _is_success(http_status):
            try:
                raise_for_error_response(response, http_status=http_status)
            except GoCardlessApiError as exc:
                logger.error(
                    "request failed method=%s path=%s http_status=%s error=%s request_id=%s",
                    request.method,
                    path,
                    http_status,
                    exc.__class__.__name__,
                    exc.request_id,
                )
                raise

        payload = parse_json_payload(response, http_status=http_status)
        if request.shape is ResultShape.LIST:
            result: T | Page[T] = parse_page(payload, request.envelope, request.schema)
        else:
            result = parse_single(payload, request.envelope, request.schema)
        logger.info("request success method=%s path=%s", request.method, path)
        return result

    def execute_single(self, request: ApiRequest[T]) -> T:
        if request.kind is RequestKind.LIST:
            raise GoCardlessConfigurationError("LIST requests must use execute_page")
        return self.execute(request)  # type: ignore[return-value]

    def execute_page(self, request: ApiRequest[T]) -> Page[T]:
        if request.kind is not RequestKind.LIST:
            raise GoCardlessConfigurationError(
                f"{request.kind.name} requests must use execute_single"
            )
        return self.execute(request)  # type: ignore[return-value]

    def iter_pages(self, request: ApiRequest[T]) -> Iterator[Page[T]]:
        """Walk every page from ``request``; each page is fetched on demand."""

        if request.kind is not RequestKind.LIST:
            raise GoCardlessConfigurationError(
                f"{request.kind.name} requests cannot be paginated"
            )
        start_after = request.query_params.get("after")

        def _fetch(after: str | None) -> Page[T]:
            if after is None:
                return self.execute_page(request)
            # before and after are exclusive directions
            return self.execute_page(request.with_query(after=after, before=None))

        pages = iterate_pages(
            _fetch,
            start_after=str(start_after) if start_after is not None else None,
            max_pages=self._max_pages,
        )
        return self._guarded(pages)

    def _guarded(self, pages: Iterator[Page[T]]) -> Iterator[Page[T]]:
        for page in pages:
            self._ensure_open()
            yield page


def _noop() -> None:
    return None


__all__ = [
    "Transport",
    "RequestExecutor",
]
