"""Synchronous HTTP transport."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

import httpx

from ..config import GoCardlessClientConfig
from .errors import GoCardlessTransportError

logger = logging.getLogger("gocardless_pro")


class TransportResponse(Protocol):
    status_code: int

    def json(self) -> object: ...


class TransportClient(Protocol):
    def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, str] | None = None,
        json: object | None = None,
    ) -> TransportResponse: ...

    def close(self) -> None: ...


def build_default_headers(config: GoCardlessClientConfig) -> Mapping[str, str]:
    return {
        "Accept": "application/json",
        "GoCardless-Version": config.api_version,
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: GoCardlessClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def build_auth(config: GoCardlessClientConfig) -> httpx.BasicAuth | None:
    if config.api_key is None or config.api_secret is None:
        return None
    return httpx.BasicAuth(config.api_key, config.api_secret)


class SyncTransport:
    """Performs a single HTTP round trip per call; no retries."""

    def __init__(
        self,
        config: GoCardlessClientConfig,
        *,
        client: TransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        normalized_base_url = config.resolved_base_url.rstrip("/") + "/"
        self._client: TransportClient = client or httpx.Client(
            base_url=normalized_base_url,
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
            auth=build_auth(config),
        )

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            self._client.close()

    def send(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        body: Mapping[str, object] | None = None,
    ) -> TransportResponse:
        if self._closed:
            raise GoCardlessTransportError("transport is already closed")

        normalized_path = self._normalize_path(path)
        logger.debug("request start method=%s path=%s", method, normalized_path)
        try:
            response = self._client.request(
                method,
                normalized_path,
                params=params or None,
                json=body,
            )
        except (httpx.HTTPError, OSError) as exc:
            logger.error(
                "request network error method=%s path=%s error=%s",
                method,
                normalized_path,
                exc.__class__.__name__,
            )
            raise GoCardlessTransportError(
                "network/transport error",
                cause="network",
            ) from exc

        logger.debug(
            "response received method=%s path=%s http_status=%s",
            method,
            normalized_path,
            response.status_code,
        )
        return response

    @staticmethod
    def _normalize_path(path: str) -> str:
        return path.lstrip("/")


__all__ = [
    "TransportResponse",
    "TransportClient",
    "build_default_headers",
    "build_default_timeout",
    "build_auth",
    "SyncTransport",
]
