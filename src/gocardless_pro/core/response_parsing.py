"""Envelope parsing for successful responses."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, TypeVar

from .errors import GoCardlessProtocolError
from .models import Cursors, Page
from .schema import ResourceSchema

T = TypeVar("T")

JsonObject = dict[str, object]


class JsonPayloadResponse(Protocol):
    def json(self) -> object: ...


def parse_json_payload(
    response: JsonPayloadResponse,
    *,
    http_status: int | None,
) -> JsonObject:
    """Parse response JSON payload and map parse failures to protocol errors."""

    try:
        payload = response.json()
    except ValueError as exc:
        raise GoCardlessProtocolError(
            "response body is not valid JSON",
            http_status=http_status,
        ) from exc

    if not isinstance(payload, dict):
        raise GoCardlessProtocolError(
            "response JSON root must be an object",
            http_status=http_status,
        )
    if any(not isinstance(key, str) for key in payload):
        raise GoCardlessProtocolError(
            "response JSON object keys must be strings",
            http_status=http_status,
        )
    return payload


def _envelope_payload(payload: Mapping[str, object], envelope: str) -> object:
    if envelope not in payload:
        raise GoCardlessProtocolError(f"response is missing the {envelope!r} envelope")
    return payload[envelope]


def _optional_cursor(value: object, name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise GoCardlessProtocolError(f"meta.cursors.{name} must be a string")
    return value or None


def parse_cursors(payload: Mapping[str, object]) -> tuple[Cursors, int | None]:
    """Read ``meta.cursors`` and ``meta.limit``; a missing ``meta`` means no cursors."""

    meta = payload.get("meta")
    if meta is None:
        return Cursors(), None
    if not isinstance(meta, Mapping):
        raise GoCardlessProtocolError("meta must be an object")

    cursors_obj = meta.get("cursors") or {}
    if not isinstance(cursors_obj, Mapping):
        raise GoCardlessProtocolError("meta.cursors must be an object")

    limit = meta.get("limit")
    if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int)):
        raise GoCardlessProtocolError("meta.limit must be an integer")

    cursors = Cursors(
        before=_optional_cursor(cursors_obj.get("before"), "before"),
        after=_optional_cursor(cursors_obj.get("after"), "after"),
    )
    return cursors, limit


def parse_single(
    payload: Mapping[str, object],
    envelope: str,
    schema: ResourceSchema[T],
) -> T:
    item = _envelope_payload(payload, envelope)
    if not isinstance(item, Mapping):
        raise GoCardlessProtocolError(f"{envelope!r} envelope must hold an object")
    return schema.decode(item)


def parse_page(
    payload: Mapping[str, object],
    envelope: str,
    schema: ResourceSchema[T],
) -> Page[T]:
    items = _envelope_payload(payload, envelope)
    if not isinstance(items, list):
        raise GoCardlessProtocolError(f"{envelope!r} envelope must hold an array")
    for item in items:
        if not isinstance(item, Mapping):
            raise GoCardlessProtocolError(f"{envelope!r} element must be an object")

    cursors, limit = parse_cursors(payload)
    return Page(
        items=tuple(schema.decode(item) for item in items),
        cursors=cursors,
        limit=limit,
    )


__all__ = [
    "parse_json_payload",
    "parse_cursors",
    "parse_single",
    "parse_page",
]
