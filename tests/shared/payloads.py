from __future__ import annotations

from collections.abc import Sequence


def make_list_payload(
    envelope: str,
    items: Sequence[dict[str, object]],
    *,
    after: str | None = None,
    before: str | None = None,
    limit: int | None = 50,
) -> dict[str, object]:
    return {
        envelope: list(items),
        "meta": {
            "cursors": {"before": before, "after": after},
            "limit": limit,
        },
    }


def make_error_payload(
    error_type: str,
    *,
    code: int,
    message: str = "request failed",
    request_id: str | None = "req-1",
    errors: Sequence[dict[str, object]] = (),
) -> dict[str, object]:
    return {
        "error": {
            "message": message,
            "type": error_type,
            "documentation_url": f"https://developer.gocardless.com/pro#{error_type}",
            "request_id": request_id,
            "code": code,
            "errors": list(errors),
        }
    }
