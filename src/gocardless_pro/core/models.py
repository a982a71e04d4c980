"""Core response models."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorType(Enum):
    GOCARDLESS = "gocardless"
    VALIDATION_FAILED = "validation_failed"
    INVALID_STATE = "invalid_state"
    INVALID_API_USAGE = "invalid_api_usage"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    INTERNAL = "internal"


def _optional_text(value: object) -> str | None:
    if value is None:
        return None
    return str(value)


@dataclass(slots=True, frozen=True)
class ApiError:
    """Single field-level error inside an error response."""

    reason: str
    message: str
    field: str | None = None
    request_pointer: str | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> "ApiError":
        return cls(
            reason=_optional_text(payload.get("reason")) or "",
            message=_optional_text(payload.get("message")) or "",
            field=_optional_text(payload.get("field")),
            request_pointer=_optional_text(payload.get("request_pointer")),
        )


@dataclass(slots=True, frozen=True)
class ApiErrorResponse:
    message: str
    type: ErrorType | str
    code: int
    documentation_url: str | None = None
    request_id: str | None = None
    errors: tuple[ApiError, ...] | list[ApiError] = ()

    def __post_init__(self) -> None:
        if isinstance(self.errors, tuple):
            return
        object.__setattr__(self, "errors", tuple(self.errors))

    @classmethod
    def from_payload(
        cls,
        payload: Mapping[str, object],
        *,
        http_status: int | None = None,
    ) -> "ApiErrorResponse":
        raw_type = _optional_text(payload.get("type")) or ""
        try:
            error_type: ErrorType | str = ErrorType(raw_type)
        except ValueError:
            error_type = raw_type

        raw_code = payload.get("code")
        if isinstance(raw_code, int) and not isinstance(raw_code, bool):
            code = raw_code
        else:
            code = http_status or 0

        raw_errors = payload.get("errors")
        errors: list[ApiError] = []
        if isinstance(raw_errors, list):
            for item in raw_errors:
                if isinstance(item, Mapping):
                    errors.append(ApiError.from_payload(item))

        return cls(
            message=_optional_text(payload.get("message")) or "GoCardless API request failed",
            type=error_type,
            code=code,
            documentation_url=_optional_text(payload.get("documentation_url")),
            request_id=_optional_text(payload.get("request_id")),
            errors=errors,
        )


@dataclass(slots=True, frozen=True)
class Cursors:
    before: str | None = None
    after: str | None = None


@dataclass(slots=True, frozen=True)
class Page(Generic[T]):
    """One page of a cursor-paginated list response."""

    items: tuple[T, ...] | list[T]
    cursors: Cursors = field(default_factory=Cursors)
    limit: int | None = None

    def __post_init__(self) -> None:
        if isinstance(self.items, tuple):
            return
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def before(self) -> str | None:
        return self.cursors.before

    @property
    def after(self) -> str | None:
        return self.cursors.after

    @property
    def has_next(self) -> bool:
        return bool(self.cursors.after)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


__all__ = [
    "ErrorType",
    "ApiError",
    "ApiErrorResponse",
    "Cursors",
    "Page",
]
