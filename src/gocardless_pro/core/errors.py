"""Error types and error-envelope mapping."""

from __future__ import annotations

from collections.abc import Mapping
from typing import NoReturn, Protocol

from .models import ApiError, ApiErrorResponse, ErrorType


class GoCardlessError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class GoCardlessConfigurationError(GoCardlessError):
    """Caller/programmer error detected before any network call."""


class GoCardlessClientClosedError(GoCardlessError):
    """Raised when client is used after close."""


class GoCardlessProtocolError(GoCardlessError):
    """Response shape does not match what the request expects."""


class GoCardlessTransportError(GoCardlessError):
    """No usable HTTP response was obtained."""


class GoCardlessApiError(GoCardlessError):
    """Error response returned by the API.

    The parsed error envelope stays attached so callers can log
    ``request_id`` or render field ``errors``.
    """

    def __init__(
        self,
        error_response: ApiErrorResponse,
        *,
        http_status: int | None = None,
    ) -> None:
        super().__init__(
            error_response.message,
            http_status=error_response.code if http_status is None else http_status,
        )
        self.error_response = error_response

    @property
    def type(self) -> ErrorType | str:
        return self.error_response.type

    @property
    def documentation_url(self) -> str | None:
        return self.error_response.documentation_url

    @property
    def request_id(self) -> str | None:
        return self.error_response.request_id

    @property
    def code(self) -> int:
        return self.error_response.code

    @property
    def errors(self) -> tuple[ApiError, ...]:
        return self.error_response.errors


class GoCardlessValidationError(GoCardlessApiError):
    """Request failed validation; ``errors`` lists the offending fields."""


class GoCardlessInvalidStateError(GoCardlessApiError):
    """Resource is not in a state that permits the action."""


class GoCardlessInvalidApiUsageError(GoCardlessApiError):
    """Request violates the API contract."""


class GoCardlessRateLimitError(GoCardlessApiError):
    """Rate limit exceeded; the caller should back off."""


_ERROR_CLASSES: dict[ErrorType, type[GoCardlessApiError]] = {
    ErrorType.VALIDATION_FAILED: GoCardlessValidationError,
    ErrorType.INVALID_STATE: GoCardlessInvalidStateError,
    ErrorType.INVALID_API_USAGE: GoCardlessInvalidApiUsageError,
    ErrorType.RATE_LIMIT_EXCEEDED: GoCardlessRateLimitError,
}


class JsonResponse(Protocol):
    def json(self) -> object: ...


def parse_error_response(
    payload: object,
    *,
    http_status: int | None,
) -> ApiErrorResponse:
    """Parse an ``{"error": {...}}`` document into an ``ApiErrorResponse``."""

    if not isinstance(payload, Mapping) or not isinstance(payload.get("error"), Mapping):
        raise GoCardlessTransportError(
            "error response does not contain an error object",
            http_status=http_status,
            cause="unparsable_error",
        )
    return ApiErrorResponse.from_payload(payload["error"], http_status=http_status)


def classify_api_error(
    error_response: ApiErrorResponse,
    *,
    http_status: int | None = None,
) -> GoCardlessApiError:
    """Map an error envelope to a domain exception by its ``type``.

    ``http_status`` is the status line of the response; ``code`` stays as sent
    in the body.
    """

    error_type = error_response.type
    if isinstance(error_type, ErrorType):
        error_class = _ERROR_CLASSES.get(error_type, GoCardlessApiError)
    else:
        error_class = GoCardlessApiError
    return error_class(error_response, http_status=http_status)


def raise_for_error_response(
    response: JsonResponse,
    *,
    http_status: int | None,
) -> NoReturn:
    try:
        payload = response.json()
    except ValueError as exc:
        raise GoCardlessTransportError(
            "error response body is not valid JSON",
            http_status=http_status,
            cause="unparsable_error",
        ) from exc
    raise classify_api_error(
        parse_error_response(payload, http_status=http_status),
        http_status=http_status,
    )


__all__ = [
    "GoCardlessError",
    "GoCardlessConfigurationError",
    "GoCardlessClientClosedError",
    "GoCardlessProtocolError",
    "GoCardlessTransportError",
    "GoCardlessApiError",
    "GoCardlessValidationError",
    "GoCardlessInvalidStateError",
    "GoCardlessInvalidApiUsageError",
    "GoCardlessRateLimitError",
    "parse_error_response",
    "classify_api_error",
    "raise_for_error_response",
]
