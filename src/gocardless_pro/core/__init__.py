"""Request/response engine shared by every resource."""

from .errors import (
    GoCardlessApiError,
    GoCardlessClientClosedError,
    GoCardlessConfigurationError,
    GoCardlessError,
    GoCardlessInvalidApiUsageError,
    GoCardlessInvalidStateError,
    GoCardlessProtocolError,
    GoCardlessRateLimitError,
    GoCardlessTransportError,
    GoCardlessValidationError,
)
from .models import ApiError, ApiErrorResponse, Cursors, ErrorType, Page

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
    "ApiError",
    "ApiErrorResponse",
    "Cursors",
    "ErrorType",
    "Page",
]
