"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .core.pagination import DEFAULT_MAX_PAGES


class Environment(Enum):
    LIVE = "https://api.gocardless.com"
    SANDBOX = "https://api-sandbox.gocardless.com"

    @property
    def base_url(self) -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class PaginationConfig:
    """Pagination guardrails."""

    max_pages: int = DEFAULT_MAX_PAGES

    def validate(self) -> None:
        if isinstance(self.max_pages, bool) or not isinstance(self.max_pages, int):
            raise ValueError("pagination.max_pages must be int")
        if self.max_pages < 1:
            raise ValueError("pagination.max_pages must be >= 1")


@dataclass(slots=True, frozen=True)
class GoCardlessClientConfig:
    """Runtime configuration for the GoCardless client."""

    environment: Environment = Environment.LIVE
    base_url: str | None = None
    api_key: str | None = field(default=None, repr=False)
    api_secret: str | None = field(default=None, repr=False)
    api_version: str = "2015-07-06"
    user_agent: str = "gocardless-pro-python/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)
    pagination: PaginationConfig = field(default_factory=PaginationConfig)

    @property
    def resolved_base_url(self) -> str:
        if self.base_url is not None:
            return self.base_url
        return self.environment.base_url

    def validate(self) -> None:
        if not isinstance(self.environment, Environment):
            raise ValueError("environment must be an Environment")
        if self.base_url is not None and not self.base_url:
            raise ValueError("base_url must not be empty")
        if (self.api_key is None) != (self.api_secret is None):
            raise ValueError("api_key and api_secret must be set together")
        if not self.api_version:
            raise ValueError("api_version must not be empty")
        self.transport.validate()
        self.pagination.validate()


__all__ = [
    "Environment",
    "TransportConfig",
    "PaginationConfig",
    "GoCardlessClientConfig",
]
