"""Public client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .config import Environment, GoCardlessClientConfig
from .core.errors import GoCardlessClientClosedError, GoCardlessConfigurationError
from .core.executor import RequestExecutor, Transport
from .core.transport import SyncTransport
from .resources.api_keys import ApiKeyService
from .resources.creditors import CreditorService
from .resources.customers import CustomerService
from .resources.mandates import MandateService
from .resources.payouts import PayoutService
from .resources.redirect_flows import RedirectFlowService


def validate_client_config(config: GoCardlessClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise GoCardlessConfigurationError(str(exc)) from exc


class GoCardlessClient:
    """Public GoCardless API client."""

    def __init__(
        self,
        *,
        config: GoCardlessClientConfig | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config or GoCardlessClientConfig()
        validate_client_config(self._config)

        self._transport = transport or SyncTransport(self._config)
        self._closed = False
        executor = RequestExecutor(
            self._transport,
            max_pages=self._config.pagination.max_pages,
            ensure_open=self._ensure_open,
        )
        self.api_keys = ApiKeyService(executor)
        self.creditors = CreditorService(executor)
        self.customers = CustomerService(executor)
        self.mandates = MandateService(executor)
        self.payouts = PayoutService(executor)
        self.redirect_flows = RedirectFlowService(executor)

    @classmethod
    def create(
        cls,
        api_key: str,
        api_secret: str,
        environment: Environment = Environment.LIVE,
    ) -> "GoCardlessClient":
        return cls(
            config=GoCardlessClientConfig(
                environment=environment,
                api_key=api_key,
                api_secret=api_secret,
            )
        )

    def _ensure_open(self) -> None:
        if self._closed:
            raise GoCardlessClientClosedError("GoCardlessClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "GoCardlessClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "validate_client_config",
    "GoCardlessClient",
]
