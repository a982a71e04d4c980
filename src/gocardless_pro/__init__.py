"""Public package exports for the GoCardless Pro client."""

from .client import GoCardlessClient
from .config import Environment, GoCardlessClientConfig

__all__ = ["GoCardlessClient", "GoCardlessClientConfig", "Environment"]
