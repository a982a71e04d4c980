"""Resource models, queries and params."""

from .api_keys import ApiKey, ApiKeyCreateParams, ApiKeyLinks, ApiKeyListQuery, ApiKeyUpdateParams
from .creditors import (
    Creditor,
    CreditorCreateParams,
    CreditorLinks,
    CreditorListQuery,
    CreditorUpdateParams,
)
from .customers import Customer, CustomerListQuery, CustomerParams
from .mandates import Mandate, MandateCreateParams, MandateLinks, MandateListQuery, MandateStatus
from .payouts import Payout, PayoutLinks, PayoutListQuery, PayoutStatus
from .redirect_flows import (
    RedirectFlow,
    RedirectFlowCreateParams,
    RedirectFlowLinks,
    RedirectFlowScheme,
)

__all__ = [
    "ApiKey",
    "ApiKeyLinks",
    "ApiKeyCreateParams",
    "ApiKeyUpdateParams",
    "ApiKeyListQuery",
    "Creditor",
    "CreditorLinks",
    "CreditorCreateParams",
    "CreditorUpdateParams",
    "CreditorListQuery",
    "Customer",
    "CustomerParams",
    "CustomerListQuery",
    "Mandate",
    "MandateLinks",
    "MandateStatus",
    "MandateCreateParams",
    "MandateListQuery",
    "Payout",
    "PayoutLinks",
    "PayoutStatus",
    "PayoutListQuery",
    "RedirectFlow",
    "RedirectFlowLinks",
    "RedirectFlowScheme",
    "RedirectFlowCreateParams",
]
