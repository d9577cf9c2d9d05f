from gocardless_client.models.enums import Currency, Environment, MandateStatus, PaymentStatus, Scheme
from gocardless_client.models.requests import (
    ApiRequest,
    CreatedAtFilter,
    CreatedAtListRequest,
    CreateRequest,
    ListRequest,
)
from gocardless_client.models.resources import (
    ApiResponse,
    BankDetailsLookup,
    Cursors,
    Customer,
    CustomerBankAccount,
    Event,
    ListMeta,
    ListResponse,
    Mandate,
    Payment,
    RedirectFlow,
    RedirectFlowLinks,
    Resource,
)

__all__ = [
    "ApiRequest",
    "ApiResponse",
    "BankDetailsLookup",
    "CreateRequest",
    "CreatedAtFilter",
    "CreatedAtListRequest",
    "Currency",
    "Cursors",
    "Customer",
    "CustomerBankAccount",
    "Environment",
    "Event",
    "ListMeta",
    "ListRequest",
    "ListResponse",
    "Mandate",
    "MandateStatus",
    "Payment",
    "PaymentStatus",
    "RedirectFlow",
    "RedirectFlowLinks",
    "Resource",
    "Scheme",
]
