from gocardless_client.services.bank_details_lookups import BankDetailsLookupCreateRequest, BankDetailsLookupService
from gocardless_client.services.customer_bank_accounts import (
    CustomerBankAccountCreateLinks,
    CustomerBankAccountCreateRequest,
    CustomerBankAccountListRequest,
    CustomerBankAccountService,
    CustomerBankAccountUpdateRequest,
)
from gocardless_client.services.customers import (
    CustomerCreateRequest,
    CustomerListRequest,
    CustomerService,
    CustomerUpdateRequest,
)
from gocardless_client.services.events import EventListRequest, EventService
from gocardless_client.services.mandates import (
    MandateActionRequest,
    MandateCreateLinks,
    MandateCreateRequest,
    MandateListRequest,
    MandateService,
    MandateUpdateRequest,
)
from gocardless_client.services.payments import (
    PaymentActionRequest,
    PaymentCreateLinks,
    PaymentCreateRequest,
    PaymentListRequest,
    PaymentService,
    PaymentUpdateRequest,
)
from gocardless_client.services.redirect_flows import (
    PrefilledCustomer,
    RedirectFlowCompleteRequest,
    RedirectFlowCreateLinks,
    RedirectFlowCreateRequest,
    RedirectFlowService,
)

__all__ = [
    "BankDetailsLookupCreateRequest",
    "BankDetailsLookupService",
    "CustomerBankAccountCreateLinks",
    "CustomerBankAccountCreateRequest",
    "CustomerBankAccountListRequest",
    "CustomerBankAccountService",
    "CustomerBankAccountUpdateRequest",
    "CustomerCreateRequest",
    "CustomerListRequest",
    "CustomerService",
    "CustomerUpdateRequest",
    "EventListRequest",
    "EventService",
    "MandateActionRequest",
    "MandateCreateLinks",
    "MandateCreateRequest",
    "MandateListRequest",
    "MandateService",
    "MandateUpdateRequest",
    "PaymentActionRequest",
    "PaymentCreateLinks",
    "PaymentCreateRequest",
    "PaymentListRequest",
    "PaymentService",
    "PaymentUpdateRequest",
    "PrefilledCustomer",
    "RedirectFlowCompleteRequest",
    "RedirectFlowCreateLinks",
    "RedirectFlowCreateRequest",
    "RedirectFlowService",
]
