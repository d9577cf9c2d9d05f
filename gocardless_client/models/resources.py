"""
Pydantic models for API resources.

Models mirror the JSON the API returns. Unknown fields are ignored and
unknown enum values are kept as plain strings, so a newer API adding a
scheme or status does not break deserialization.
"""

from datetime import date, datetime
from typing import Annotated, Any, Generic, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, PlainValidator

from gocardless_client.models.enums import Currency, MandateStatus, PaymentStatus, Scheme


def lenient_enum(enum_cls):
    """Field type accepting enum values and passing unknown strings through."""

    def _coerce(value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, enum_cls):
            try:
                return enum_cls(value)
            except ValueError:
                return value
        return value

    return Annotated[Union[enum_cls, str], PlainValidator(_coerce)]


SchemeField = lenient_enum(Scheme)
CurrencyField = lenient_enum(Currency)
MandateStatusField = lenient_enum(MandateStatus)
PaymentStatusField = lenient_enum(PaymentStatus)


class ApiResponse(BaseModel):
    """Raw details of the HTTP response a resource was read from."""

    status_code: int
    headers: dict[str, str] = Field(default_factory=dict)
    request_id: Optional[str] = None
    body: Any = None


class Resource(BaseModel):
    model_config = ConfigDict(extra="ignore")

    _api_response: Optional[ApiResponse] = PrivateAttr(default=None)

    @property
    def api_response(self) -> Optional[ApiResponse]:
        return self._api_response


class Customer(Resource):
    """Contact details for a customer."""

    id: str
    created_at: Optional[datetime] = None
    email: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    company_name: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    address_line3: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country_code: Optional[str] = None
    language: Optional[str] = None
    swedish_identity_number: Optional[str] = None
    metadata: dict[str, str] = Field(default_factory=dict)


class CustomerBankAccountLinks(BaseModel):
    customer: Optional[str] = None


class CustomerBankAccount(Resource):
    """A customer's bank account. Only the last two digits are ever returned."""

    id: str
    created_at: Optional[datetime] = None
    account_holder_name: Optional[str] = None
    account_number_ending: Optional[str] = None
    bank_name: Optional[str] = None
    country_code: Optional[str] = None
    currency: Optional[CurrencyField] = None
    enabled: Optional[bool] = None
    metadata: dict[str, str] = Field(default_factory=dict)
    links: CustomerBankAccountLinks = Field(default_factory=CustomerBankAccountLinks)


class MandateLinks(BaseModel):
    creditor: Optional[str] = None
    customer: Optional[str] = None
    customer_bank_account: Optional[str] = None
    new_mandate: Optional[str] = None


class Mandate(Resource):
    """Authorisation to collect payments from a customer's bank account."""

    id: str
    created_at: Optional[datetime] = None
    reference: Optional[str] = None
    scheme: Optional[SchemeField] = None
    status: Optional[MandateStatusField] = None
    next_possible_charge_date: Optional[date] = None
    payments_require_approval: Optional[bool] = None
    metadata: dict[str, str] = Field(default_factory=dict)
    links: MandateLinks = Field(default_factory=MandateLinks)


class PaymentLinks(BaseModel):
    creditor: Optional[str] = None
    mandate: Optional[str] = None
    payout: Optional[str] = None
    subscription: Optional[str] = None


class Payment(Resource):
    """A single collection against a mandate. Amounts are in minor units."""

    id: str
    created_at: Optional[datetime] = None
    amount: Optional[int] = None
    amount_refunded: Optional[int] = None
    charge_date: Optional[date] = None
    currency: Optional[CurrencyField] = None
    description: Optional[str] = None
    reference: Optional[str] = None
    status: Optional[PaymentStatusField] = None
    metadata: dict[str, str] = Field(default_factory=dict)
    links: PaymentLinks = Field(default_factory=PaymentLinks)


class RedirectFlowLinks(BaseModel):
    """
    Resources tied to a redirect flow.

    `customer`, `customer_bank_account` and `mandate` are only present once
    the flow has been completed.
    """

    creditor: Optional[str] = None
    customer: Optional[str] = None
    customer_bank_account: Optional[str] = None
    mandate: Optional[str] = None


class RedirectFlow(Resource):
    """
    A hosted payment page session for setting up a mandate.

    Create the flow, send the customer to `redirect_url`, then complete it
    with the same `session_token` once they come back to
    `success_redirect_url`. Flows expire 30 minutes after creation.
    """

    id: str
    created_at: Optional[datetime] = None
    description: Optional[str] = None
    redirect_url: Optional[str] = None
    scheme: Optional[SchemeField] = None
    session_token: Optional[str] = None
    success_redirect_url: Optional[str] = None
    links: RedirectFlowLinks = Field(default_factory=RedirectFlowLinks)


class BankDetailsLookup(Resource):
    """Name and reachability of a bank. Empty schemes means unreachable."""

    available_debit_schemes: list[SchemeField] = Field(default_factory=list)
    bank_name: Optional[str] = None
    bic: Optional[str] = None


class EventDetails(BaseModel):
    model_config = ConfigDict(extra="ignore")

    origin: Optional[str] = None
    cause: Optional[str] = None
    description: Optional[str] = None
    scheme: Optional[str] = None
    reason_code: Optional[str] = None


class EventLinks(BaseModel):
    model_config = ConfigDict(extra="allow")

    customer: Optional[str] = None
    customer_bank_account: Optional[str] = None
    mandate: Optional[str] = None
    new_customer_bank_account: Optional[str] = None
    new_mandate: Optional[str] = None
    organisation: Optional[str] = None
    parent_event: Optional[str] = None
    payment: Optional[str] = None
    payout: Optional[str] = None
    previous_customer_bank_account: Optional[str] = None
    refund: Optional[str] = None
    subscription: Optional[str] = None


class Event(Resource):
    """Something that happened to a resource, as listed or sent by webhook."""

    id: str
    created_at: Optional[datetime] = None
    action: Optional[str] = None
    resource_type: Optional[str] = None
    details: EventDetails = Field(default_factory=EventDetails)
    metadata: dict[str, Any] = Field(default_factory=dict)
    links: EventLinks = Field(default_factory=EventLinks)


class Cursors(BaseModel):
    before: Optional[str] = None
    after: Optional[str] = None


class ListMeta(BaseModel):
    model_config = ConfigDict(extra="ignore")

    cursors: Cursors = Field(default_factory=Cursors)
    limit: Optional[int] = None


T = TypeVar("T", bound=Resource)


class ListResponse(BaseModel, Generic[T]):
    """One page of a cursor-paginated list."""

    records: list[T] = Field(default_factory=list)
    meta: ListMeta = Field(default_factory=ListMeta)

    _api_response: Optional[ApiResponse] = PrivateAttr(default=None)

    @property
    def api_response(self) -> Optional[ApiResponse]:
        return self._api_response

    @property
    def after(self) -> Optional[str]:
        return self.meta.cursors.after

    @property
    def before(self) -> Optional[str]:
        return self.meta.cursors.before
