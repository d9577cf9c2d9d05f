"""Enumerations mirroring the API's string-valued fields."""

from enum import Enum


class Environment(str, Enum):
    """Which API host the client talks to."""

    LIVE = "live"
    SANDBOX = "sandbox"


class Scheme(str, Enum):
    """Direct Debit schemes a mandate or bank account can use."""

    AUTOGIRO = "autogiro"
    BACS = "bacs"
    BECS = "becs"
    BECS_NZ = "becs_nz"
    BETALINGSSERVICE = "betalingsservice"
    PAD = "pad"
    SEPA_CORE = "sepa_core"


class Currency(str, Enum):
    """ISO 4217 currencies accepted for payments and bank accounts."""

    AUD = "AUD"
    CAD = "CAD"
    DKK = "DKK"
    EUR = "EUR"
    GBP = "GBP"
    NZD = "NZD"
    SEK = "SEK"
    USD = "USD"


class MandateStatus(str, Enum):
    """Lifecycle states for a mandate."""

    PENDING_CUSTOMER_APPROVAL = "pending_customer_approval"
    PENDING_SUBMISSION = "pending_submission"
    SUBMITTED = "submitted"
    ACTIVE = "active"
    FAILED = "failed"
    CANCELLED = "cancelled"
    EXPIRED = "expired"


class PaymentStatus(str, Enum):
    """Lifecycle states for a payment."""

    PENDING_CUSTOMER_APPROVAL = "pending_customer_approval"
    PENDING_SUBMISSION = "pending_submission"
    SUBMITTED = "submitted"
    CONFIRMED = "confirmed"
    PAID_OUT = "paid_out"
    CANCELLED = "cancelled"
    CUSTOMER_APPROVAL_DENIED = "customer_approval_denied"
    FAILED = "failed"
    CHARGED_BACK = "charged_back"
