"""
Payment endpoints.

Amounts are integers in the currency's minor unit (pence, cents, öre).
A payment can only be cancelled before it is submitted to the banks, and
only retried after it has failed.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from gocardless_client.engine.pagination import Paginator
from gocardless_client.engine.request import RequestSettings
from gocardless_client.models.enums import Currency, PaymentStatus
from gocardless_client.models.requests import ApiRequest, CreatedAtListRequest, CreateRequest
from gocardless_client.models.resources import ListResponse, Payment
from gocardless_client.services.base import BaseService


class PaymentCreateLinks(BaseModel):
    mandate: str


class PaymentCreateRequest(CreateRequest):
    amount: int = Field(gt=0)
    currency: Currency
    links: PaymentCreateLinks
    app_fee: Optional[int] = Field(default=None, ge=0)
    charge_date: Optional[date] = None
    description: Optional[str] = None
    reference: Optional[str] = None
    metadata: Optional[dict[str, str]] = None


class PaymentUpdateRequest(ApiRequest):
    metadata: Optional[dict[str, str]] = None


class PaymentListRequest(CreatedAtListRequest):
    customer: Optional[str] = None
    mandate: Optional[str] = None
    subscription: Optional[str] = None
    currency: Optional[Currency] = None
    status: Optional[PaymentStatus] = None


class PaymentActionRequest(ApiRequest):
    metadata: Optional[dict[str, str]] = None


class PaymentService(BaseService[Payment]):
    resource_cls = Payment
    path = "/payments"
    envelope = "payments"

    async def create(
        self,
        request: PaymentCreateRequest,
        request_settings: Optional[RequestSettings] = None,
    ) -> Payment:
        """Collect a payment against a mandate."""
        return await self._create(request, request_settings)

    async def list(
        self,
        request: Optional[PaymentListRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> ListResponse[Payment]:
        return await self._list(request or PaymentListRequest(), request_settings)

    def all(
        self,
        request: Optional[PaymentListRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> Paginator[Payment, PaymentListRequest]:
        return self._all(request or PaymentListRequest(), request_settings)

    async def get(
        self,
        identity: str,
        request_settings: Optional[RequestSettings] = None,
    ) -> Payment:
        return await self._get(identity, request_settings=request_settings)

    async def update(
        self,
        identity: str,
        request: Optional[PaymentUpdateRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> Payment:
        return await self._update(identity, request or PaymentUpdateRequest(), request_settings)

    async def cancel(
        self,
        identity: str,
        request: Optional[PaymentActionRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> Payment:
        return await self._action(identity, "cancel", request, request_settings)

    async def retry(
        self,
        identity: str,
        request: Optional[PaymentActionRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> Payment:
        """Resubmit a failed payment. The charge date is picked by the API."""
        return await self._action(identity, "retry", request, request_settings)
