"""
Mandate endpoints.

A mandate authorises collecting payments from a customer bank account.

POST /mandates                               - Create a mandate.
GET  /mandates                               - List mandates.
GET  /mandates/:identity                     - Get a single mandate.
PUT  /mandates/:identity                     - Update metadata.
POST /mandates/:identity/actions/cancel      - Cancel; pending payments are cancelled too.
POST /mandates/:identity/actions/reinstate   - Reinstate a cancelled or expired mandate.
"""

from typing import Optional

from pydantic import BaseModel

from gocardless_client.engine.pagination import Paginator
from gocardless_client.engine.request import RequestSettings
from gocardless_client.models.enums import MandateStatus, Scheme
from gocardless_client.models.requests import ApiRequest, CreatedAtListRequest, CreateRequest
from gocardless_client.models.resources import ListResponse, Mandate
from gocardless_client.services.base import BaseService


class MandateCreateLinks(BaseModel):
    customer_bank_account: str
    creditor: Optional[str] = None


class MandateCreateRequest(CreateRequest):
    links: MandateCreateLinks
    reference: Optional[str] = None
    scheme: Optional[Scheme] = None
    metadata: Optional[dict[str, str]] = None


class MandateUpdateRequest(ApiRequest):
    metadata: Optional[dict[str, str]] = None


class MandateListRequest(CreatedAtListRequest):
    customer: Optional[str] = None
    customer_bank_account: Optional[str] = None
    reference: Optional[str] = None
    status: Optional[list[MandateStatus]] = None


class MandateActionRequest(ApiRequest):
    metadata: Optional[dict[str, str]] = None


class MandateService(BaseService[Mandate]):
    resource_cls = Mandate
    path = "/mandates"
    envelope = "mandates"

    async def create(
        self,
        request: MandateCreateRequest,
        request_settings: Optional[RequestSettings] = None,
    ) -> Mandate:
        return await self._create(request, request_settings)

    async def list(
        self,
        request: Optional[MandateListRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> ListResponse[Mandate]:
        return await self._list(request or MandateListRequest(), request_settings)

    def all(
        self,
        request: Optional[MandateListRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> Paginator[Mandate, MandateListRequest]:
        return self._all(request or MandateListRequest(), request_settings)

    async def get(
        self,
        identity: str,
        request_settings: Optional[RequestSettings] = None,
    ) -> Mandate:
        """Retrieve a mandate by ID (begins with "MD")."""
        return await self._get(identity, request_settings=request_settings)

    async def update(
        self,
        identity: str,
        request: Optional[MandateUpdateRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> Mandate:
        return await self._update(identity, request or MandateUpdateRequest(), request_settings)

    async def cancel(
        self,
        identity: str,
        request: Optional[MandateActionRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> Mandate:
        return await self._action(identity, "cancel", request, request_settings)

    async def reinstate(
        self,
        identity: str,
        request: Optional[MandateActionRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> Mandate:
        return await self._action(identity, "reinstate", request, request_settings)
