"""
Customer bank account endpoints.

Bank details are given either as local details (account_number with
bank_code/branch_code), as an IBAN, or as a token from a hosted flow.
Disabled bank accounts cannot be re-enabled; create a new one instead.
"""

from typing import Optional

from pydantic import BaseModel

from gocardless_client.engine.pagination import Paginator
from gocardless_client.engine.request import RequestSettings
from gocardless_client.models.requests import ApiRequest, CreatedAtListRequest, CreateRequest
from gocardless_client.models.resources import CustomerBankAccount, ListResponse
from gocardless_client.services.base import BaseService


class CustomerBankAccountCreateLinks(BaseModel):
    customer: Optional[str] = None
    customer_bank_account_token: Optional[str] = None


class CustomerBankAccountCreateRequest(CreateRequest):
    account_holder_name: Optional[str] = None
    account_number: Optional[str] = None
    bank_code: Optional[str] = None
    branch_code: Optional[str] = None
    country_code: Optional[str] = None
    currency: Optional[str] = None
    iban: Optional[str] = None
    metadata: Optional[dict[str, str]] = None
    links: Optional[CustomerBankAccountCreateLinks] = None


class CustomerBankAccountUpdateRequest(ApiRequest):
    metadata: Optional[dict[str, str]] = None


class CustomerBankAccountListRequest(CreatedAtListRequest):
    customer: Optional[str] = None
    enabled: Optional[bool] = None


class CustomerBankAccountService(BaseService[CustomerBankAccount]):
    resource_cls = CustomerBankAccount
    path = "/customer_bank_accounts"
    envelope = "customer_bank_accounts"

    async def create(
        self,
        request: Optional[CustomerBankAccountCreateRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> CustomerBankAccount:
        return await self._create(request or CustomerBankAccountCreateRequest(), request_settings)

    async def list(
        self,
        request: Optional[CustomerBankAccountListRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> ListResponse[CustomerBankAccount]:
        return await self._list(request or CustomerBankAccountListRequest(), request_settings)

    def all(
        self,
        request: Optional[CustomerBankAccountListRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> Paginator[CustomerBankAccount, CustomerBankAccountListRequest]:
        return self._all(request or CustomerBankAccountListRequest(), request_settings)

    async def get(
        self,
        identity: str,
        request_settings: Optional[RequestSettings] = None,
    ) -> CustomerBankAccount:
        return await self._get(identity, request_settings=request_settings)

    async def update(
        self,
        identity: str,
        request: Optional[CustomerBankAccountUpdateRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> CustomerBankAccount:
        """Only metadata can be updated."""
        return await self._update(identity, request or CustomerBankAccountUpdateRequest(), request_settings)

    async def disable(
        self,
        identity: str,
        request_settings: Optional[RequestSettings] = None,
    ) -> CustomerBankAccount:
        """Disable the account and cancel its mandates. This cannot be undone."""
        return await self._action(identity, "disable", request_settings=request_settings)
