"""
Customer endpoints.

Customers hold contact details. A customer can have several bank accounts,
each of which can have several Direct Debit mandates.

POST /customers             - Create a customer.
GET  /customers             - List customers (cursor-paginated).
GET  /customers/:identity   - Get a single customer.
PUT  /customers/:identity   - Update a customer.

`swedish_identity_number` may only be supplied for Swedish customers, and
must be supplied to set up an Autogiro mandate.
"""

from typing import Optional

from pydantic import Field

from gocardless_client.engine.pagination import Paginator
from gocardless_client.engine.request import RequestSettings
from gocardless_client.models.requests import ApiRequest, CreatedAtListRequest, CreateRequest
from gocardless_client.models.resources import Customer, ListResponse
from gocardless_client.services.base import BaseService


class CustomerFields(ApiRequest):
    """Fields shared by create and update. `company_name` or both names are required."""

    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    address_line3: Optional[str] = None
    city: Optional[str] = None
    company_name: Optional[str] = None
    country_code: Optional[str] = None  # ISO 3166-1 alpha-2
    email: Optional[str] = None
    family_name: Optional[str] = None
    given_name: Optional[str] = None
    language: Optional[str] = None  # ISO 639-1, defaults from country_code
    metadata: Optional[dict[str, str]] = Field(default=None, max_length=3)
    postal_code: Optional[str] = None
    region: Optional[str] = None
    swedish_identity_number: Optional[str] = None


class CustomerCreateRequest(CustomerFields, CreateRequest):
    pass


class CustomerUpdateRequest(CustomerFields):
    pass


class CustomerListRequest(CreatedAtListRequest):
    pass


class CustomerService(BaseService[Customer]):
    resource_cls = Customer
    path = "/customers"
    envelope = "customers"

    async def create(
        self,
        request: Optional[CustomerCreateRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> Customer:
        """Create a new customer."""
        return await self._create(request or CustomerCreateRequest(), request_settings)

    async def list(
        self,
        request: Optional[CustomerListRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> ListResponse[Customer]:
        """Return one page of customers."""
        return await self._list(request or CustomerListRequest(), request_settings)

    def all(
        self,
        request: Optional[CustomerListRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> Paginator[Customer, CustomerListRequest]:
        """Like list(), but lazily follows cursors across every page."""
        return self._all(request or CustomerListRequest(), request_settings)

    async def get(
        self,
        identity: str,
        request_settings: Optional[RequestSettings] = None,
    ) -> Customer:
        """Retrieve a customer by ID (begins with "CU")."""
        return await self._get(identity, request_settings=request_settings)

    async def update(
        self,
        identity: str,
        request: Optional[CustomerUpdateRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> Customer:
        """Update a customer. Accepts every field create does."""
        return await self._update(identity, request or CustomerUpdateRequest(), request_settings)
