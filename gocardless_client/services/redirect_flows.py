"""
Redirect flow endpoints.

The flow for setting up a mandate through the hosted payment pages:

  1. Create a redirect flow and send the customer to its `redirect_url`.
  2. The customer enters their details and is sent back to your
     `success_redirect_url` with `redirect_flow_id` in the query string.
  3. Complete the flow with the same `session_token`. This creates the
     customer, their bank account and the mandate, whose IDs appear in
     the completed flow's `links`.

Flows expire 30 minutes after creation and cannot be completed after that.
"""

from typing import Optional

from pydantic import BaseModel

from gocardless_client.engine.request import RequestSettings
from gocardless_client.models.enums import Scheme
from gocardless_client.models.requests import ApiRequest, CreateRequest
from gocardless_client.models.resources import RedirectFlow
from gocardless_client.services.base import BaseService


class RedirectFlowCreateLinks(BaseModel):
    creditor: Optional[str] = None


class PrefilledCustomer(BaseModel):
    """Details shown pre-filled on the payment pages."""

    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    address_line3: Optional[str] = None
    city: Optional[str] = None
    company_name: Optional[str] = None
    country_code: Optional[str] = None
    email: Optional[str] = None
    family_name: Optional[str] = None
    given_name: Optional[str] = None
    language: Optional[str] = None
    postal_code: Optional[str] = None
    region: Optional[str] = None
    swedish_identity_number: Optional[str] = None


class RedirectFlowCreateRequest(CreateRequest):
    session_token: str
    success_redirect_url: str
    description: Optional[str] = None
    scheme: Optional[Scheme] = None
    links: Optional[RedirectFlowCreateLinks] = None
    prefilled_customer: Optional[PrefilledCustomer] = None


class RedirectFlowCompleteRequest(ApiRequest):
    session_token: str


class RedirectFlowService(BaseService[RedirectFlow]):
    resource_cls = RedirectFlow
    path = "/redirect_flows"
    envelope = "redirect_flows"

    async def create(
        self,
        request: RedirectFlowCreateRequest,
        request_settings: Optional[RequestSettings] = None,
    ) -> RedirectFlow:
        return await self._create(request, request_settings)

    async def get(
        self,
        identity: str,
        request_settings: Optional[RequestSettings] = None,
    ) -> RedirectFlow:
        """Retrieve a redirect flow by ID (begins with "RE")."""
        return await self._get(identity, request_settings=request_settings)

    async def complete(
        self,
        identity: str,
        session_token: str,
        request_settings: Optional[RequestSettings] = None,
    ) -> RedirectFlow:
        """
        Complete a flow the customer has filled in.

        Args:
            identity: The redirect flow ID.
            session_token: The token the flow was created with. It must match,
                so the customer who started the flow is the one completing it.
        """
        return await self._action(
            identity,
            "complete",
            RedirectFlowCompleteRequest(session_token=session_token),
            request_settings,
        )
