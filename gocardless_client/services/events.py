"""Event endpoints: the same records webhooks deliver, listed on demand."""

from typing import Optional

from gocardless_client.engine.pagination import Paginator
from gocardless_client.engine.request import RequestSettings
from gocardless_client.models.requests import CreatedAtListRequest
from gocardless_client.models.resources import Event, ListResponse
from gocardless_client.services.base import BaseService


class EventListRequest(CreatedAtListRequest):
    action: Optional[str] = None
    resource_type: Optional[str] = None
    customer: Optional[str] = None
    mandate: Optional[str] = None
    payment: Optional[str] = None
    parent_event: Optional[str] = None


class EventService(BaseService[Event]):
    resource_cls = Event
    path = "/events"
    envelope = "events"

    async def list(
        self,
        request: Optional[EventListRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> ListResponse[Event]:
        return await self._list(request or EventListRequest(), request_settings)

    def all(
        self,
        request: Optional[EventListRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> Paginator[Event, EventListRequest]:
        return self._all(request or EventListRequest(), request_settings)

    async def get(
        self,
        identity: str,
        request_settings: Optional[RequestSettings] = None,
    ) -> Event:
        """Retrieve an event by ID (begins with "EV")."""
        return await self._get(identity, request_settings=request_settings)
