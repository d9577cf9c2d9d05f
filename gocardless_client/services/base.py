"""
Shared plumbing for resource services.

Each service names its collection path and envelope key and gets typed
create/get/list/update/action helpers that all route through
GoCardlessClient.execute. Concrete services only declare their request
models and which operations the API supports for that resource.
"""

from typing import TYPE_CHECKING, Generic, Optional, TypeVar

from gocardless_client.engine.pagination import Paginator
from gocardless_client.engine.request import RequestSettings
from gocardless_client.errors import MalformedResponseError
from gocardless_client.models.requests import ApiRequest, ListRequest
from gocardless_client.models.resources import ApiResponse, ListResponse, Resource

if TYPE_CHECKING:
    from gocardless_client.client import GoCardlessClient

T = TypeVar("T", bound=Resource)
L = TypeVar("L", bound=ListRequest)


class BaseService(Generic[T]):
    """Base class for services. Access instances through a GoCardlessClient."""

    resource_cls: type[T]
    path: str  # e.g. "/customers"
    envelope: str  # e.g. "customers"

    def __init__(self, client: "GoCardlessClient"):
        self._client = client

    def _parse(self, response: ApiResponse) -> T:
        body = response.body if isinstance(response.body, dict) else {}
        data = body.get(self.envelope)
        if not isinstance(data, dict):
            raise MalformedResponseError(
                f"Expected a '{self.envelope}' object in the response",
                status_code=response.status_code,
                body=str(response.body),
            )
        resource = self.resource_cls.model_validate(data)
        resource._api_response = response
        return resource

    def _parse_list(self, response: ApiResponse) -> ListResponse[T]:
        body = response.body if isinstance(response.body, dict) else {}
        records = body.get(self.envelope)
        if not isinstance(records, list):
            raise MalformedResponseError(
                f"Expected a '{self.envelope}' list in the response",
                status_code=response.status_code,
                body=str(response.body),
            )
        page = ListResponse[self.resource_cls].model_validate(
            {"records": records, "meta": body.get("meta") or {}}
        )
        page._api_response = response
        return page

    async def _get_raw(
        self,
        identity: str,
        request: Optional[ApiRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> ApiResponse:
        return await self._client.execute(
            "GET",
            f"{self.path}/:identity",
            {"identity": identity},
            request,
            request_settings=request_settings,
        )

    async def _create(
        self,
        request: ApiRequest,
        request_settings: Optional[RequestSettings] = None,
        fetch_on_conflict: bool = True,
    ) -> T:
        async def get_by_id(identity: str) -> ApiResponse:
            return await self._get_raw(identity, request_settings=request_settings)

        response = await self._client.execute(
            "POST",
            self.path,
            request=request,
            payload_key=self.envelope,
            get_by_id=get_by_id if fetch_on_conflict else None,
            request_settings=request_settings,
        )
        return self._parse(response)

    async def _get(
        self,
        identity: str,
        request: Optional[ApiRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> T:
        return self._parse(await self._get_raw(identity, request, request_settings))

    async def _list(
        self,
        request: ListRequest,
        request_settings: Optional[RequestSettings] = None,
    ) -> ListResponse[T]:
        response = await self._client.execute(
            "GET",
            self.path,
            request=request,
            request_settings=request_settings,
        )
        return self._parse_list(response)

    def _all(
        self,
        request: L,
        request_settings: Optional[RequestSettings] = None,
    ) -> Paginator[T, L]:
        async def fetch(page_request: L) -> ListResponse[T]:
            return await self._list(page_request, request_settings)

        return Paginator(fetch, request)

    async def _update(
        self,
        identity: str,
        request: ApiRequest,
        request_settings: Optional[RequestSettings] = None,
    ) -> T:
        response = await self._client.execute(
            "PUT",
            f"{self.path}/:identity",
            {"identity": identity},
            request,
            payload_key=self.envelope,
            request_settings=request_settings,
        )
        return self._parse(response)

    async def _action(
        self,
        identity: str,
        action: str,
        request: Optional[ApiRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> T:
        """POST to `/<collection>/:identity/actions/<action>` with a `data` envelope."""
        response = await self._client.execute(
            "POST",
            f"{self.path}/:identity/actions/{action}",
            {"identity": identity},
            request,
            payload_key="data",
            request_settings=request_settings,
        )
        return self._parse(response)
