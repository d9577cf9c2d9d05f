"""Shared test fixtures."""

import json
from typing import Any, Optional, Union

import httpx
import pytest
import pytest_asyncio

from gocardless_client.client import GoCardlessClient


class FakeApi:
    """
    In-memory stand-in for the API, served through httpx.MockTransport.

    Responses are queued per (method, path). The last queued response for a
    route is repeated once the others are used up.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], list[Union[tuple, Exception]]] = {}

    def add(
        self,
        method: str,
        path: str,
        body: Any = None,
        status: int = 200,
        headers: Optional[dict[str, str]] = None,
        text: Optional[str] = None,
    ) -> None:
        self._routes.setdefault((method, path), []).append((status, body, headers or {}, text))

    def fail(self, method: str, path: str, error: Exception) -> None:
        self._routes.setdefault((method, path), []).append(error)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self._routes.get((request.method, request.url.path))
        if not queue:
            return httpx.Response(404, json=api_error("invalid_api_usage", 404, "Resource not found"))
        item = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(item, Exception):
            raise item
        status, body, headers, text = item
        if text is not None:
            return httpx.Response(status, text=text, headers=headers)
        return httpx.Response(status, json=body, headers=headers)

    def body_of(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


def api_error(type: str, code: int, message: str, errors: Optional[list] = None) -> dict:
    return {
        "error": {
            "type": type,
            "code": code,
            "message": message,
            "request_id": "REQ-ERR-1",
            "documentation_url": "https://developer.gocardless.com/api-reference#errors",
            "errors": errors or [],
        }
    }


def customer_json(identity: str = "CU123", **fields: Any) -> dict:
    data = {
        "id": identity,
        "created_at": "2024-03-01T10:00:00.000Z",
        "email": "jane@example.com",
        "given_name": "Jane",
        "family_name": "Doe",
        "country_code": "GB",
        "metadata": {},
    }
    data.update(fields)
    return data


@pytest.fixture
def fake_api():
    return FakeApi()


@pytest_asyncio.fixture
async def client(fake_api: FakeApi):
    """Client wired to the fake API, with instant retries."""
    http = httpx.AsyncClient(transport=httpx.MockTransport(fake_api.handler))
    gc = GoCardlessClient(
        access_token="sandbox_test_token",
        environment="sandbox",
        http_client=http,
        max_retries=2,
        retry_delay=0,
        max_retry_delay=0,
    )
    yield gc
    await http.aclose()
