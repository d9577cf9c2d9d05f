"""
Lazy cursor pagination over list endpoints.

Each page's `meta.cursors.after` is fed back as the next request's `after`
until the API returns a null cursor. Pages are only fetched as the caller
consumes them.
"""

import logging
from typing import AsyncIterator, Awaitable, Callable, Generic, Optional, TypeVar

from gocardless_client.models.requests import ListRequest
from gocardless_client.models.resources import ListResponse, Resource

logger = logging.getLogger("gocardless_client.pagination")

T = TypeVar("T", bound=Resource)
R = TypeVar("R", bound=ListRequest)


class Paginator(Generic[T, R]):
    """
    Async iterator over every record a list request matches.

        async for customer in client.customers.all():
            ...

    The caller's request is never modified; each page is fetched with a
    copy carrying that page's cursor.
    """

    def __init__(
        self,
        fetch: Callable[[R], Awaitable[ListResponse[T]]],
        request: R,
    ):
        self._fetch = fetch
        self._request = request

    async def pages(self) -> AsyncIterator[ListResponse[T]]:
        """Yield one ListResponse per API call."""
        cursor: Optional[str] = self._request.after
        page_number = 0
        while True:
            page_request = self._request.model_copy(update={"after": cursor})
            page = await self._fetch(page_request)
            page_number += 1
            logger.debug("Fetched page %d (%d records)", page_number, len(page.records))
            yield page

            cursor = page.after
            if cursor is None:
                break

    async def _records(self) -> AsyncIterator[T]:
        async for page in self.pages():
            for record in page.records:
                yield record

    def __aiter__(self) -> AsyncIterator[T]:
        return self._records()

    async def to_list(self) -> list[T]:
        """Drain every page into a list. Beware of very large collections."""
        return [record async for record in self]
