"""Tests for lazy cursor pagination."""

import pytest

from conftest import customer_json
from gocardless_client.services.customers import CustomerListRequest


def _page(ids, after):
    return {
        "customers": [customer_json(i) for i in ids],
        "meta": {"cursors": {"before": None, "after": after}, "limit": len(ids)},
    }


def _queue_three_pages(fake_api):
    fake_api.add("GET", "/customers", _page(["CU1", "CU2"], "CU2"))
    fake_api.add("GET", "/customers", _page(["CU3", "CU4"], "CU4"))
    fake_api.add("GET", "/customers", _page(["CU5"], None))


@pytest.mark.asyncio
async def test_all_follows_cursors(client, fake_api):
    _queue_three_pages(fake_api)

    ids = [c.id async for c in client.customers.all()]

    assert ids == ["CU1", "CU2", "CU3", "CU4", "CU5"]
    afters = [r.url.params.get("after") for r in fake_api.requests]
    assert afters == [None, "CU2", "CU4"]


@pytest.mark.asyncio
async def test_all_does_not_mutate_request(client, fake_api):
    _queue_three_pages(fake_api)
    request = CustomerListRequest(limit=2)

    await client.customers.all(request).to_list()

    assert request.after is None
    assert all(r.url.params["limit"] == "2" for r in fake_api.requests)


@pytest.mark.asyncio
async def test_all_starts_from_given_cursor(client, fake_api):
    fake_api.add("GET", "/customers", _page(["CU9"], None))

    records = await client.customers.all(CustomerListRequest(after="CU8")).to_list()

    assert [c.id for c in records] == ["CU9"]
    assert fake_api.requests[0].url.params["after"] == "CU8"


@pytest.mark.asyncio
async def test_pages_yields_whole_pages(client, fake_api):
    _queue_three_pages(fake_api)

    sizes = [len(page.records) async for page in client.customers.all().pages()]

    assert sizes == [2, 2, 1]


@pytest.mark.asyncio
async def test_is_lazy(client, fake_api):
    _queue_three_pages(fake_api)

    async for customer in client.customers.all():
        if customer.id == "CU2":
            break

    assert len(fake_api.requests) == 1


@pytest.mark.asyncio
async def test_empty_collection(client, fake_api):
    fake_api.add("GET", "/customers", {"customers": [], "meta": {"cursors": {"after": None}}})

    assert await client.customers.all().to_list() == []
    assert len(fake_api.requests) == 1
