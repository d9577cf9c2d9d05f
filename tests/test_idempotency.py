"""Tests for idempotent creation and conflict resolution."""

import httpx
import pytest

from conftest import api_error, customer_json
from gocardless_client.client import GoCardlessClient
from gocardless_client.errors import InvalidStateError
from gocardless_client.services.customers import CustomerCreateRequest


def _conflict(resource_id="CU_EXISTING"):
    return api_error(
        "invalid_state",
        409,
        "A resource has already been created with this idempotency key",
        errors=[{
            "reason": "idempotent_creation_conflict",
            "message": "A resource has already been created with this idempotency key",
            "links": {"conflicting_resource_id": resource_id},
        }],
    )


@pytest.mark.asyncio
async def test_conflict_returns_existing_resource(client, fake_api):
    fake_api.add("POST", "/customers", _conflict(), status=409)
    fake_api.add("GET", "/customers/CU_EXISTING", {"customers": customer_json("CU_EXISTING")})

    customer = await client.customers.create(CustomerCreateRequest(company_name="Acme", idempotency_key="k1"))

    assert customer.id == "CU_EXISTING"
    assert [r.method for r in fake_api.requests] == ["POST", "GET"]


@pytest.mark.asyncio
async def test_conflict_raises_when_configured(fake_api):
    fake_api.add("POST", "/customers", _conflict(), status=409)
    http = httpx.AsyncClient(transport=httpx.MockTransport(fake_api.handler))
    client = GoCardlessClient(
        access_token="t",
        http_client=http,
        raise_on_idempotency_conflict=True,
        retry_delay=0,
    )

    with pytest.raises(InvalidStateError) as exc_info:
        await client.customers.create(CustomerCreateRequest(company_name="Acme"))

    assert exc_info.value.conflicting_resource_id == "CU_EXISTING"
    assert len(fake_api.requests) == 1
    await http.aclose()


@pytest.mark.asyncio
async def test_other_invalid_state_errors_propagate(client, fake_api):
    fake_api.add(
        "POST",
        "/customers",
        api_error("invalid_state", 409, "Nope", errors=[{"reason": "something_else", "message": "Nope"}]),
        status=409,
    )

    with pytest.raises(InvalidStateError):
        await client.customers.create(CustomerCreateRequest(company_name="Acme"))
    assert len(fake_api.requests) == 1


@pytest.mark.asyncio
async def test_retries_reuse_the_same_key(client, fake_api):
    fake_api.add("POST", "/customers", api_error("gocardless", 500, "Internal error"), status=500)
    fake_api.add("POST", "/customers", {"customers": customer_json()}, status=201)

    await client.customers.create(CustomerCreateRequest(company_name="Acme"))

    keys = {r.headers["Idempotency-Key"] for r in fake_api.requests}
    assert len(fake_api.requests) == 2
    assert len(keys) == 1


@pytest.mark.asyncio
async def test_each_create_gets_a_fresh_key(client, fake_api):
    fake_api.add("POST", "/customers", {"customers": customer_json()}, status=201)

    await client.customers.create(CustomerCreateRequest(company_name="Acme"))
    await client.customers.create(CustomerCreateRequest(company_name="Acme"))

    first, second = (r.headers["Idempotency-Key"] for r in fake_api.requests)
    assert first != second
