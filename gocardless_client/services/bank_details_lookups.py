"""
Bank details lookups: the name of a bank and which schemes can reach it.

Lookups have no ID and cannot be fetched again, so a create is neither
retried nor deduplicated with an idempotency key.
"""

from typing import Optional

from gocardless_client.engine.request import RequestSettings
from gocardless_client.models.requests import ApiRequest
from gocardless_client.models.resources import BankDetailsLookup
from gocardless_client.services.base import BaseService


class BankDetailsLookupCreateRequest(ApiRequest):
    """Local details (account_number, bank_code, branch_code) or an IBAN."""

    account_number: Optional[str] = None
    bank_code: Optional[str] = None
    branch_code: Optional[str] = None
    country_code: Optional[str] = None
    iban: Optional[str] = None


class BankDetailsLookupService(BaseService[BankDetailsLookup]):
    resource_cls = BankDetailsLookup
    path = "/bank_details_lookups"
    envelope = "bank_details_lookups"

    async def create(
        self,
        request: Optional[BankDetailsLookupCreateRequest] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> BankDetailsLookup:
        return await self._create(
            request or BankDetailsLookupCreateRequest(),
            request_settings,
            fetch_on_conflict=False,
        )
