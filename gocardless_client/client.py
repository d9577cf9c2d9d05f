"""
The API client and its shared request pipeline.

Every service call goes through GoCardlessClient.execute:

  1. Path templating (`/customers/:identity`)
  2. Encoding (JSON envelope for writes, bracketed query string for reads)
  3. Headers (auth, API version, idempotency key for creates)
  4. Sending, with retries when the request is safe to repeat
  5. Error mapping (error envelope -> typed exception)
  6. Idempotency conflict resolution (return the resource created earlier)

Usage:

    async with GoCardlessClient(access_token="...", environment="sandbox") as client:
        customer = await client.customers.get("CU123")
"""

import time
import uuid
from typing import Any, Awaitable, Callable, Optional, Union

import httpx

from gocardless_client.audit.logger import log_idempotency_conflict, log_request
from gocardless_client.config import BASE_URLS, settings
from gocardless_client.engine.request import RequestSettings, build_headers, build_path, encode_query
from gocardless_client.engine.retry import with_retry
from gocardless_client.errors import ApiError, InvalidStateError, MalformedResponseError, error_from_response
from gocardless_client.models.enums import Environment
from gocardless_client.models.requests import ApiRequest, CreateRequest
from gocardless_client.models.resources import ApiResponse
from gocardless_client.services.bank_details_lookups import BankDetailsLookupService
from gocardless_client.services.customer_bank_accounts import CustomerBankAccountService
from gocardless_client.services.customers import CustomerService
from gocardless_client.services.events import EventService
from gocardless_client.services.mandates import MandateService
from gocardless_client.services.payments import PaymentService
from gocardless_client.services.redirect_flows import RedirectFlowService

SAFE_METHODS = {"GET", "PUT"}


class GoCardlessClient:
    """Async client for the payments API. One instance per access token."""

    def __init__(
        self,
        access_token: Optional[str] = None,
        environment: Optional[Union[Environment, str]] = None,
        base_url: Optional[str] = None,
        *,
        api_version: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        retry_delay: Optional[float] = None,
        max_retry_delay: Optional[float] = None,
        raise_on_idempotency_conflict: Optional[bool] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._access_token = access_token if access_token is not None else settings.access_token
        if not self._access_token:
            raise ValueError("An access token is required (or set GOCARDLESS_ACCESS_TOKEN)")

        self.environment = Environment(environment) if environment is not None else settings.environment
        if base_url is not None:
            self.base_url = base_url.rstrip("/")
        elif environment is None:
            self.base_url = settings.resolved_base_url()
        else:
            self.base_url = BASE_URLS[self.environment]

        self.api_version = api_version if api_version is not None else settings.api_version
        self.max_retries = max_retries if max_retries is not None else settings.max_retries
        self.retry_delay = retry_delay if retry_delay is not None else settings.retry_delay_seconds
        self.max_retry_delay = (
            max_retry_delay if max_retry_delay is not None else settings.max_retry_delay_seconds
        )
        self.raise_on_idempotency_conflict = (
            raise_on_idempotency_conflict
            if raise_on_idempotency_conflict is not None
            else settings.raise_on_idempotency_conflict
        )

        self.timeout = timeout if timeout is not None else settings.timeout_seconds

        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=self.timeout)

        self.bank_details_lookups = BankDetailsLookupService(self)
        self.customer_bank_accounts = CustomerBankAccountService(self)
        self.customers = CustomerService(self)
        self.events = EventService(self)
        self.mandates = MandateService(self)
        self.payments = PaymentService(self)
        self.redirect_flows = RedirectFlowService(self)

    async def __aenter__(self) -> "GoCardlessClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client, unless it was supplied by the caller."""
        if self._owns_http_client:
            await self._http.aclose()

    async def execute(
        self,
        method: str,
        path: str,
        url_params: Optional[dict[str, Any]] = None,
        request: Optional[ApiRequest] = None,
        *,
        payload_key: Optional[str] = None,
        get_by_id: Optional[Callable[[str], Awaitable[ApiResponse]]] = None,
        request_settings: Optional[RequestSettings] = None,
    ) -> ApiResponse:
        """
        Send one API request and return its decoded response.

        Args:
            method: HTTP method.
            path: Path template, e.g. "/customers/:identity".
            url_params: Values for the template's placeholders.
            request: Typed request; sent as the query string for GET, as the
                JSON body otherwise.
            payload_key: Envelope key wrapping the body ("customers", "data").
            get_by_id: Fetches a resource by ID. Given for creates, it is used
                to return the existing resource when the idempotency key was
                already used.
            request_settings: Per-call headers and timeout.

        Returns:
            The decoded response.

        Raises:
            ValueError: A URL parameter is missing (raised before any I/O).
            ApiError: The API answered with an error envelope.
            ApiConnectionError: The API could not be reached.
            MalformedResponseError: The response was not the expected JSON.
        """
        method = method.upper()
        request_settings = request_settings or RequestSettings()
        resolved_path = build_path(path, url_params)

        idempotency_key = None
        if method == "POST" and isinstance(request, CreateRequest):
            idempotency_key = request.idempotency_key or str(uuid.uuid4())

        params = None
        body = None
        if method == "GET":
            params = encode_query(request.to_query()) if request is not None else None
        else:
            payload = request.to_payload() if request is not None else {}
            body = {payload_key: payload} if payload_key else payload

        headers = build_headers(
            self._access_token,
            self.api_version,
            idempotency_key=idempotency_key,
            extra=request_settings.headers,
        )
        # Sent per request so a caller-supplied http_client honours it too.
        timeout = request_settings.timeout if request_settings.timeout is not None else self.timeout
        send_kwargs: dict[str, Any] = {
            "params": params,
            "json": body,
            "headers": headers,
            "timeout": timeout,
        }

        async def _attempt() -> ApiResponse:
            started = time.monotonic()
            response = await self._http.request(method, self.base_url + resolved_path, **send_kwargs)
            elapsed_ms = (time.monotonic() - started) * 1000
            return self._handle_response(method, resolved_path, response, elapsed_ms, idempotency_key)

        repeatable = method in SAFE_METHODS or idempotency_key is not None
        try:
            return await with_retry(
                _attempt,
                max_retries=self.max_retries if repeatable else 0,
                base_delay=self.retry_delay,
                max_delay=self.max_retry_delay,
            )
        except InvalidStateError as e:
            conflicting_id = e.conflicting_resource_id
            if conflicting_id and get_by_id is not None and not self.raise_on_idempotency_conflict:
                log_idempotency_conflict(resolved_path, conflicting_id)
                return await get_by_id(conflicting_id)
            raise

    def _handle_response(
        self,
        method: str,
        path: str,
        response: httpx.Response,
        elapsed_ms: float,
        idempotency_key: Optional[str],
    ) -> ApiResponse:
        header_request_id = response.headers.get("x-request-id")
        log_request(method, path, response.status_code, elapsed_ms, header_request_id, idempotency_key)

        text = response.text
        try:
            payload = response.json() if text else None
        except ValueError:
            if response.is_success:
                raise MalformedResponseError(
                    f"Response to {method} {path} is not valid JSON",
                    status_code=response.status_code,
                    body=text,
                )
            payload = None

        if not response.is_success:
            error = error_from_response(response.status_code, payload, text)
            if isinstance(error, ApiError) and error.request_id is None:
                error.request_id = header_request_id
            raise error

        return ApiResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            request_id=header_request_id,
            body=payload,
        )
