"""Async typed client for the GoCardless Pro payments API."""

from gocardless_client.client import GoCardlessClient
from gocardless_client.engine.request import CLIENT_VERSION as __version__
from gocardless_client.engine.request import RequestSettings
from gocardless_client.errors import (
    ApiConnectionError,
    ApiError,
    GoCardlessError,
    GoCardlessInternalError,
    InvalidApiUsageError,
    InvalidSignatureError,
    InvalidStateError,
    MalformedResponseError,
    ValidationFailedError,
)
from gocardless_client.models.enums import Environment

__all__ = [
    "ApiConnectionError",
    "ApiError",
    "Environment",
    "GoCardlessClient",
    "GoCardlessError",
    "GoCardlessInternalError",
    "InvalidApiUsageError",
    "InvalidSignatureError",
    "InvalidStateError",
    "MalformedResponseError",
    "RequestSettings",
    "ValidationFailedError",
    "__version__",
]
