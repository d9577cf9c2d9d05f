"""
Webhook signature verification and parsing.

The API signs each webhook body with HMAC-SHA256, using the endpoint's
secret as the key, and sends the hex digest in the `Webhook-Signature`
header. The body holds a batch of events:

    {"events": [{"id": "EV123", "action": "confirmed", "resource_type": "payments", ...}]}
"""

import hashlib
import hmac
import json
import logging
from typing import Union

from pydantic import ValidationError

from gocardless_client.errors import InvalidSignatureError, MalformedResponseError
from gocardless_client.models.resources import Event

logger = logging.getLogger("gocardless_client.webhooks")

SIGNATURE_HEADER = "Webhook-Signature"


def _as_bytes(value: Union[str, bytes]) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


def compute_signature(body: Union[str, bytes], secret: str) -> str:
    return hmac.new(_as_bytes(secret), _as_bytes(body), hashlib.sha256).hexdigest()


def verify_signature(body: Union[str, bytes], signature: str, secret: str) -> bool:
    """Constant-time check of a webhook signature."""
    if not signature or not secret:
        return False
    return hmac.compare_digest(compute_signature(body, secret), signature.strip())


def parse(body: Union[str, bytes], signature: str, secret: str) -> list[Event]:
    """
    Verify a webhook and return its events.

    Args:
        body: The raw request body, exactly as received.
        signature: Value of the Webhook-Signature header.
        secret: The webhook endpoint's secret.

    Returns:
        The events in the order they were sent.

    Raises:
        InvalidSignatureError: The signature does not match the body.
        MalformedResponseError: The body is not a JSON object with an events list.
    """
    if not verify_signature(body, signature, secret):
        raise InvalidSignatureError("Webhook signature does not match the request body")

    try:
        payload = json.loads(body)
    except ValueError as e:
        raise MalformedResponseError(f"Webhook body is not valid JSON: {e}") from e

    events = payload.get("events") if isinstance(payload, dict) else None
    if not isinstance(events, list):
        raise MalformedResponseError("Webhook body has no events list")

    try:
        parsed = [Event.model_validate(e) for e in events]
    except ValidationError as e:
        raise MalformedResponseError(f"Webhook contains an invalid event: {e}") from e

    logger.info("Received webhook with %d event(s)", len(parsed))
    return parsed
