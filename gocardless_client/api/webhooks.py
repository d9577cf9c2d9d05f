"""
Webhook receiver endpoint.

POST /webhooks  - Verify a signed webhook and dispatch each event.

Responses:
  204 - Every event was handed to the handler.
  400 - The body is not a valid webhook payload.
  498 - The Webhook-Signature header does not match the body.
"""

import inspect
from typing import Awaitable, Callable, Optional, Union

from fastapi import APIRouter, Header, HTTPException, Request, Response

from gocardless_client import webhooks
from gocardless_client.errors import InvalidSignatureError, MalformedResponseError
from gocardless_client.models.resources import Event

INVALID_TOKEN_STATUS = 498

EventHandler = Callable[[Event], Union[None, Awaitable[None]]]


def build_webhook_router(secret: str, handler: Optional[EventHandler] = None) -> APIRouter:
    """
    Build a router that accepts webhooks signed with `secret`.

    `handler` is called once per event, in delivery order; it may be sync
    or async. An exception from the handler propagates, so the API sees a
    5xx and redelivers the webhook.
    """
    router = APIRouter(tags=["webhooks"])

    @router.post("/webhooks", status_code=204)
    async def receive_webhook(
        request: Request,
        webhook_signature: Optional[str] = Header(default=None),
    ) -> Response:
        body = await request.body()
        try:
            events = webhooks.parse(body, webhook_signature or "", secret)
        except InvalidSignatureError:
            raise HTTPException(status_code=INVALID_TOKEN_STATUS, detail="Invalid webhook signature")
        except MalformedResponseError as e:
            raise HTTPException(status_code=400, detail=str(e))

        if handler is not None:
            for event in events:
                result = handler(event)
                if inspect.isawaitable(result):
                    await result

        return Response(status_code=204)

    return router
