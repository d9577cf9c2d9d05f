"""
Webhook Receiver - a minimal service consuming payment provider webhooks.

Verifies each webhook against GOCARDLESS_WEBHOOK_SECRET and logs every
event it contains. Replace `log_event` with your own handler, or mount
`build_webhook_router` in an existing FastAPI app.

Start the server:
    uvicorn gocardless_client.main:app --reload
"""

import logging

from fastapi import FastAPI

from gocardless_client.api.health import router as health_router
from gocardless_client.api.webhooks import build_webhook_router
from gocardless_client.audit.logger import configure_logging
from gocardless_client.config import settings
from gocardless_client.models.resources import Event

configure_logging()

logger = logging.getLogger("gocardless_client.receiver")


def log_event(event: Event) -> None:
    logger.info(
        "EVENT | %s %s.%s | links=%s",
        event.id,
        event.resource_type or "-",
        event.action or "-",
        event.links.model_dump(exclude_none=True),
    )


app = FastAPI(
    title="Webhook Receiver",
    description="Verifies signed payment provider webhooks and dispatches their events.",
    version="0.1.0",
)

app.include_router(health_router)
app.include_router(build_webhook_router(settings.webhook_secret, log_event))
