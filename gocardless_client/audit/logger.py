"""
Request trail for API calls.

Every HTTP exchange gets one log line with:
  - Method and path (query string excluded, it may carry customer data)
  - Status code
  - Request ID (the API's, for support tickets)
  - Idempotency key, when the request carried one
  - Elapsed time in milliseconds

Access tokens and request bodies are never logged.
"""

import logging
from typing import Optional

from gocardless_client.config import settings

logger = logging.getLogger("gocardless_client.http")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging for scripts and the webhook receiver."""
    level = level or settings.log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def log_request(
    method: str,
    path: str,
    status_code: int,
    elapsed_ms: float,
    request_id: Optional[str] = None,
    idempotency_key: Optional[str] = None,
) -> None:
    """Record a completed HTTP exchange; 4xx/5xx are logged at WARNING."""
    level = logging.WARNING if status_code >= 400 else logging.INFO
    logger.log(
        level,
        "API | %s %s -> %d | request_id=%s idempotency_key=%s | %.0fms",
        method,
        path,
        status_code,
        request_id or "-",
        idempotency_key or "-",
        elapsed_ms,
    )


def log_idempotency_conflict(path: str, conflicting_resource_id: str) -> None:
    logger.info(
        "API | %s reused idempotency key, returning existing resource %s",
        path,
        conflicting_resource_id,
    )
