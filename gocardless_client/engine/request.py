"""
Request building: URL templating, query-string encoding and headers.

Paths are written the way the API reference writes them, with `:name`
placeholders (`/mandates/:identity/actions/cancel`). Query strings use the
API's bracket notation for nested filters:

    {"created_at": {"gt": "2024-01-01T00:00:00Z"}, "status": ["active", "failed"]}
      -> created_at[gt]=2024-01-01T00:00:00Z&status=active,failed
"""

import platform
import re
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Optional
from urllib.parse import quote

import httpx

CLIENT_LIBRARY = "gocardless-client-python"
CLIENT_VERSION = "0.1.0"

_PLACEHOLDER = re.compile(r":([a-z_]+)")


@dataclass
class RequestSettings:
    """Per-call overrides applied on top of the client's defaults."""

    headers: dict[str, str] = field(default_factory=dict)
    timeout: Optional[float] = None


def build_path(template: str, url_params: Optional[dict[str, Any]] = None) -> str:
    """
    Substitute `:name` placeholders in a path template.

    Raises:
        ValueError: A placeholder has no value, or its value is None or empty.
    """
    url_params = url_params or {}

    def _substitute(match: re.Match) -> str:
        name = match.group(1)
        value = url_params.get(name)
        if value is None or value == "":
            raise ValueError(f"Missing required URL parameter: {name}")
        if isinstance(value, Enum):
            value = value.value
        return quote(str(value), safe="")

    return _PLACEHOLDER.sub(_substitute, template)


def format_value(value: Any) -> str:
    """Render a scalar the way the API expects it in a query string."""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        text = value.astimezone(timezone.utc).isoformat(timespec="milliseconds")
        return text.replace("+00:00", "Z")
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def encode_query(params: Optional[dict[str, Any]], prefix: str = "") -> list[tuple[str, str]]:
    """Flatten a (possibly nested) mapping into ordered query pairs, dropping None."""
    pairs: list[tuple[str, str]] = []
    for key, value in (params or {}).items():
        if value is None:
            continue
        name = f"{prefix}[{key}]" if prefix else str(key)
        if isinstance(value, dict):
            pairs.extend(encode_query(value, prefix=name))
        elif isinstance(value, (list, tuple, set)):
            if value:
                pairs.append((name, ",".join(format_value(v) for v in value)))
        else:
            pairs.append((name, format_value(value)))
    return pairs


def user_agent() -> str:
    return (
        f"{CLIENT_LIBRARY}/{CLIENT_VERSION} "
        f"httpx/{httpx.__version__} "
        f"{platform.python_implementation()}/{platform.python_version()}"
    )


def build_headers(
    access_token: str,
    api_version: str,
    idempotency_key: Optional[str] = None,
    extra: Optional[dict[str, str]] = None,
) -> dict[str, str]:
    """Headers sent with every request; `extra` wins over the defaults."""
    headers = {
        "Authorization": f"Bearer {access_token}",
        "GoCardless-Version": api_version,
        "GoCardless-Client-Library": CLIENT_LIBRARY,
        "GoCardless-Client-Version": CLIENT_VERSION,
        "User-Agent": user_agent(),
        "Accept": "application/json",
    }
    if idempotency_key:
        headers["Idempotency-Key"] = idempotency_key
    if extra:
        headers.update(extra)
    return headers
