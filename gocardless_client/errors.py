"""
Exception hierarchy for API failures.

The API reports errors in a single envelope:

    {"error": {"type": "validation_failed", "message": "...", "code": 422,
               "request_id": "...", "documentation_url": "...",
               "errors": [{"field": "...", "message": "...", "reason": "..."}]}}

`error.type` decides which exception is raised. Server-side failures
(`gocardless`) are the only API errors worth retrying.
"""

from dataclasses import dataclass, field as dataclass_field
from typing import Any, Optional


IDEMPOTENT_CREATION_CONFLICT = "idempotent_creation_conflict"


class GoCardlessError(Exception):
    """Base exception for everything raised by this package."""


class ApiConnectionError(GoCardlessError):
    """The API could not be reached, even after retrying."""


class MalformedResponseError(GoCardlessError):
    """The API returned something that is not a recognisable JSON response."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class InvalidSignatureError(GoCardlessError):
    """A webhook's signature does not match its body."""


@dataclass
class ApiErrorDetail:
    """One entry of the `errors` array in an error envelope."""

    message: str = ""
    field: Optional[str] = None
    reason: Optional[str] = None
    request_pointer: Optional[str] = None
    links: dict[str, str] = dataclass_field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ApiErrorDetail":
        return cls(
            message=data.get("message", ""),
            field=data.get("field"),
            reason=data.get("reason"),
            request_pointer=data.get("request_pointer"),
            links=data.get("links") or {},
        )


class ApiError(GoCardlessError):
    """An error envelope returned by the API."""

    retriable = False

    def __init__(
        self,
        message: str,
        status_code: int,
        type: Optional[str] = None,
        code: Optional[int] = None,
        request_id: Optional[str] = None,
        documentation_url: Optional[str] = None,
        errors: Optional[list[ApiErrorDetail]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.type = type
        self.code = code
        self.request_id = request_id
        self.documentation_url = documentation_url
        self.errors = errors or []

    def __str__(self) -> str:
        if self.request_id:
            return f"{self.message} (request_id={self.request_id})"
        return self.message

    def has_reason(self, reason: str) -> bool:
        return any(e.reason == reason for e in self.errors)

    @property
    def conflicting_resource_id(self) -> Optional[str]:
        """ID of the resource an idempotency key was already used for."""
        for e in self.errors:
            if e.reason == IDEMPOTENT_CREATION_CONFLICT:
                return e.links.get("conflicting_resource_id")
        return None


class InvalidApiUsageError(ApiError):
    """Bad request: unknown endpoint, bad auth, rate limit, malformed JSON."""


class InvalidStateError(ApiError):
    """The action is not valid for the resource's current state."""


class ValidationFailedError(ApiError):
    """One or more submitted fields failed validation."""


class GoCardlessInternalError(ApiError):
    """Something went wrong on the provider's side (retriable)."""

    retriable = True


ERROR_TYPES: dict[str, type[ApiError]] = {
    "invalid_api_usage": InvalidApiUsageError,
    "invalid_state": InvalidStateError,
    "validation_failed": ValidationFailedError,
    "gocardless": GoCardlessInternalError,
}


def error_from_response(status_code: int, payload: Any, body: str = "") -> GoCardlessError:
    """
    Build the exception matching an error response.

    Args:
        status_code: HTTP status of the response.
        payload: Decoded JSON body (anything, if the body was not an envelope).
        body: Raw body text, kept for diagnostics.

    Returns:
        An ApiError subclass, or MalformedResponseError if there is no envelope.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("error"), dict):
        return MalformedResponseError(
            f"Unexpected response with status {status_code}",
            status_code=status_code,
            body=body,
        )

    error = payload["error"]
    error_cls = ERROR_TYPES.get(error.get("type", ""), ApiError)
    return error_cls(
        message=error.get("message", "Unknown API error"),
        status_code=status_code,
        type=error.get("type"),
        code=error.get("code"),
        request_id=error.get("request_id"),
        documentation_url=error.get("documentation_url"),
        errors=[ApiErrorDetail.from_dict(e) for e in error.get("errors") or []],
    )
