"""Shared request models: create envelopes, list filters and cursors."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ApiRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", use_enum_values=True)

    def to_payload(self) -> dict[str, Any]:
        """Fields to send, in JSON form, with unset ones left out."""
        return self.model_dump(mode="json", exclude_none=True)

    def to_query(self) -> dict[str, Any]:
        """Set fields as Python values, left for the query encoder to format."""
        return self.model_dump(exclude_none=True)


class CreateRequest(ApiRequest):
    """
    Base for requests that create a resource.

    The idempotency key travels as a header, never in the body. When left
    empty the client generates one, and reuses it for every retry.
    """

    idempotency_key: Optional[str] = Field(default=None, exclude=True)


class CreatedAtFilter(BaseModel):
    """Limit a list to records created within certain times."""

    gt: Optional[datetime] = None
    gte: Optional[datetime] = None
    lt: Optional[datetime] = None
    lte: Optional[datetime] = None


class ListRequest(ApiRequest):
    """Cursor pagination parameters common to every list endpoint."""

    after: Optional[str] = None  # Cursor pointing to the start of the desired set
    before: Optional[str] = None  # Cursor pointing to the end of the desired set
    limit: Optional[int] = Field(default=None, ge=1, le=500)


class CreatedAtListRequest(ListRequest):
    created_at: Optional[CreatedAtFilter] = None
