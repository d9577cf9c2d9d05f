"""Tests for URL templating, query encoding and headers."""

from datetime import date, datetime, timedelta, timezone

import pytest

from gocardless_client.engine.request import (
    CLIENT_LIBRARY,
    build_headers,
    build_path,
    encode_query,
    format_value,
)
from gocardless_client.models.enums import MandateStatus


class TestBuildPath:
    def test_substitutes_identity(self):
        assert build_path("/customers/:identity", {"identity": "CU123"}) == "/customers/CU123"

    def test_escapes_values(self):
        assert build_path("/customers/:identity", {"identity": "CU 1/2"}) == "/customers/CU%201%2F2"

    def test_action_path(self):
        path = build_path("/mandates/:identity/actions/cancel", {"identity": "MD1"})
        assert path == "/mandates/MD1/actions/cancel"

    def test_template_without_placeholders(self):
        assert build_path("/customers") == "/customers"

    def test_missing_param_raises(self):
        with pytest.raises(ValueError, match="identity"):
            build_path("/customers/:identity", {})

    def test_none_param_raises(self):
        with pytest.raises(ValueError):
            build_path("/customers/:identity", {"identity": None})

    def test_empty_param_raises(self):
        with pytest.raises(ValueError):
            build_path("/customers/:identity", {"identity": ""})


class TestEncodeQuery:
    def test_flat_params(self):
        assert encode_query({"limit": 50, "after": "CU1"}) == [("limit", "50"), ("after", "CU1")]

    def test_drops_none(self):
        assert encode_query({"limit": None, "after": "CU1"}) == [("after", "CU1")]

    def test_nested_filter_uses_brackets(self):
        pairs = encode_query({"created_at": {"gt": "2024-01-01T00:00:00Z", "lte": None}})
        assert pairs == [("created_at[gt]", "2024-01-01T00:00:00Z")]

    def test_list_is_comma_joined(self):
        pairs = encode_query({"status": [MandateStatus.ACTIVE, "failed"]})
        assert pairs == [("status", "active,failed")]

    def test_empty_list_dropped(self):
        assert encode_query({"status": []}) == []

    def test_booleans_lowercase(self):
        assert encode_query({"enabled": False}) == [("enabled", "false")]


class TestFormatValue:
    def test_aware_datetime_in_utc(self):
        value = datetime(2024, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        assert format_value(value) == "2024-01-01T10:00:00.000Z"

    def test_naive_datetime_assumed_utc(self):
        assert format_value(datetime(2024, 1, 1)) == "2024-01-01T00:00:00.000Z"

    def test_date(self):
        assert format_value(date(2024, 5, 17)) == "2024-05-17"

    def test_enum(self):
        assert format_value(MandateStatus.CANCELLED) == "cancelled"


class TestBuildHeaders:
    def test_default_headers(self):
        headers = build_headers("token_abc", "2015-07-06")
        assert headers["Authorization"] == "Bearer token_abc"
        assert headers["GoCardless-Version"] == "2015-07-06"
        assert headers["GoCardless-Client-Library"] == CLIENT_LIBRARY
        assert "Idempotency-Key" not in headers

    def test_idempotency_key(self):
        headers = build_headers("t", "2015-07-06", idempotency_key="key-1")
        assert headers["Idempotency-Key"] == "key-1"

    def test_extra_headers_override(self):
        headers = build_headers("t", "2015-07-06", extra={"GoCardless-Version": "2099-01-01", "X-Trace": "1"})
        assert headers["GoCardless-Version"] == "2099-01-01"
        assert headers["X-Trace"] == "1"
