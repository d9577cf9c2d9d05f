"""Tests for webhook verification, parsing and the receiver endpoint."""

import json

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from gocardless_client import webhooks
from gocardless_client.api.webhooks import build_webhook_router
from gocardless_client.errors import InvalidSignatureError, MalformedResponseError

SECRET = "ElfJ-3tF9I_zutNVK2lBABQrw-BgAhkz"

BODY = json.dumps({
    "events": [
        {
            "id": "EV1",
            "created_at": "2024-03-01T10:00:00.000Z",
            "action": "cancelled",
            "resource_type": "mandates",
            "details": {"origin": "bank", "cause": "bank_account_closed", "scheme": "bacs", "reason_code": "ADDACS-B"},
            "metadata": {},
            "links": {"mandate": "MD1", "organisation": "OR1"},
        },
        {
            "id": "EV2",
            "action": "paid_out",
            "resource_type": "payments",
            "links": {"payment": "PM1", "payout": "PO1"},
        },
    ]
})


def _sign(body: str, secret: str = SECRET) -> str:
    return webhooks.compute_signature(body, secret)


class TestParse:
    def test_valid_webhook(self):
        events = webhooks.parse(BODY, _sign(BODY), SECRET)

        assert [e.id for e in events] == ["EV1", "EV2"]
        assert events[0].details.reason_code == "ADDACS-B"
        assert events[0].links.mandate == "MD1"
        assert events[1].links.payout == "PO1"

    def test_accepts_bytes(self):
        events = webhooks.parse(BODY.encode(), _sign(BODY), SECRET)
        assert len(events) == 2

    def test_wrong_secret(self):
        with pytest.raises(InvalidSignatureError):
            webhooks.parse(BODY, _sign(BODY, "other-secret"), SECRET)

    def test_tampered_body(self):
        with pytest.raises(InvalidSignatureError):
            webhooks.parse(BODY.replace("MD1", "MD2"), _sign(BODY), SECRET)

    def test_missing_signature(self):
        assert not webhooks.verify_signature(BODY, "", SECRET)

    def test_empty_secret_never_verifies(self):
        assert not webhooks.verify_signature(BODY, _sign(BODY, ""), "")

    def test_not_json(self):
        body = "definitely not json"
        with pytest.raises(MalformedResponseError):
            webhooks.parse(body, _sign(body), SECRET)

    def test_no_events(self):
        body = json.dumps({"something": []})
        with pytest.raises(MalformedResponseError):
            webhooks.parse(body, _sign(body), SECRET)


class TestReceiver:
    def _app(self, handler):
        app = FastAPI()
        app.include_router(build_webhook_router(SECRET, handler))
        return TestClient(app)

    def test_dispatches_events(self):
        received = []
        client = self._app(received.append)

        response = client.post("/webhooks", content=BODY, headers={"Webhook-Signature": _sign(BODY)})

        assert response.status_code == 204
        assert [e.id for e in received] == ["EV1", "EV2"]

    def test_async_handler(self):
        received = []

        async def handler(event):
            received.append(event.id)

        client = self._app(handler)
        response = client.post("/webhooks", content=BODY, headers={"Webhook-Signature": _sign(BODY)})

        assert response.status_code == 204
        assert received == ["EV1", "EV2"]

    def test_invalid_signature(self):
        received = []
        client = self._app(received.append)

        response = client.post("/webhooks", content=BODY, headers={"Webhook-Signature": "bad"})

        assert response.status_code == 498
        assert received == []

    def test_missing_signature_header(self):
        client = self._app(None)
        response = client.post("/webhooks", content=BODY)
        assert response.status_code == 498

    def test_malformed_body(self):
        body = "[]"
        client = self._app(None)

        response = client.post("/webhooks", content=body, headers={"Webhook-Signature": _sign(body)})

        assert response.status_code == 400
