"""Shared fixtures: a fake n8n webhook and a client wired to it."""

import httpx
import pytest
from fastapi.testclient import TestClient

from quote_portal.core.config import settings
from quote_portal.main import app
from quote_portal.routes.relay_router import get_webhook_transport

WEBHOOK_URL = "https://n8n.example.com/webhook/signature-quote"


class FakeWebhook:
    """Records every request and answers with a canned response."""

    def __init__(self):
        self.calls = []
        self.status_code = 200
        self.text = '{"message":"Workflow was started"}'
        self.error = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.text)


@pytest.fixture
def webhook():
    return FakeWebhook()


@pytest.fixture
def client(monkeypatch, webhook):
    monkeypatch.setattr(settings, "N8N_WEBHOOK_URL", WEBHOOK_URL)
    monkeypatch.setattr(settings, "RELAY_BASE_URL", None)
    app.dependency_overrides[get_webhook_transport] = lambda: httpx.MockTransport(webhook.handler)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def valid_values():
    return {
        "company_name": "Acme Ltd",
        "address": "1 High Street, Exeter EX1 1AA",
        "contact_name": "Sam Taylor",
        "contact_email": "sam@acme.co.uk",
        "contact_phone": "",
        "hours_per_day": "2.5",
        "frequency_per_week": "5",
        "days_selected": ["Mondays", "Wednesdays", "Fridays"],
        "site_type": "Office/Commercial",
        "margin_percent": "45",
        "product_cost_weekly": "12.50",
        "overhead_cost_weekly": "0",
        "apply_pilot_pricing": False,
    }
