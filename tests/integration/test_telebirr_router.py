import httpx
import pytest

from ferfam import config
from ferfam.telebirr import client as telebirr_client

@pytest.fixture()
def telebirr_calls(monkeypatch):
    """Remplace l'appel HTTP Telebirr; la réponse est pilotée par le test."""
    monkeypatch.setattr(config, "TELEBIRR_API_URL", "https://telebirr.test/api/order")
    state = {"orders": [], "body": {}, "error": None}

    async def _fake_send_order(order, client=None):
        if state["error"]:
            raise state["error"]
        state["orders"].append(order)
        return state["body"]

    monkeypatch.setattr(telebirr_client, "send_order", _fake_send_order, raising=True)
    return state

def test_telebirr_coming_soon_when_not_configured(client):
    res = client.post("/checkout/telebirr", data={"amount": "100"})
    assert res.status_code == 200
    assert "Telebirr integration is coming soon." in res.text

def test_telebirr_redirects_to_provider_url(client, telebirr_calls):
    telebirr_calls["body"] = {"toPayUrl": "https://pay.telebirr.test/abc"}
    res = client.post("/checkout/telebirr", data={"amount": "100", "payer": "Alice"}, follow_redirects=False)
    assert res.status_code == 303
    assert res.headers["location"] == "https://pay.telebirr.test/abc"
    order = telebirr_calls["orders"][0]
    assert order.amount_minor_units == 10000
    assert order.subject == "Rent Payment – Alice"

def test_telebirr_pending_page_without_redirect(client, telebirr_calls):
    telebirr_calls["body"] = {"code": "0"}
    res = client.post("/checkout/telebirr", data={"amount": "100"})
    assert res.status_code == 200
    assert "Telebirr payment initiated. Please confirm the payment on your phone." in res.text

def test_telebirr_uses_default_amount(client, telebirr_calls):
    res = client.post("/checkout/telebirr")
    assert res.status_code == 200
    assert telebirr_calls["orders"][0].amount_minor_units == int(config.TELEBIRR_DEFAULT_AMOUNT * 100)

def test_telebirr_invalid_amount_returns_400(client, telebirr_calls):
    res = client.post("/checkout/telebirr", data={"amount": "abc"})
    assert res.status_code == 400
    assert "invalid" in res.text
    assert telebirr_calls["orders"] == []

def test_telebirr_provider_error_returns_500(client, telebirr_calls):
    telebirr_calls["error"] = httpx.ConnectError("connection refused")
    res = client.post("/checkout/telebirr", data={"amount": "100"})
    assert res.status_code == 500
    assert res.text == "Telebirr Checkout Error: connection refused"
