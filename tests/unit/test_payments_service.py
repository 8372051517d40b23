import asyncio

from ferfam.payments import service as payments_service
from ferfam.payments.checkout import build_checkout_request

def test_create_checkout_passes_urls_and_line_items(fake_stripe):
    checkout = build_checkout_request("12.34", "Bob")
    session = asyncio.run(payments_service.create_checkout(
        checkout,
        success_url="http://testserver/success?session_id={CHECKOUT_SESSION_ID}",
        cancel_url="http://testserver/cancel",
    ))
    assert session.url.startswith("https://checkout.stripe.test/")
    call = fake_stripe.created[0]
    assert call["mode"] == "payment"
    assert call["cancel_url"] == "http://testserver/cancel"
    assert call["line_items"][0]["price_data"]["unit_amount"] == 1234

def test_verify_payment_statuses(fake_stripe):
    assert asyncio.run(payments_service.verify_payment("")) == "unverified"
    assert fake_stripe.retrieved == []

    fake_stripe.payment_status = "paid"
    assert asyncio.run(payments_service.verify_payment("cs_1")) == "paid"

    fake_stripe.payment_status = "unpaid"
    assert asyncio.run(payments_service.verify_payment("cs_2")) == "unpaid"

def test_verify_payment_lookup_error_is_unverified(fake_stripe):
    fake_stripe.error = RuntimeError("network down")
    assert asyncio.run(payments_service.verify_payment("cs_3")) == "unverified"

def test_stripe_client_requires_key(monkeypatch):
    from ferfam import config
    from ferfam.payments.stripe_client import StripeNotConfigured, require_stripe
    monkeypatch.setattr(config, "STRIPE_SECRET_KEY", "")
    try:
        require_stripe()
    except StripeNotConfigured as e:
        assert "STRIPE_SECRET_KEY" in str(e)
    else:
        raise AssertionError("StripeNotConfigured attendu")
