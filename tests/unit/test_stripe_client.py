import stripe

from ferfam.payments import stripe_client
from ferfam.payments.service import verify_payment

# Fonctions réelles de l'adaptateur (conftest les remplace par un faux pour les autres tests)
real_create_session = stripe_client.create_session
real_get_session = stripe_client.get_session


def _stripe_session(**fields):
    return stripe.checkout.Session.construct_from(fields, "sk_test_dummy")


def test_create_session_reads_stripe_object(monkeypatch):
    captured = {}

    def _fake_create(**kwargs):
        captured.update(kwargs)
        return _stripe_session(id="cs_1", url="https://checkout.stripe.com/c/pay/cs_1", object="checkout.session")

    monkeypatch.setattr(stripe.checkout.Session, "create", _fake_create)
    session = real_create_session(
        line_items=[{"quantity": 1, "price_data": {"currency": "usd", "unit_amount": 5000}}],
        success_url="http://testserver/success?session_id={CHECKOUT_SESSION_ID}",
        cancel_url="http://testserver/cancel",
    )
    assert session["id"] == "cs_1"
    assert session["url"] == "https://checkout.stripe.com/c/pay/cs_1"
    assert captured["payment_method_types"] == ["card"]
    assert captured["mode"] == "payment"


def test_get_session_reads_payment_status(monkeypatch):
    monkeypatch.setattr(
        stripe.checkout.Session,
        "retrieve",
        lambda session_id: _stripe_session(id=session_id, payment_status="paid", status="complete"),
    )
    session = real_get_session("cs_2")
    assert session["id"] == "cs_2"
    assert session["payment_status"] == "paid"


def test_get_session_missing_fields_are_none(monkeypatch):
    monkeypatch.setattr(stripe.checkout.Session, "retrieve", lambda session_id: _stripe_session(id=session_id))
    session = real_get_session("cs_3")
    assert session["payment_status"] is None
    assert session["url"] is None


def test_verify_payment_with_real_adapter(monkeypatch):
    import asyncio

    monkeypatch.setattr(stripe_client, "get_session", real_get_session)
    monkeypatch.setattr(
        stripe.checkout.Session,
        "retrieve",
        lambda session_id: _stripe_session(id=session_id, payment_status="paid"),
    )
    assert asyncio.run(verify_payment("cs_4")) == "paid"
