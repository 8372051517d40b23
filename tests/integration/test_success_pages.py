def test_success_confirms_paid_session(client, fake_stripe):
    fake_stripe.payment_status = "paid"
    res = client.get("/success", params={"session_id": "cs_test_1"})
    assert res.status_code == 200
    assert "Your payment has been confirmed." in res.text
    assert fake_stripe.retrieved == ["cs_test_1"]

def test_success_unpaid_session_is_not_confirmed(client, fake_stripe):
    fake_stripe.payment_status = "unpaid"
    res = client.get("/success", params={"session_id": "cs_test_2"})
    assert "has not been completed yet" in res.text
    assert "confirmed." not in res.text

def test_success_without_session_id_is_unverified(client, fake_stripe):
    res = client.get("/success")
    assert res.status_code == 200
    assert "could not confirm your payment" in res.text
    assert fake_stripe.retrieved == []

def test_success_lookup_failure_is_unverified(client, fake_stripe):
    fake_stripe.error = RuntimeError("No such checkout.session")
    res = client.get("/success", params={"session_id": "cs_bad"})
    assert res.status_code == 200
    assert "could not confirm your payment" in res.text

def test_cancel_page(client):
    res = client.get("/cancel")
    assert res.status_code == 200
    assert "Payment cancelled" in res.text
