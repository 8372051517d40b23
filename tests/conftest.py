import os
import pytest
from typing import Any, Dict, Generator, List
from fastapi.testclient import TestClient

# Pas de Redis pendant les tests: rate limiting désactivé au démarrage
os.environ.setdefault("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS", "1")

from ferfam import config
from ferfam.app import create_app
from ferfam.payments import stripe_client
from ferfam.sessions import InMemorySessionStore

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "s3cret-pass"

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "tests/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "tests/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)
        elif "tests/functional/" in nodeid:
            item.add_marker(pytest.mark.functional)

@pytest.fixture(autouse=True)
def _test_env(monkeypatch):
    """Configuration déterministe: identifiants admin connus, pas de fournisseur réel."""
    monkeypatch.delenv("LOCAL_RATE_LIMIT_FALLBACK", raising=False)
    monkeypatch.setattr(config, "ADMIN_EMAIL", ADMIN_EMAIL)
    monkeypatch.setattr(config, "ADMIN_PASSWORD", ADMIN_PASSWORD)
    monkeypatch.setattr(config, "ADMIN_PASSWORD_HASH", "")
    monkeypatch.setattr(config, "STRIPE_SECRET_KEY", "sk_test_dummy")
    monkeypatch.setattr(config, "TELEBIRR_API_URL", "")
    monkeypatch.setattr(config, "COOKIE_SECURE", False)

@pytest.fixture()
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()

@pytest.fixture()
def app(session_store):
    return create_app(session_store=session_store)

@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


class FakeStripe:
    """Enregistre les appels Stripe et renvoie des sessions factices."""

    def __init__(self):
        self.created: List[Dict[str, Any]] = []
        self.retrieved: List[str] = []
        self.error: Exception = None
        self.payment_status = "paid"

    def create_session(self, *, line_items, success_url, cancel_url, mode="payment"):
        if self.error:
            raise self.error
        self.created.append({
            "line_items": line_items,
            "success_url": success_url,
            "cancel_url": cancel_url,
            "mode": mode,
        })
        return {"id": f"cs_test_{len(self.created)}", "url": "https://checkout.stripe.test/pay/cs_test"}

    def get_session(self, session_id):
        if self.error:
            raise self.error
        self.retrieved.append(session_id)
        return {"id": session_id, "payment_status": self.payment_status}

# Mocks Stripe: aucun appel réseau dans les tests
@pytest.fixture(autouse=True)
def fake_stripe(monkeypatch) -> FakeStripe:
    fake = FakeStripe()
    monkeypatch.setattr(stripe_client, "create_session", fake.create_session, raising=True)
    monkeypatch.setattr(stripe_client, "get_session", fake.get_session, raising=True)
    return fake

@pytest.fixture()
def csrf_token(client) -> str:
    """Token CSRF déposé par GET /admin/login (cookie + champ caché)."""
    client.get("/admin/login")
    return client.cookies.get("csrf_token")

@pytest.fixture()
def admin_client(client, csrf_token) -> TestClient:
    """Client déjà connecté en admin via le vrai formulaire."""
    res = client.post(
        "/admin/login",
        data={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD, "csrf_token": csrf_token},
        follow_redirects=False,
    )
    assert res.status_code == 303
    return client
