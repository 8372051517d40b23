import pytest
from fastapi import FastAPI, Depends, Request
from fastapi.testclient import TestClient

from ferfam.utils.rate_limit import optional_rate_limit, rate_limit_health_info


def _make_app(times=2, seconds=60):
    app = FastAPI()

    @app.get("/limitedA", dependencies=[Depends(optional_rate_limit(times, seconds))])
    def limited_a():
        return {"ok": True}

    @app.get("/limitedB", dependencies=[Depends(optional_rate_limit(times, seconds))])
    def limited_b():
        return {"ok": True}

    @app.get("/rl_info")
    def rl_info(request: Request):
        return rate_limit_health_info(request)

    return app


def test_rate_limit_fallback_blocks_after_limit(monkeypatch):
    monkeypatch.setenv("LOCAL_RATE_LIMIT_FALLBACK", "1")
    client = TestClient(_make_app(times=2))
    assert client.get("/limitedA").status_code == 200
    assert client.get("/limitedA").status_code == 200
    assert client.get("/limitedA").status_code == 429


def test_rate_limit_is_per_path_and_session(monkeypatch):
    monkeypatch.setenv("LOCAL_RATE_LIMIT_FALLBACK", "1")
    client = TestClient(_make_app(times=2))
    client.cookies.set("ferfam_session", "some-session")

    assert client.get("/limitedA").status_code == 200
    assert client.get("/limitedA").status_code == 200
    assert client.get("/limitedA").status_code == 429
    # Autre chemin: compteur indépendant
    assert client.get("/limitedB").status_code == 200


def test_rate_limit_disabled_flag_bypasses_limit():
    app = _make_app(times=1)
    app.state.rate_limit_enabled = False
    client = TestClient(app)
    for _ in range(3):
        assert client.get("/limitedA").status_code == 200


@pytest.mark.parametrize("fallback,backend", [("1", "memory"), ("0", None)])
def test_rate_limit_health_info(monkeypatch, fallback, backend):
    monkeypatch.setenv("LOCAL_RATE_LIMIT_FALLBACK", fallback)
    app = _make_app()
    app.state.rate_limit_enabled = False
    info = TestClient(app).get("/rl_info").json()
    assert info["enabled"] is False
    if backend:
        assert info["backend"] == backend
