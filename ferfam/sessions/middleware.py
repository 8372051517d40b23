"""
Middleware de session serveur.
- Lit le cookie signé (itsdangerous), charge la session depuis le store et l'expose
  via request.state.session (dépendance get_session).
- Après la réponse: persiste la session modifiée et pose le cookie, ou supprime
  l'entrée et le cookie si la session a été détruite.
- Aucune session n'est créée tant qu'elle n'est pas modifiée.
"""
import logging
import secrets
from typing import Optional

from fastapi import FastAPI, Request
from itsdangerous import BadSignature, SignatureExpired, TimestampSigner

from ferfam import config
from .models import Session
from .store import SessionStore

logger = logging.getLogger(__name__)

# module ferfam.sessions.middleware
def _signer() -> TimestampSigner:
    return TimestampSigner(config.SESSION_SECRET_KEY, salt="ferfam.session")

def sign_token(token: str) -> str:
    return _signer().sign(token).decode("utf-8")

def unsign_token(value: Optional[str]) -> Optional[str]:
    """Retourne le token si la signature est valide et non expirée, sinon None."""
    if not value:
        return None
    try:
        return _signer().unsign(value, max_age=config.SESSION_MAX_AGE).decode("utf-8")
    except (BadSignature, SignatureExpired):
        return None

async def load_session(store: SessionStore, cookie_value: Optional[str]) -> Session:
    token = unsign_token(cookie_value)
    if not token:
        return Session()
    data = await store.get(token)
    if data is None:
        return Session()
    return Session(token=token, data=data)

def register_session_middleware(app: FastAPI) -> None:
    """
    Ajoute le middleware de session (store lu dans app.state.session_store).
    - Cookie httponly, samesite=Lax, secure selon COOKIE_SECURE.
    """
    @app.middleware("http")
    async def server_session(request: Request, call_next):
        store: SessionStore = request.app.state.session_store
        session = await load_session(store, request.cookies.get(config.SESSION_COOKIE_NAME))
        request.state.session = session

        response = await call_next(request)

        if session.destroyed:
            if session.token:
                await store.delete(session.token)
            response.delete_cookie(config.SESSION_COOKIE_NAME, path="/")
        elif session.modified:
            if session.is_new:
                session.token = secrets.token_urlsafe(32)
            await store.set(session.token, session.data, config.SESSION_MAX_AGE)
            response.set_cookie(
                key=config.SESSION_COOKIE_NAME,
                value=sign_token(session.token),
                httponly=True,
                secure=config.COOKIE_SECURE,
                samesite="Lax",
                max_age=config.SESSION_MAX_AGE,
                path="/",
            )
        return response

def get_session(request: Request) -> Session:
    """Dépendance FastAPI: session de la requête courante."""
    session = getattr(request.state, "session", None)
    if session is None:
        # Application montée sans middleware (tests ciblés): session éphémère
        session = Session()
        request.state.session = session
    return session
