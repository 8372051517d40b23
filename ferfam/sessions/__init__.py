"""
Module 'sessions': session navigateur côté serveur (flag admin).
"""

from .models import Session
from .store import SessionStore, InMemorySessionStore, RedisSessionStore, build_session_store
from .middleware import register_session_middleware, get_session, load_session, sign_token, unsign_token

__all__ = [
    "Session",
    "SessionStore",
    "InMemorySessionStore",
    "RedisSessionStore",
    "build_session_store",
    "register_session_middleware",
    "get_session",
    "load_session",
    "sign_token",
    "unsign_token",
]
