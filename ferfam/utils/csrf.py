# module ferfam.utils.csrf
import secrets
from typing import Any, Iterable

from fastapi import Request
from fastapi.responses import Response

from ferfam import config

CSRF_COOKIE_NAME = "csrf_token"
CSRF_FIELD_NAMES = ("csrf_token", "X-CSRF-Token")

def get_or_create_csrf_token(request: Request) -> str:
    """
    Renvoie le token CSRF existant (cookie) ou en crée un nouveau.
    """
    token = request.cookies.get(CSRF_COOKIE_NAME)
    if not token:
        token = secrets.token_urlsafe(32)
    return token

def attach_csrf_cookie_if_missing(response: Response, request: Request, token: str) -> None:
    """
    Pose le cookie CSRF si absent (double-submit: cookie + champ caché du formulaire).
    """
    if not request.cookies.get(CSRF_COOKIE_NAME):
        response.set_cookie(
            key=CSRF_COOKIE_NAME,
            value=token,
            httponly=True,
            secure=config.COOKIE_SECURE,
            samesite="Lax",
            max_age=60 * 60,
            path="/",
        )

def validate_csrf_token(request: Request, form_data: Any, field_names: Iterable[str] = CSRF_FIELD_NAMES) -> bool:
    """
    Compare le champ du formulaire au cookie (temps constant).
    - Cookie ou champ absent => refus
    """
    token_cookie = request.cookies.get(CSRF_COOKIE_NAME)
    if not token_cookie:
        return False
    token_form = None
    for name in field_names:
        token_form = form_data.get(name)
        if token_form:
            break
    if not token_form:
        return False
    return secrets.compare_digest(str(token_form), str(token_cookie))
