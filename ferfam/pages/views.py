# module ferfam.pages.views

"""Pages publiques (marketing) et changement de langue.
Toutes les pages passent par render() qui injecte la langue, le traducteur et le chemin courant.
"""
import urllib.parse
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from starlette.status import HTTP_303_SEE_OTHER

from ferfam import config
from ferfam.pages.prices import price_context
from ferfam.payments import service as payments_service
from ferfam.utils.i18n import normalize_locale
from ferfam.utils.templates import render

web_router = APIRouter(tags=["Pages"])

@web_router.get("/", response_class=HTMLResponse)
def home_page(request: Request):
    return render(request, "index.html", price_context(config.RENT_PRICE_USD))

@web_router.get("/about", response_class=HTMLResponse)
def about_page(request: Request):
    return render(request, "about.html")

@web_router.get("/contact", response_class=HTMLResponse)
def contact_page(request: Request):
    return render(request, "contact.html")

@web_router.get("/start-now", response_class=HTMLResponse)
def start_now_page(request: Request):
    return render(request, "start-now.html")

@web_router.get("/housetour", response_class=HTMLResponse)
def house_tour_page(request: Request):
    return render(request, "house-tour.html", price_context(config.RENT_PRICE_USD))

@web_router.get("/success", response_class=HTMLResponse)
async def success_page(request: Request, session_id: Optional[str] = None):
    """Page de retour Stripe: n'affiche "confirmé" que si Stripe indique payment_status=paid."""
    status = await payments_service.verify_payment(session_id or "")
    return render(request, "success.html", {"payment_status": status})

@web_router.get("/cancel", response_class=HTMLResponse)
def cancel_page(request: Request):
    return render(request, "cancel.html")

def _safe_referrer(request: Request) -> str:
    """
    Cible de retour après changement de langue.
    - "/" si pas de Referer, Referer d'un autre hôte, ou Referer lui-même /lang/... (évite les boucles)
    """
    referer = request.headers.get("referer") or ""
    if not referer:
        return "/"
    parsed = urllib.parse.urlsplit(referer)
    host = request.headers.get("host") or request.url.netloc
    if parsed.netloc and parsed.netloc != host:
        return "/"
    if parsed.path.startswith("/lang/"):
        return "/"
    target = parsed.path or "/"
    if parsed.query:
        target = f"{target}?{parsed.query}"
    return target

@web_router.get("/lang/{locale}", include_in_schema=False)
def switch_language(request: Request, locale: str):
    r = RedirectResponse(url=_safe_referrer(request), status_code=HTTP_303_SEE_OTHER)
    r.set_cookie(
        key=config.LOCALE_COOKIE_NAME,
        value=normalize_locale(locale),
        secure=config.COOKIE_SECURE,
        samesite="Lax",
        max_age=60 * 60 * 24 * 365,
        path="/",
    )
    return r
