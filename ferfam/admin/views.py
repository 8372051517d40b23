from fastapi import APIRouter, Request, Depends, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse
from starlette.status import HTTP_303_SEE_OTHER

from ferfam import config
from ferfam.admin import service as admin_service
from ferfam.pages.prices import price_context
from ferfam.sessions import Session, get_session
from ferfam.utils.csrf import get_or_create_csrf_token, attach_csrf_cookie_if_missing, validate_csrf_token
from ferfam.utils.forms import read_body_params
from ferfam.utils.security import require_admin, ADMIN_LOGIN_PATH, ADMIN_DASHBOARD_PATH
from ferfam.utils.templates import render

# module ferfam.admin.views
router = APIRouter(prefix="/admin", tags=["Admin"])

def _login_form(request: Request, error=None, email: str = "", status_code: int = 200):
    token = get_or_create_csrf_token(request)
    response = render(
        request,
        "admin-login.html",
        {"error": error, "email": email, "csrf_token": token},
        status_code=status_code,
    )
    attach_csrf_cookie_if_missing(response, request, token)
    return response

@router.get("/login", response_class=HTMLResponse)
def admin_login_page(request: Request):
    return _login_form(request)

@router.post("/login", response_class=HTMLResponse)
async def admin_login(request: Request, session: Session = Depends(get_session)):
    """Authentifie l'admin: session.admin = True puis redirection vers le dashboard.
    - 403 si le token CSRF (cookie + champ caché) ne correspond pas
    - En cas d'échec, le formulaire est ré-affiché avec un message générique.
    """
    form = await read_body_params(request)
    if not validate_csrf_token(request, form):
        raise HTTPException(status_code=403, detail="CSRF verification failed")
    result = admin_service.login(form.get("email"), form.get("password"))
    if not result.success:
        return _login_form(request, error=result.error, email=form.get("email") or "")
    session.admin = True
    return RedirectResponse(url=ADMIN_DASHBOARD_PATH, status_code=HTTP_303_SEE_OTHER)

@router.get("/dashboard", response_class=HTMLResponse)
def admin_dashboard(request: Request, session: Session = Depends(require_admin)):
    context = {
        "rent": price_context(config.RENT_PRICE_USD),
        "booking": price_context(config.BOOKING_PRICE_USD),
        "stripe_configured": bool(config.STRIPE_SECRET_KEY),
        "telebirr_configured": bool(config.TELEBIRR_API_URL),
        "session_backend": request.app.state.session_store.name,
    }
    return render(request, "admin-dashboard.html", context)

@router.get("/logout", include_in_schema=False)
def admin_logout(session: Session = Depends(get_session)):
    """Détruit la session (sans condition) et redirige vers le formulaire de connexion."""
    session.destroy()
    return RedirectResponse(url=ADMIN_LOGIN_PATH, status_code=HTTP_303_SEE_OTHER)
