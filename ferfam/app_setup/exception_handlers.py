"""
Gestionnaires d'exceptions.
- Transforme 401 en redirection vers /admin/login (hors /api/*).
- Conserve la réponse JSON standard pour les clients API et les autres codes.
"""
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_303_SEE_OTHER

from ferfam.utils.security import ADMIN_LOGIN_PATH

def register_exception_handlers(app: FastAPI) -> None:
    """
    Enregistre le handler HTTPException.
    - UX web: 401 -> 303 vers le formulaire de connexion admin.
    - UX API: code et body JSON FastAPI standards.
    """
    @app.exception_handler(StarletteHTTPException)
    async def redirect_on_admin_auth_error(request: Request, exc: HTTPException):
        is_api = request.url.path.startswith("/api/")
        if exc.status_code == 401 and not is_api:
            return RedirectResponse(url=ADMIN_LOGIN_PATH, status_code=HTTP_303_SEE_OTHER)
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )
