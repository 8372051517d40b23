"""
Middlewares transverses de l'application.
- register_basic_middlewares: CORS, TrustedHost et confiance en X-Forwarded-*.
- register_security_middleware: en-têtes de sécurité et CSP.
- register_no_cache_middleware: empêche la mise en cache sous /admin.
Notes:
- Le middleware de session serveur est enregistré par la factory (ferfam.sessions).
"""
from fastapi import Request, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from ferfam import config

EXTRA_IMG_SOURCES = ["https://images.unsplash.com"]
FONT_CDNS = ["https://fonts.googleapis.com"]

def register_basic_middlewares(app: FastAPI) -> None:
    """
    Ajoute les middlewares « de base »:
    - CORSMiddleware: autorise les origines définies (dev/prod).
    - TrustedHostMiddleware: limite les hôtes acceptés (défense host header).
    - ProxyHeadersMiddleware: fait confiance aux en-têtes du proxy (x-forwarded-*),
      nécessaire pour construire les URLs de retour Stripe en https.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=config.ALLOWED_HOSTS + ["*"] if "*" in config.CORS_ORIGINS else config.ALLOWED_HOSTS,
    )
    app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

def register_security_middleware(app: FastAPI) -> None:
    """
    En-têtes: X-Frame-Options, X-Content-Type-Options, Referrer-Policy,
    Permissions-Policy, HSTS (si secure) et CSP.
    Pas de form-action: les formulaires de paiement finissent par une redirection
    vers la page hébergée du fournisseur (Stripe, Telebirr), hors origine.
    """
    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)

        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        # Le sélecteur de langue lit le Referer: même origine uniquement
        response.headers.setdefault("Referrer-Policy", "same-origin")
        response.headers.setdefault("Permissions-Policy", "geolocation=(), microphone=(), camera=()")
        if config.COOKIE_SECURE:
            response.headers.setdefault("Strict-Transport-Security", "max-age=63072000; includeSubDomains; preload")

        csp = (
            "default-src 'self'; "
            "base-uri 'self'; object-src 'none'; frame-ancestors 'none'; "
            f"img-src 'self' data: {' '.join(EXTRA_IMG_SOURCES)}; "
            f"style-src 'self' 'unsafe-inline' {' '.join(FONT_CDNS)}; "
            "font-src 'self' data: https://fonts.gstatic.com; "
            "script-src 'self'; "
            "connect-src 'self'"
        )
        response.headers["Content-Security-Policy"] = csp
        return response

def register_no_cache_middleware(app: FastAPI) -> None:
    """
    Empêche la mise en cache des pages admin (GET sous /admin):
    après logout, le bouton « retour » ne doit pas ré-afficher le dashboard.
    """
    @app.middleware("http")
    async def no_cache_for_admin(request: Request, call_next):
        response = await call_next(request)
        path = request.url.path.rstrip("/")
        if request.method == "GET" and path.startswith("/admin"):
            response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
            response.headers["Pragma"] = "no-cache"
            response.headers["Expires"] = "0"
        return response
