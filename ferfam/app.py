# module ferfam.app
from fastapi import FastAPI

from ferfam.app_setup.lifespan import lifespan
from ferfam.app_setup.middlewares import (
    register_basic_middlewares,
    register_security_middleware,
    register_no_cache_middleware,
)
from ferfam.app_setup.exception_handlers import register_exception_handlers
from ferfam.app_setup.routes import register_routes
from ferfam.app_setup.routers import register_routers
from ferfam.app_setup.static import mount_static_files
from ferfam.sessions import SessionStore, build_session_store, register_session_middleware

def create_app(session_store: SessionStore = None) -> FastAPI:
    """
    Crée et configure l'instance FastAPI du site.
    Étapes et ordre:
      1) session_store: store de session (mémoire ou Redis selon SESSION_BACKEND), injectable pour les tests.
      2) register_session_middleware: cookie signé -> request.state.session.
      3) register_basic_middlewares: CORS, TrustedHost, ProxyHeaders.
      4) mount_static_files: expose /public et /static.
      5) register_security_middleware: en-têtes de sécurité + CSP.
      6) register_no_cache_middleware: pas de cache sous /admin.
      7) register_exception_handlers: 401 -> redirection /admin/login.
      8) register_routes puis register_routers.
    Retourne:
      - FastAPI: l'application prête à être servie (ASGI).
    """
    app = FastAPI(title="Ferfam Rentals", lifespan=lifespan)
    app.state.session_store = session_store or build_session_store()
    register_session_middleware(app)
    register_basic_middlewares(app)
    mount_static_files(app)
    register_security_middleware(app)
    register_no_cache_middleware(app)
    register_exception_handlers(app)
    register_routes(app)
    register_routers(app)
    return app

# App globale
app = create_app()
