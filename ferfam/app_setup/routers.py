"""
Registre central des routers.
- Web: pages marketing, réservation
- Checkout: Stripe, Telebirr
- Admin, Health
"""
from fastapi import FastAPI

from ferfam.pages.views import web_router as pages_web_router
from ferfam.booking.views import router as booking_router
from ferfam.payments import views as payments_views
from ferfam.telebirr import views as telebirr_views
from ferfam.admin.views import router as admin_router
from ferfam.health.router import router as health_router

def register_routers(app: FastAPI) -> None:
    """Chemins disjoints par préfixe: l'ordre d'inclusion est sans effet."""
    # Pages web (HTML)
    app.include_router(pages_web_router)
    app.include_router(booking_router)
    # Checkout
    app.include_router(payments_views.router)
    app.include_router(telebirr_views.router)
    # Admin
    app.include_router(admin_router)
    # Health & monitoring
    app.include_router(health_router)
