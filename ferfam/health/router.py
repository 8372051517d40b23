from fastapi import APIRouter, Request

from ferfam import config
from ferfam.utils.rate_limit import rate_limit_health_info

router = APIRouter(prefix="/health", tags=["Health"])

@router.get("")
def health_root(request: Request):
    return {
        "ok": True,
        "sessions": request.app.state.session_store.name,
        "rate_limit": rate_limit_health_info(request),
        "stripe_configured": bool(config.STRIPE_SECRET_KEY),
        "telebirr_configured": bool(config.TELEBIRR_API_URL),
    }
