"""
Adaptateur HTTP Telebirr (httpx, asynchrone).
"""
import logging
from typing import Any, Dict, Optional

import httpx

from ferfam import config
from .models import RegionalPaymentOrder

logger = logging.getLogger(__name__)


class TelebirrNotConfigured(RuntimeError):
    pass

# module ferfam.telebirr.client
def is_configured() -> bool:
    return bool(config.TELEBIRR_API_URL)

async def send_order(order: RegionalPaymentOrder, client: Optional[httpx.AsyncClient] = None) -> Dict[str, Any]:
    """
    Envoie la commande au endpoint Telebirr (POST JSON) et retourne le corps JSON.
    - Lève httpx.HTTPError (réseau, statut 4xx/5xx) sans retry
    - client: injectable (tests via httpx.MockTransport)
    """
    if not is_configured():
        raise TelebirrNotConfigured("TELEBIRR_API_URL is not configured")

    payload = order.to_payload()
    if client is None:
        async with httpx.AsyncClient(timeout=config.TELEBIRR_TIMEOUT_SECONDS) as c:
            resp = await c.post(config.TELEBIRR_API_URL, json=payload)
    else:
        resp = await client.post(config.TELEBIRR_API_URL, json=payload)
    resp.raise_for_status()
    try:
        body = resp.json()
    except ValueError:
        logger.warning("telebirr.send_order non-JSON response status=%s", resp.status_code)
        return {}
    return body if isinstance(body, dict) else {}

def extract_redirect_url(body: Dict[str, Any]) -> Optional[str]:
    """URL de paiement éventuelle: toPayUrl, redirectUrl ou data.toPayUrl."""
    data = body.get("data") if isinstance(body.get("data"), dict) else {}
    url = body.get("toPayUrl") or body.get("redirectUrl") or data.get("toPayUrl")
    return str(url) if url else None
