"""
Cas d'usage 'payments': orchestre checkout (logique pure) et stripe_client.
"""
import logging
from typing import Any, Dict

from starlette.concurrency import run_in_threadpool

from . import checkout as checkout_logic
from . import stripe_client
from .checkout import CheckoutRequest, PaymentSession

logger = logging.getLogger(__name__)

# Statuts affichés sur la page /success
PAYMENT_CONFIRMED = "paid"
PAYMENT_UNPAID = "unpaid"
PAYMENT_UNVERIFIED = "unverified"

async def create_checkout(
    checkout: CheckoutRequest,
    *,
    success_url: str,
    cancel_url: str,
) -> PaymentSession:
    """
    Crée la session Checkout hébergée pour une demande validée.
    L'appel SDK (bloquant) est exécuté dans le threadpool.
    Les erreurs Stripe sont propagées telles quelles à la vue (pas de retry).
    """
    line_items = checkout_logic.to_line_items(checkout)
    session: Dict[str, Any] = await run_in_threadpool(
        stripe_client.create_session,
        line_items=line_items,
        success_url=success_url,
        cancel_url=cancel_url,
    )
    logger.info(
        "payments.checkout created session_id=%s amount_minor=%s",
        session.get("id"), checkout.unit_amount,
    )
    return PaymentSession(id=str(session.get("id") or ""), url=str(session.get("url") or ""))

async def verify_payment(session_id: str) -> str:
    """
    Vérifie auprès de Stripe l'état d'une session de paiement (sans webhook).
    - "paid" si payment_status == "paid"
    - "unpaid" sinon
    - "unverified" si aucun identifiant ou si la lecture échoue
    """
    session_id = (session_id or "").strip()
    if not session_id:
        return PAYMENT_UNVERIFIED
    try:
        session = await run_in_threadpool(stripe_client.get_session, session_id)
    except Exception:
        logger.exception("payments.verify failed session_id=%s", session_id)
        return PAYMENT_UNVERIFIED
    if (session.get("payment_status") or "") == "paid":
        return PAYMENT_CONFIRMED
    return PAYMENT_UNPAID
