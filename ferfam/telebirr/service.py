"""
Cas d'usage Telebirr: construit la commande régionale et l'envoie au fournisseur.
"""
import logging
import secrets
import time
from decimal import Decimal
from typing import Optional

import httpx

from ferfam import config
from ferfam.payments.checkout import to_minor_units
from . import client as telebirr_client
from .models import RegionalPaymentOrder, RegionalOrderResult

logger = logging.getLogger(__name__)

def make_transaction_ref(now: Optional[float] = None) -> str:
    """Référence dérivée de l'heure courante (millisecondes)."""
    return f"FERFAM{int((now if now is not None else time.time()) * 1000)}"

def build_order(amount: Decimal, payer: str) -> RegionalPaymentOrder:
    now = time.time()
    return RegionalPaymentOrder(
        transaction_ref=make_transaction_ref(now),
        nonce=secrets.token_hex(16),
        app_id=config.TELEBIRR_APP_ID,
        merchant_short_code=config.TELEBIRR_SHORT_CODE,
        notify_url=config.TELEBIRR_NOTIFY_URL,
        amount_minor_units=to_minor_units(amount),
        subject=f"Rent Payment – {payer}",
        timestamp=int(now),
    )

async def create_regional_order(
    amount: Decimal,
    payer: str,
    client: Optional[httpx.AsyncClient] = None,
) -> RegionalOrderResult:
    """
    Crée une commande Telebirr.
    - redirect_url renseignée si le fournisseur renvoie une page de paiement
    - sinon résultat "pending" (confirmation sur le téléphone du client)
    Aucun suivi: la notification asynchrone (notify_url) n'est pas écoutée.
    """
    order = build_order(amount, payer)
    body = await telebirr_client.send_order(order, client=client)
    redirect_url = telebirr_client.extract_redirect_url(body)
    logger.info(
        "telebirr.order sent ref=%s amount_minor=%s redirect=%s",
        order.transaction_ref, order.amount_minor_units, bool(redirect_url),
    )
    return RegionalOrderResult(transaction_ref=order.transaction_ref, redirect_url=redirect_url)
