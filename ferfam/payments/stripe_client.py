"""
Adaptateur Stripe: centralise les appels et la configuration Stripe.
"""
import stripe
from typing import Any, Dict, List

from ferfam import config


class StripeNotConfigured(RuntimeError):
    pass

# module ferfam.payments.stripe_client
def _session_fields(session: Any) -> Dict[str, Any]:
    """Champs utiles d'une session Checkout (id, url, payment_status, status)."""
    return {
        "id": getattr(session, "id", None),
        "url": getattr(session, "url", None),
        "payment_status": getattr(session, "payment_status", None),
        "status": getattr(session, "status", None),
    }

def require_stripe():
    """
    Prépare et retourne le module stripe prêt à l’emploi.
    - Configure stripe.api_key via STRIPE_SECRET_KEY.
    - Lève StripeNotConfigured si la clé est absente (traité comme une erreur fournisseur).
    """
    if not config.STRIPE_SECRET_KEY:
        raise StripeNotConfigured("STRIPE_SECRET_KEY is not configured")
    stripe.api_key = config.STRIPE_SECRET_KEY
    return stripe

def create_session(
    *,
    line_items: List[Dict[str, Any]],
    success_url: str,
    cancel_url: str,
    mode: str = "payment",
) -> Dict[str, Any]:
    """
    Crée une session Stripe Checkout.
    - line_items: lignes Stripe (price_data + quantity)
    - success_url / cancel_url: URLs de retour construites par la vue
    Retour: dict session (ex: {"id": "cs_test_...", "url": "https://checkout.stripe.com/..."})
    """
    require_stripe()
    session = stripe.checkout.Session.create(
        payment_method_types=["card"],
        mode=mode,
        line_items=line_items,
        success_url=success_url,
        cancel_url=cancel_url,
    )
    # StripeObject n'est pas un mapping dans les versions récentes: lecture par attributs
    return _session_fields(session)

def get_session(session_id: str) -> Dict[str, Any]:
    """
    Récupère une session Stripe Checkout par son identifiant.
    Retour: dict session incluant "id", "payment_status", etc.
    """
    require_stripe()
    session = stripe.checkout.Session.retrieve(session_id)
    return _session_fields(session)
