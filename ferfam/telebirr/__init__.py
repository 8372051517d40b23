"""
Module 'telebirr': paiement régional (commande envoyée au fournisseur, sans suivi).
"""

from .models import RegionalPaymentOrder, RegionalOrderResult
from .client import TelebirrNotConfigured, is_configured, send_order, extract_redirect_url
from .service import build_order, create_regional_order, make_transaction_ref

__all__ = [
    "RegionalPaymentOrder",
    "RegionalOrderResult",
    "TelebirrNotConfigured",
    "is_configured",
    "send_order",
    "extract_redirect_url",
    "build_order",
    "create_regional_order",
    "make_transaction_ref",
]
