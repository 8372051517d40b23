"""
Module 'payments' (feature-first): point d'entrée public.
Réunit la logique checkout, le client Stripe et les cas d'usage.
"""

from .checkout import (
    CheckoutRequest,
    PaymentSession,
    InvalidAmount,
    INVALID_AMOUNT_MESSAGE,
    parse_amount,
    to_minor_units,
    resolve_payer,
    build_checkout_request,
    to_line_items,
)
from .stripe_client import require_stripe, create_session, get_session, StripeNotConfigured
from .service import create_checkout, verify_payment

__all__ = [
    # checkout
    "CheckoutRequest",
    "PaymentSession",
    "InvalidAmount",
    "INVALID_AMOUNT_MESSAGE",
    "parse_amount",
    "to_minor_units",
    "resolve_payer",
    "build_checkout_request",
    "to_line_items",
    # stripe
    "require_stripe",
    "create_session",
    "get_session",
    "StripeNotConfigured",
    # services
    "create_checkout",
    "verify_payment",
]
