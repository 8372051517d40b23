"""
Logique checkout pure (pas de Stripe, pas de HTTP).
"""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, field_validator

from ferfam import config

INVALID_AMOUNT_MESSAGE = "Payment amount missing or invalid."
# Plafond Stripe de unit_amount (centimes)
MAX_MINOR_UNITS = 99_999_999


class InvalidAmount(ValueError):
    """Montant absent, non numérique, non fini ou <= 0."""

    def __init__(self, raw: Any = None):
        super().__init__(INVALID_AMOUNT_MESSAGE)
        self.raw = raw


class CheckoutRequest(BaseModel):
    amount: Decimal
    payer_name: str = config.DEFAULT_PAYER

    @field_validator("amount")
    @classmethod
    def amount_in_range(cls, v: Decimal) -> Decimal:
        return parse_amount(v)

    @property
    def unit_amount(self) -> int:
        return to_minor_units(self.amount)

    @property
    def label(self) -> str:
        return f"Rent Payment – {self.payer_name}"


class PaymentSession(BaseModel):
    id: str
    url: str


# module ferfam.payments.checkout
def parse_amount(raw: Any) -> Decimal:
    """
    Convertit le montant reçu (str|int|float) en Decimal.
    - Lève InvalidAmount si absent, vide, non numérique, NaN/infini ou <= 0,
      ou si le montant en centimes vaut 0 ou dépasse MAX_MINOR_UNITS.
    """
    if raw is None or isinstance(raw, bool):
        raise InvalidAmount(raw)
    try:
        value = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError):
        raise InvalidAmount(raw)
    if not value.is_finite() or value <= 0:
        raise InvalidAmount(raw)
    try:
        minor = to_minor_units(value)
    except (InvalidOperation, OverflowError):
        raise InvalidAmount(raw)
    if minor < 1 or minor > MAX_MINOR_UNITS:
        raise InvalidAmount(raw)
    return value

def to_minor_units(amount: Decimal) -> int:
    """Montant en unités mineures (centimes), arrondi au plus proche (demi vers le haut)."""
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

def resolve_payer(name: Optional[str]) -> str:
    payer = (name or "").strip()
    return payer or config.DEFAULT_PAYER

def build_checkout_request(amount: Any, payer: Optional[str]) -> CheckoutRequest:
    return CheckoutRequest(amount=parse_amount(amount), payer_name=resolve_payer(payer))

def to_line_items(checkout: CheckoutRequest) -> List[Dict[str, Any]]:
    """
    Construit l'unique ligne Stripe du paiement de location.
    - quantité 1, devise USD, unit_amount en centimes
    - libellé "Rent Payment – <payeur>"
    """
    return [{
        "quantity": 1,
        "price_data": {
            "currency": config.CHECKOUT_CURRENCY,
            "unit_amount": checkout.unit_amount,
            "product_data": {"name": checkout.label},
        },
    }]
