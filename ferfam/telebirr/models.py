from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel

# module ferfam.telebirr.models
class RegionalPaymentOrder(BaseModel):
    """Commande Telebirr transitoire (jamais persistée)."""

    transaction_ref: str
    nonce: str
    app_id: str
    merchant_short_code: str
    notify_url: str
    amount_minor_units: int
    subject: str
    timestamp: int

    @property
    def total_amount(self) -> str:
        # L'API attend un montant en unités majeures, 2 décimales
        return f"{Decimal(self.amount_minor_units) / 100:.2f}"

    def to_payload(self) -> Dict[str, Any]:
        return {
            "appId": self.app_id,
            "shortCode": self.merchant_short_code,
            "nonce": self.nonce,
            "outTradeNo": self.transaction_ref,
            "notifyUrl": self.notify_url,
            "totalAmount": self.total_amount,
            "subject": self.subject,
            "timestamp": str(self.timestamp),
        }


class RegionalOrderResult(BaseModel):
    transaction_ref: str
    redirect_url: Optional[str] = None

    @property
    def pending(self) -> bool:
        return not self.redirect_url
