from typing import Any, Dict

from ferfam import config

def to_etb(price_usd: float) -> int:
    return int(round(price_usd * config.ETB_RATE))

def price_context(price_usd: int) -> Dict[str, Any]:
    """Prix affichés par les pages: {"price_usd": ..., "price_etb": ...}."""
    return {"price_usd": price_usd, "price_etb": to_etb(price_usd)}
