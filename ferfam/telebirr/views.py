import logging
from decimal import Decimal

from fastapi import APIRouter, Request, Depends
from fastapi.responses import PlainTextResponse, RedirectResponse
from starlette.status import HTTP_303_SEE_OTHER

from ferfam import config
from ferfam.payments import checkout as payments_checkout
from ferfam.telebirr import client as telebirr_client
from ferfam.telebirr import service as telebirr_service
from ferfam.utils.forms import read_body_params, pick
from ferfam.utils.rate_limit import optional_rate_limit
from ferfam.utils.templates import render

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/checkout", tags=["Checkout"])

# module ferfam.telebirr.views
@router.post("/telebirr", dependencies=[Depends(optional_rate_limit(times=10, seconds=60))])
async def checkout_telebirr(request: Request):
    """
    Paiement régional Telebirr.
    - Sans TELEBIRR_API_URL: page "bientôt disponible"
    - amount (corps ou query) sinon TELEBIRR_DEFAULT_AMOUNT; 400 si invalide
    - Redirection 303 si le fournisseur renvoie une URL, sinon page "confirmez sur votre téléphone"
    - 500 avec le message d'erreur si l'appel échoue (pas de retry)
    """
    if not telebirr_client.is_configured():
        return render(request, "payment-pending.html", {"message_key": "telebirr.coming_soon"})

    params = await read_body_params(request)
    raw_amount = pick(params, request, "amount")
    try:
        if raw_amount is None or str(raw_amount).strip() == "":
            amount = payments_checkout.parse_amount(Decimal(str(config.TELEBIRR_DEFAULT_AMOUNT)))
        else:
            amount = payments_checkout.parse_amount(raw_amount)
    except payments_checkout.InvalidAmount:
        return PlainTextResponse(payments_checkout.INVALID_AMOUNT_MESSAGE, status_code=400)
    payer = payments_checkout.resolve_payer(pick(params, request, "payer"))

    try:
        result = await telebirr_service.create_regional_order(amount, payer)
    except Exception as e:
        logger.exception("Erreur checkout_telebirr")
        return PlainTextResponse(f"Telebirr Checkout Error: {e}", status_code=500)

    if result.redirect_url:
        return RedirectResponse(url=result.redirect_url, status_code=HTTP_303_SEE_OTHER)
    return render(request, "payment-pending.html", {"message_key": "telebirr.pending"})
