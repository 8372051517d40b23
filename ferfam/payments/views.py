import logging

from fastapi import APIRouter, Request, Depends
from fastapi.responses import PlainTextResponse, RedirectResponse
from starlette.status import HTTP_303_SEE_OTHER

from ferfam.utils.forms import read_body_params, pick
from ferfam.utils.rate_limit import optional_rate_limit
from ferfam.payments import checkout as payments_checkout
from ferfam.payments import service as payments_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/checkout", tags=["Checkout"])

def _base_url(request: Request) -> str:
    # Construit la base d'URL (ex: http://testserver) sans slash final
    return str(request.base_url).rstrip("/")

# module ferfam.payments.views
@router.post("/stripe", dependencies=[Depends(optional_rate_limit(times=10, seconds=60))])
async def checkout_stripe(request: Request):
    """
    Crée une session Checkout Stripe puis redirige (303) vers la page de paiement hébergée.
    - Entrées: amount et payer (corps du formulaire, sinon query string)
    - 400 si le montant est absent/invalide (aucun appel Stripe)
    - 500 avec le message Stripe en cas d'échec fournisseur (pas de retry)
    """
    params = await read_body_params(request)
    try:
        checkout = payments_checkout.build_checkout_request(
            pick(params, request, "amount"),
            pick(params, request, "payer"),
        )
    except payments_checkout.InvalidAmount:
        return PlainTextResponse(payments_checkout.INVALID_AMOUNT_MESSAGE, status_code=400)

    base = _base_url(request)
    try:
        session = await payments_service.create_checkout(
            checkout,
            success_url=f"{base}/success?session_id={{CHECKOUT_SESSION_ID}}",
            cancel_url=f"{base}/cancel",
        )
    except Exception as e:
        logger.exception("Erreur checkout_stripe")
        return PlainTextResponse(f"Stripe Checkout Error: {e}", status_code=500)

    if not session.url:
        logger.error("payments.checkout session without url session_id=%s", session.id)
        return PlainTextResponse("Stripe Checkout Error: missing checkout URL", status_code=500)
    return RedirectResponse(url=session.url, status_code=HTTP_303_SEE_OTHER)
