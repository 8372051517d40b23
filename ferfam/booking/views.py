# module ferfam.booking.views

"""Formulaire de réservation et passage de relais vers le checkout Stripe.
- GET /booking: formulaire avec le prix affiché (USD + ETB)
- POST /booking/submit: valide nom/montant puis redirige en 307 vers /checkout/stripe
  (le 307 conserve la méthode POST et le corps; montant et payeur passent en query string)
"""
import logging
import urllib.parse

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from starlette.status import HTTP_307_TEMPORARY_REDIRECT

from ferfam import config
from ferfam.payments import checkout as payments_checkout
from ferfam.pages.prices import price_context
from ferfam.utils.forms import read_body_params
from ferfam.utils.templates import render

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/booking", tags=["Booking"])

@router.get("", response_class=HTMLResponse)
def booking_page(request: Request):
    return render(request, "booking.html", price_context(config.BOOKING_PRICE_USD))

@router.post("/submit")
async def submit_booking(request: Request):
    params = await read_body_params(request)
    payer = payments_checkout.resolve_payer(params.get("name"))
    raw_amount = str(params.get("amount") or "").strip()
    try:
        payments_checkout.parse_amount(raw_amount)
    except payments_checkout.InvalidAmount:
        return PlainTextResponse(payments_checkout.INVALID_AMOUNT_MESSAGE, status_code=400)

    query = urllib.parse.urlencode({"amount": raw_amount, "payer": payer}, quote_via=urllib.parse.quote)
    logger.info("booking.submit forwarded amount=%s", raw_amount)
    return RedirectResponse(url=f"/checkout/stripe?{query}", status_code=HTTP_307_TEMPORARY_REDIRECT)
