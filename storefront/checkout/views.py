import json
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from storefront.config import Settings
from storefront.errors import MalformedRequestError
from storefront.utils.rate_limit import optional_rate_limit

from .service import create_checkout_session as create_session_for_cart
from .stripe_client import PaymentGateway

router = APIRouter(tags=["Checkout"])

def get_gateway(request: Request) -> PaymentGateway:
    return request.app.state.gateway

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

async def _read_payload(request: Request) -> Any:
    body = await request.body()
    if not body:
        return {}
    try:
        return json.loads(body)
    except (ValueError, UnicodeDecodeError):
        raise MalformedRequestError("Invalid JSON body.")

# module storefront.checkout.views
@router.post("/checkout", dependencies=[Depends(optional_rate_limit(times=10, seconds=60))])
@router.post("/stripe-checkout", include_in_schema=False, dependencies=[Depends(optional_rate_limit(times=10, seconds=60))])
async def checkout(
    request: Request,
    gateway: PaymentGateway = Depends(get_gateway),
    settings: Settings = Depends(get_settings),
):
    """
    Crée une session Stripe Checkout pour le panier envoyé par la vitrine.
    - Entrée JSON: { "items": [ { "title", "price", "image", "quantity" }, ... ] }
    - Sortie: { "url": "<url de la session Stripe>" }
    - Erreurs: 400 (texte) si panier/prix invalide, 500 (texte générique) si Stripe échoue
    Les erreurs remontent sous forme de CheckoutError et sont converties par
    le handler de app_setup.exceptions.
    """
    payload = await _read_payload(request)
    url = await create_session_for_cart(payload, gateway=gateway, settings=settings)
    return JSONResponse({"url": url})
