"""
Cas d'usage 'checkout': orchestre validation, panier et passerelle de paiement.
"""
import logging
from typing import Any, Dict

from storefront.config import Settings
from storefront.errors import CheckoutError, GatewayError, MalformedRequestError

from . import cart as cart_logic
from .stripe_client import PaymentGateway

logger = logging.getLogger(__name__)

INVALID_ITEMS_MESSAGE = "Invalid items array in the request body."
EMPTY_CART_MESSAGE = "Cart is empty."

# module storefront.checkout.service
def _validated_items(payload: Any) -> list:
    items = payload.get("items") if isinstance(payload, dict) else None
    if not isinstance(items, list):
        raise MalformedRequestError(INVALID_ITEMS_MESSAGE)
    if not items:
        raise MalformedRequestError(EMPTY_CART_MESSAGE)
    if not all(isinstance(it, dict) for it in items):
        raise MalformedRequestError(INVALID_ITEMS_MESSAGE)
    return items


async def create_checkout_session(
    payload: Dict[str, Any],
    *,
    gateway: PaymentGateway,
    settings: Settings,
) -> str:
    """
    Transforme un panier {"items": [...]} en session Stripe et renvoie son URL.
    - MalformedRequestError si items absent, pas une liste, vide, ou prix invalide
    - GatewayError pour toute erreur côté Stripe (détail journalisé uniquement)
    Aucune soumission partielle: la passerelle n'est appelée qu'après normalisation complète.
    """
    items = _validated_items(payload)
    line_items = cart_logic.to_line_items(items)

    try:
        url = await gateway.create_checkout_session(
            line_items=[li.to_stripe() for li in line_items],
            success_url=settings.success_url,
            cancel_url=settings.cancel_url,
        )
    except GatewayError as e:
        logger.exception("Error creating Stripe checkout session: %s", e.detail)
        raise
    except CheckoutError:
        raise
    except Exception as e:
        logger.exception("Error creating Stripe checkout session")
        raise GatewayError(str(e)) from e

    logger.info("checkout.session created items=%s", len(line_items))
    return url
