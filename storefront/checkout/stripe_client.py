"""
Adaptateur Stripe: centralise les appels et la configuration Stripe.
Le client est construit une fois au démarrage puis injecté (app.state.gateway).
"""
import asyncio
import logging
from typing import Any, Dict, List, Protocol

import stripe

from storefront.errors import GatewayError

logger = logging.getLogger(__name__)

# module storefront.checkout.stripe_client
class PaymentGateway(Protocol):
    async def create_checkout_session(
        self,
        *,
        line_items: List[Dict[str, Any]],
        success_url: str,
        cancel_url: str,
    ) -> str:
        ...


class StripeGateway:
    """
    Crée des sessions Stripe Checkout hébergées.
    - Appel SDK synchrone exécuté dans un thread (asyncio.to_thread): la boucle reste libre
    - Timeout ou annulation: le thread termine seul, son résultat est ignoré
    - Borné par `timeout` secondes; dépassement -> GatewayError
    - Toute erreur Stripe/réseau est convertie en GatewayError (cause chaînée)
    """

    def __init__(self, api_key: str, timeout: float = 10.0, client=None):
        self.timeout = timeout
        self._client = client or stripe.StripeClient(api_key)

    def _create(self, params: Dict[str, Any]):
        return self._client.checkout.sessions.create(params=params)

    async def create_checkout_session(
        self,
        *,
        line_items: List[Dict[str, Any]],
        success_url: str,
        cancel_url: str,
    ) -> str:
        params = {
            "payment_method_types": ["card"],
            "mode": "payment",
            "success_url": success_url,
            "cancel_url": cancel_url,
            "billing_address_collection": "required",
            "line_items": line_items,
        }
        try:
            session = await asyncio.wait_for(asyncio.to_thread(self._create, params), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise GatewayError(f"Stripe timeout after {self.timeout}s") from e
        except stripe.StripeError as e:
            raise GatewayError(f"Stripe error: {getattr(e, 'user_message', None) or e}") from e

        url = getattr(session, "url", None)
        if not url:
            raise GatewayError(f"Stripe session without url (id={getattr(session, 'id', None)})")
        logger.info("stripe.checkout session created id=%s", getattr(session, "id", None))
        return url
