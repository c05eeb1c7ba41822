"""
Module 'checkout' (feature-first): point d'entrée public.
Réunit la logique panier, le client Stripe et le cas d'usage de création de session.
"""

from .cart import LineItem, normalize_item, to_line_items, to_minor_units
from .stripe_client import PaymentGateway, StripeGateway
from .service import create_checkout_session

__all__ = [
    # cart
    "LineItem",
    "normalize_item",
    "to_line_items",
    "to_minor_units",
    # stripe
    "PaymentGateway",
    "StripeGateway",
    # services
    "create_checkout_session",
]
