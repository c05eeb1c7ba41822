"""Backend de checkout de la vitrine: pages statiques + session Stripe Checkout."""

__version__ = "1.0.0"
