"""
Logique panier pure (pas de Stripe, pas de HTTP).
Transforme les lignes brutes envoyées par le navigateur en line_items Stripe.
"""
from decimal import Decimal, DecimalException, InvalidOperation, ROUND_HALF_UP
import math
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from storefront.errors import InvalidPriceError

CURRENCY = "usd"
DEFAULT_TITLE = "Untitled Product"

_CENT = Decimal("1")

# module storefront.checkout.cart
class LineItem(BaseModel):
    """Ligne prête pour Stripe, immuable une fois construite."""
    model_config = ConfigDict(frozen=True)

    currency: str = CURRENCY
    unit_amount: int = Field(ge=0)
    product_name: str
    product_images: List[str] = Field(default_factory=list, max_length=1)
    quantity: int = Field(ge=1)

    def to_stripe(self) -> Dict[str, Any]:
        return {
            "price_data": {
                "currency": self.currency,
                "unit_amount": self.unit_amount,
                "product_data": {
                    "name": self.product_name,
                    "images": list(self.product_images),
                },
            },
            "quantity": self.quantity,
        }


def _parse_price(raw: Any) -> Optional[Decimal]:
    # bool est un int en Python: on le refuse explicitement
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        text = str(raw)
    elif isinstance(raw, str):
        text = raw.strip()
    else:
        return None
    try:
        return Decimal(text)
    except (InvalidOperation, ValueError):
        return None


def to_minor_units(raw_price: Any, title: str = DEFAULT_TITLE) -> int:
    """
    Convertit un prix (str|int|float) en centimes, arrondi au demi supérieur.
    - Calcul en Decimal sur la valeur textuelle: "1.005" -> 101, 19.999 -> 2000.
    - Soulève InvalidPriceError si le prix est illisible, NaN, infini ou négatif.
    """
    price = _parse_price(raw_price)
    if price is None or not price.is_finite() or price < 0:
        raise InvalidPriceError(title)
    try:
        return int((price * 100).quantize(_CENT, rounding=ROUND_HALF_UP))
    except DecimalException:
        # Montant au-delà de la précision ou de l'exposant max du contexte Decimal
        raise InvalidPriceError(title)


def _quantity(raw: Any) -> int:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return 1
    if isinstance(raw, float) and not math.isfinite(raw):
        return 1
    if raw <= 0:
        return 1
    # Quantités fractionnaires: arrondi à l'entier inférieur, minimum 1
    return max(1, int(raw))


def normalize_item(item: Dict[str, Any]) -> LineItem:
    """
    Normalise une ligne de panier {title, price, image, quantity}.
    - title absent/vide -> "Untitled Product"
    - image absente -> aucune image (pas de validation d'URL)
    - quantity invalide ou <= 0 -> 1
    """
    title = item.get("title")
    name = title if isinstance(title, str) and title else DEFAULT_TITLE
    image = item.get("image")
    return LineItem(
        unit_amount=to_minor_units(item.get("price"), name),
        product_name=name,
        product_images=[image] if isinstance(image, str) and image else [],
        quantity=_quantity(item.get("quantity")),
    )


def to_line_items(items: List[Dict[str, Any]]) -> List[LineItem]:
    """
    Normalise tout le panier en conservant l'ordre.
    Une seule ligne au prix invalide interrompt tout le lot (InvalidPriceError).
    """
    return [normalize_item(it) for it in items]
