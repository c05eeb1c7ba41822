"""
Taxonomie d'erreurs du checkout et correspondance unique erreur -> réponse HTTP.

- MalformedRequestError / InvalidPriceError: entrée client invalide (400, message lisible)
- GatewayError: échec Stripe (500, message générique, détail uniquement dans les logs)
- StartupConfigError: configuration manquante au démarrage (fatal, jamais par requête)
"""
from typing import Tuple

INTERNAL_ERROR_MESSAGE = "Internal Server Error"
NOT_FOUND_MESSAGE = "Page not found"


class CheckoutError(Exception):
    """Erreur par requête, convertie en réponse par error_response()."""
    status_code = 500

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE):
        super().__init__(message)
        self.message = message


class MalformedRequestError(CheckoutError):
    status_code = 400


class InvalidPriceError(MalformedRequestError):
    def __init__(self, title):
        super().__init__(f"Invalid price for item: {title}")
        self.title = title


class GatewayError(CheckoutError):
    # Le message public reste générique; la cause est chaînée via `raise ... from`
    def __init__(self, detail: str = ""):
        super().__init__(INTERNAL_ERROR_MESSAGE)
        self.detail = detail


class StartupConfigError(RuntimeError):
    pass


def error_response(exc: Exception) -> Tuple[int, str]:
    """
    Convertit une erreur en (status_code, corps texte).
    - CheckoutError 4xx: message de l'erreur
    - tout le reste: 500 générique, sans fuite de détail
    """
    if isinstance(exc, CheckoutError) and exc.status_code < 500:
        return exc.status_code, exc.message
    return 500, INTERNAL_ERROR_MESSAGE
