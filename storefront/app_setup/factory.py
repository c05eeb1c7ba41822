"""
Factory d'application recommandée pour les entrypoints (ex: storefront.asgi).
Ordonne les étapes d'initialisation de manière lisible et testable.
"""
from typing import Optional
from fastapi import FastAPI

from storefront.config import Settings
from storefront.checkout.stripe_client import PaymentGateway, StripeGateway
from .lifespan import lifespan
from .middlewares import register_basic_middlewares
from .security import register_security_middleware
from .exceptions import register_exception_handlers
from .routes import register_routes
from .routers import register_routers
from .static import mount_static_files

def create_app(settings: Settings, gateway: Optional[PaymentGateway] = None) -> FastAPI:
    """
    Construit l'app FastAPI et enregistre, dans l'ordre:
      - état partagé: settings + passerelle de paiement (injectable pour les tests)
      - middlewares de base et de sécurité
      - gestionnaires d'exceptions (erreurs checkout, 404 texte)
      - routes de pages puis routers (checkout, health)
      - fichiers statiques montés en dernier sur "/" (ils interceptent tout le reste)
    """
    app = FastAPI(title="Storefront Checkout", lifespan=lifespan)
    app.state.settings = settings
    app.state.gateway = gateway or StripeGateway(settings.stripe_secret_key, timeout=settings.stripe_timeout)
    register_basic_middlewares(app, settings)
    register_security_middleware(app)
    register_exception_handlers(app)
    register_routes(app, settings)
    register_routers(app)
    mount_static_files(app, settings)
    return app
