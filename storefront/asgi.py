"""
ASGI entrypoint: expose `app` for process managers / deployments.

- En production, un process manager (ex: gunicorn/uvicorn-workers, hypercorn) importe `storefront.asgi:app`.
- La configuration est chargée une seule fois ici: sans clé Stripe, l'import échoue
  (StartupConfigError) et le serveur ne démarre pas.
"""
import logging

from storefront.app_setup.factory import create_app
from storefront.config import load_settings
from storefront.errors import StartupConfigError

logger = logging.getLogger("uvicorn.error")

try:
    settings = load_settings()
except StartupConfigError as e:
    logger.critical("Configuration invalide, arrêt: %s", e)
    raise

app = create_app(settings)
