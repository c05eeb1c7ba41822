"""
Point d'entrée principal du serveur de checkout.

Usage:
    python -m storefront

Ce mode lance uvicorn directement et lit quelques variables d'environnement:
- PORT: port d'écoute (par défaut 3000)
- UVICORN_RELOAD: active le reload auto en dev ("1"/"true"/"yes")
- LOG_LEVEL: niveau de logs uvicorn (ex: "info", "debug")
La clé Stripe est vérifiée avant de lancer uvicorn: absente -> sortie avec code 1.
"""
import os
import sys
import uvicorn

from storefront.config import load_settings
from storefront.errors import StartupConfigError

def main() -> int:
    try:
        load_settings()
    except StartupConfigError as e:
        print(f"Erreur de configuration: {e}", file=sys.stderr)
        return 1

    port = int(os.environ.get("PORT", 3000))
    # Activer le reload uniquement si explicitement demandé (ex: en local)
    reload_flag = os.environ.get("UVICORN_RELOAD", "").lower() in ("1", "true", "yes")
    log_level = os.environ.get("LOG_LEVEL", "info")
    uvicorn.run(
        "storefront.asgi:app",  # on réutilise l'ASGI app unique
        host=os.environ.get("HOST", "127.0.0.1"),
        port=port,
        reload=reload_flag,
        log_level=log_level,
    )
    return 0

if __name__ == "__main__":
    sys.exit(main())
