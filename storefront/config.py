# storefront.config
from dataclasses import dataclass
from pathlib import Path
import os
from typing import List, Optional
from dotenv import load_dotenv

from storefront.errors import StartupConfigError

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH)

"""
Configuration centrale du serveur de checkout.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Expose le chemin des fichiers statiques (PUBLIC_DIR)
- Lit et nettoie le secret Stripe, les URLs de redirection et les réglages HTTP
- load_settings() est appelé une seule fois au démarrage du process
"""

DEFAULT_PUBLIC_DIR = BASE_DIR / "public"

def _clean_env(v: Optional[str]) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

def _split_csv(v: str) -> List[str]:
    return [p.strip() for p in v.split(",") if p.strip()]


@dataclass(frozen=True)
class Settings:
    stripe_secret_key: str
    base_url: str = "http://127.0.0.1:3000"
    success_path: str = "/success"
    cancel_path: str = "/cancel"
    stripe_timeout: float = 10.0
    public_dir: Path = DEFAULT_PUBLIC_DIR
    cors_origins: tuple = ("*",)
    allowed_hosts: tuple = ("localhost", "127.0.0.1")

    @property
    def success_url(self) -> str:
        return f"{self.base_url}{self.success_path}"

    @property
    def cancel_url(self) -> str:
        return f"{self.base_url}{self.cancel_path}"


def load_settings(environ=None) -> Settings:
    """
    Construit les Settings depuis l'environnement (os.environ par défaut).
    - STRIPE_SECRET_KEY est obligatoire; l'ancien nom `stripe_key` est accepté.
    - Soulève StartupConfigError si la clé manque ou si un réglage est illisible.
    """
    env = os.environ if environ is None else environ

    secret = _clean_env(env.get("STRIPE_SECRET_KEY") or env.get("stripe_key"))
    if not secret:
        raise StartupConfigError("Stripe secret key is not defined in the environment variables.")

    # BASE_URL sans slash final pour concaténer les chemins de redirection
    base_url = _clean_env(env.get("BASE_URL")) or "http://127.0.0.1:3000"
    base_url = base_url.rstrip("/")

    raw_timeout = _clean_env(env.get("STRIPE_TIMEOUT_SECONDS")) or "10"
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise StartupConfigError(f"STRIPE_TIMEOUT_SECONDS invalide: {raw_timeout!r}")
    if timeout <= 0:
        raise StartupConfigError(f"STRIPE_TIMEOUT_SECONDS doit être > 0: {raw_timeout!r}")

    public_dir = _clean_env(env.get("PUBLIC_DIR"))

    return Settings(
        stripe_secret_key=secret,
        base_url=base_url,
        success_path=env.get("CHECKOUT_SUCCESS_PATH", "/success"),
        cancel_path=env.get("CHECKOUT_CANCEL_PATH", "/cancel"),
        stripe_timeout=timeout,
        public_dir=Path(public_dir) if public_dir else DEFAULT_PUBLIC_DIR,
        cors_origins=tuple(_split_csv(env.get("CORS_ORIGINS", "*"))),
        allowed_hosts=tuple(_split_csv(env.get("ALLOWED_HOSTS", "localhost,127.0.0.1"))),
    )
