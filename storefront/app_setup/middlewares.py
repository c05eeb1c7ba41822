"""
Middlewares transverses de l'application.
- CORSMiddleware: autorise les origines définies (dev/prod).
- TrustedHostMiddleware: limite les hôtes acceptés (défense host header).
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware

from storefront.config import Settings

def register_basic_middlewares(app: FastAPI, settings: Settings) -> None:
    cors_origins = list(settings.cors_origins)
    allowed_hosts = list(settings.allowed_hosts)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=allowed_hosts + ["*"] if "*" in cors_origins else allowed_hosts,
    )
