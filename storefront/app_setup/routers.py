"""
Registre central des routers (checkout, health).
"""
from fastapi import FastAPI
from storefront.checkout import views as checkout_views
from storefront.health.router import router as health_router

def register_routers(app: FastAPI) -> None:
    app.include_router(checkout_views.router)
    app.include_router(health_router)
