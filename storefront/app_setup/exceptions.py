"""
Gestionnaires d'exceptions.
- CheckoutError -> réponse texte via errors.error_response (400 message / 500 générique)
- 404 et 405 Starlette -> 404 texte "Page not found" (aucun listing, aucune info de route)
- autres HTTPException -> JSON standard {"detail": ...}
- toute autre exception -> journalisée, puis 500 générique via errors.error_response
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.errors import CheckoutError, NOT_FOUND_MESSAGE, error_response

logger = logging.getLogger(__name__)

def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(CheckoutError)
    async def checkout_error(request: Request, exc: CheckoutError):
        status_code, body = error_response(exc)
        return PlainTextResponse(body, status_code=status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=404)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.exception("Erreur inattendue %s %s", request.method, request.url.path)
        status_code, body = error_response(exc)
        return PlainTextResponse(body, status_code=status_code)
