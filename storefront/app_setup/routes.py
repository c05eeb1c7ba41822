"""
Routes simples (hors routers) pour les pages de la vitrine.
- / sert public/index.html
- /success et /cancel: pages de retour de Stripe Checkout (success_url / cancel_url)
- /favicon.ico: pas de contenu (204) pour éviter des 404 dans les logs
"""
from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse, Response
from starlette.status import HTTP_204_NO_CONTENT

from storefront.config import Settings

def register_routes(app: FastAPI, settings: Settings) -> None:
    def _page(name: str) -> FileResponse:
        path = settings.public_dir / name
        if not path.is_file():
            raise HTTPException(status_code=404)
        return FileResponse(str(path))

    @app.get("/", include_in_schema=False)
    def index():
        return _page("index.html")

    @app.get("/success", include_in_schema=False)
    def checkout_success():
        return _page("success.html")

    @app.get("/cancel", include_in_schema=False)
    def checkout_cancel():
        return _page("cancel.html")

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=HTTP_204_NO_CONTENT)
