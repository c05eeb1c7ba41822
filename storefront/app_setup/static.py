"""
Montage des fichiers statiques.
Expose public/ à la racine, sans page d'index ni listing de répertoire
(StaticFiles html=False: un répertoire répond 404).
"""
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from storefront.config import Settings

def mount_static_files(app: FastAPI, settings: Settings) -> None:
    # Monté en dernier: les routes déclarées avant restent prioritaires
    app.mount("/", StaticFiles(directory=str(settings.public_dir), html=False), name="public")
