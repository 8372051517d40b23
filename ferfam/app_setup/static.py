"""
Montage des fichiers statiques.
Expose:
- /public -> tout le répertoire public
- /static -> alias pour compatibilité
"""
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from ferfam.config import PUBLIC_DIR

def mount_static_files(app: FastAPI) -> None:
    app.mount("/public", StaticFiles(directory=str(PUBLIC_DIR)), name="public")
    app.mount("/static", StaticFiles(directory=str(PUBLIC_DIR)), name="static")
