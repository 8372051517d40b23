"""
ASGI entrypoint: expose `app` for process managers / deployments.

- En production, un process manager (ex: uvicorn workers) importe `ferfam.asgi:app`.
- Toute la configuration FastAPI est centralisée dans ferfam.app, ce fichier ne fait qu'exposer l'instance `app`.
"""

from ferfam.app import app

__all__ = ["app"]
