"""
Routes simples (hors routers).
- /favicon.ico et la sonde Chrome devtools: pas de contenu (204) pour éviter des 404 dans les logs.
"""
from fastapi import FastAPI
from fastapi.responses import Response
from starlette.status import HTTP_204_NO_CONTENT

def register_routes(app: FastAPI) -> None:
    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=HTTP_204_NO_CONTENT)

    @app.get("/.well-known/appspecific/com.chrome.devtools.json", include_in_schema=False)
    async def chrome_devtools_probe():
        return Response(status_code=HTTP_204_NO_CONTENT)
