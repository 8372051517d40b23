"""
Point d'entrée principal du site.

Usage:
    python -m ferfam

Ce mode lance uvicorn directement et lit quelques variables d'environnement:
- PORT: port d'écoute (par défaut 5000)
- UVICORN_RELOAD: active le reload auto en dev ("1"/"true"/"yes")
- LOG_LEVEL: niveau de logs uvicorn (ex: "info", "debug")
"""
import os

import uvicorn

from ferfam import config

def main() -> None:
    reload_flag = os.environ.get("UVICORN_RELOAD", "").lower() in ("1", "true", "yes")
    log_level = os.environ.get("LOG_LEVEL", "info")
    uvicorn.run(
        "ferfam.asgi:app",
        host="0.0.0.0",
        port=config.PORT,
        reload=reload_flag,
        log_level=log_level,
    )

if __name__ == "__main__":
    main()
