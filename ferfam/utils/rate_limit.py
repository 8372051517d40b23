from typing import Dict, Any
from fastapi import Request, Response, HTTPException
import os
import time
import hashlib
import logging
from ferfam import config

logger = logging.getLogger(__name__)

def optional_rate_limit(times: int, seconds: int):
    async def _dep(request: Request, response: Response):
        def _client_key_from_request(req: Request) -> str:
            # Priorité: cookie de session (hashé) puis IP
            token = req.cookies.get(config.SESSION_COOKIE_NAME)
            path = req.url.path
            if token:
                h = hashlib.sha256(token.encode("utf-8")).hexdigest()[:16]
                return f"session:{h}:{path}"
            ip = req.client.host if req.client else "local"
            return f"ip:{ip}:{path}"

        # Forcer le fallback mémoire en DEV si demandé
        if os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1":
            now = time.time()
            key = _client_key_from_request(request)
            store = getattr(request.app.state, "_rl_store", {})
            hits = [t for t in store.get(key, []) if now - t < seconds]
            if len(hits) >= times:
                raise HTTPException(status_code=429, detail="Too Many Requests")
            hits.append(now)
            store[key] = hits
            request.app.state._rl_store = store
            return

        # Respecter le flag global
        if getattr(request.app.state, "rate_limit_enabled", None) is not True:
            return

        from fastapi_limiter.depends import RateLimiter

        async def _identifier(req: Request) -> str:
            return _client_key_from_request(req)
        try:
            return await RateLimiter(times=times, seconds=seconds, identifier=_identifier)(request, response)
        except HTTPException:
            raise
        except Exception as e:
            # Redis indisponible en cours de route: pas de 429, on journalise
            logger.warning("rate_limit.unavailable path=%s error=%s", request.url.path, e)
            return
    return _dep

def rate_limit_health_info(request: Request) -> Dict[str, Any]:
    enabled = getattr(request.app.state, "rate_limit_enabled", None)

    limiter_ready = False
    backend = None
    try:
        from fastapi_limiter import FastAPILimiter
        limiter_ready = getattr(FastAPILimiter, "redis", None) is not None
        backend = "redis" if limiter_ready else None
    except ImportError:
        limiter_ready = False

    info: Dict[str, Any] = {
        "enabled": (bool(enabled) if enabled is not None else None),
        "ready": limiter_ready,
        "backend": backend,
    }
    if os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1":
        info["backend"] = "memory"
    return info
