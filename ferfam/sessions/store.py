"""
Stockage des sessions (interface + implémentations).
- InMemorySessionStore: dict local au process, pour le dev et les tests.
- RedisSessionStore: redis.asyncio avec TTL, pour la production (plusieurs workers).
Le backend est choisi par SESSION_BACKEND ("memory" | "redis").
"""
import json
import logging
import time
from typing import Any, Dict, Optional, Tuple

import redis.asyncio as aioredis

from ferfam import config

logger = logging.getLogger(__name__)

# module ferfam.sessions.store
class SessionStore:
    """Interface commune: toutes les opérations sont asynchrones."""

    name = "abstract"

    async def get(self, token: str) -> Optional[Dict[str, Any]]:
        raise NotImplementedError

    async def set(self, token: str, data: Dict[str, Any], ttl: int) -> None:
        raise NotImplementedError

    async def delete(self, token: str) -> None:
        raise NotImplementedError

    async def close(self) -> None:
        return None


class InMemorySessionStore(SessionStore):
    name = "memory"

    def __init__(self):
        self._items: Dict[str, Tuple[float, Dict[str, Any]]] = {}

    async def get(self, token: str) -> Optional[Dict[str, Any]]:
        item = self._items.get(token)
        if not item:
            return None
        expires_at, data = item
        if expires_at <= time.time():
            self._items.pop(token, None)
            return None
        return dict(data)

    async def set(self, token: str, data: Dict[str, Any], ttl: int) -> None:
        self._items[token] = (time.time() + ttl, dict(data))

    async def delete(self, token: str) -> None:
        self._items.pop(token, None)

    def __len__(self) -> int:
        return len(self._items)


class RedisSessionStore(SessionStore):
    name = "redis"

    def __init__(self, client, prefix: str = "ferfam:session:"):
        self.client = client
        self.prefix = prefix

    def _key(self, token: str) -> str:
        return f"{self.prefix}{token}"

    async def get(self, token: str) -> Optional[Dict[str, Any]]:
        raw = await self.client.get(self._key(token))
        if not raw:
            return None
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("sessions.redis invalid payload token_prefix=%s", token[:6])
            return None
        return data if isinstance(data, dict) else None

    async def set(self, token: str, data: Dict[str, Any], ttl: int) -> None:
        await self.client.set(self._key(token), json.dumps(data), ex=ttl)

    async def delete(self, token: str) -> None:
        await self.client.delete(self._key(token))

    async def close(self) -> None:
        await self.client.aclose()


def build_session_store(backend: Optional[str] = None) -> SessionStore:
    """
    Construit le store selon SESSION_BACKEND.
    - "redis": client redis.asyncio (connexion paresseuse, SESSION_REDIS_URL)
    - tout autre valeur: mémoire locale
    """
    backend = (backend or config.SESSION_BACKEND or "memory").lower()
    if backend == "redis":
        client = aioredis.from_url(config.SESSION_REDIS_URL, encoding="utf-8", decode_responses=True)
        return RedisSessionStore(client)
    return InMemorySessionStore()
