"""Persistent store backends for the cart slot."""
from typing import Dict, Optional, Protocol

from upstash_redis.asyncio import Redis as AsyncRedis

from gomarket.config import BACKEND_MEMORY, get_store_backend
from gomarket.db import create_redis
from gomarket.errors import CartStoreError
from gomarket.logging import get_logger

logger = get_logger(__name__)


class CartStore(Protocol):
    """
    Durable single-value key-value slot. No transactions.

    Implementations wrap backend failures in CartStoreError.
    """

    async def get(self, key: str) -> Optional[str]: ...
    async def set(self, key: str, value: str) -> None: ...


class RedisCartStore:
    """Cart slot kept in Upstash Redis, written without TTL."""

    def __init__(self, redis: AsyncRedis):
        self._redis = redis

    async def get(self, key: str) -> Optional[str]:
        try:
            value = await self._redis.get(key)
        except Exception as e:
            logger.error(f"Failed to read cart from Redis: {e}")
            raise CartStoreError("get", e) from e
        if value is None:
            return None
        # Upstash returns str, but tolerate clients that hand back bytes
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str) -> None:
        try:
            await self._redis.set(key, value)
        except Exception as e:
            logger.error(f"Failed to write cart to Redis: {e}")
            raise CartStoreError("set", e) from e


class MemoryCartStore:
    """
    In-memory store for local development and tests.

    Contents are lost on restart.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.data[key] = value


def create_cart_store() -> CartStore:
    """Build the store selected by CART_STORE_BACKEND."""
    backend = get_store_backend()
    if backend == BACKEND_MEMORY:
        logger.warning("Using in-memory cart store, cart will not survive restarts")
        return MemoryCartStore()
    return RedisCartStore(create_redis())
