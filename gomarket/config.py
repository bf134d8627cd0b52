"""Cart configuration read from the environment."""
import os

from gomarket.errors import ERROR_UNKNOWN_BACKEND

DEFAULT_CART_STORAGE_KEY = "@GoMarketplace:cart"

BACKEND_REDIS = "redis"
BACKEND_MEMORY = "memory"
SUPPORTED_BACKENDS = (BACKEND_REDIS, BACKEND_MEMORY)


def get_cart_storage_key() -> str:
    """Key of the single slot holding the serialized cart."""
    return os.environ.get("CART_STORAGE_KEY") or DEFAULT_CART_STORAGE_KEY


def get_store_backend() -> str:
    """
    Name of the persistent store backend.

    Raises:
        ValueError: if CART_STORE_BACKEND names an unsupported backend
    """
    backend = os.environ.get("CART_STORE_BACKEND", BACKEND_REDIS).strip().lower()
    if backend not in SUPPORTED_BACKENDS:
        raise ValueError(
            f"{ERROR_UNKNOWN_BACKEND}: {backend!r} (expected one of {', '.join(SUPPORTED_BACKENDS)})"
        )
    return backend


def get_redis_credentials() -> tuple[str, str]:
    """Upstash REST url and token (standard Upstash env var names)."""
    return (
        os.environ.get("UPSTASH_REDIS_REST_URL", ""),
        os.environ.get("UPSTASH_REDIS_REST_TOKEN", ""),
    )
