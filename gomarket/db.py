"""
Redis Module - Upstash Redis client for cart persistence.

Uses standard Upstash env var names:
- UPSTASH_REDIS_REST_URL
- UPSTASH_REDIS_REST_TOKEN
"""
from upstash_redis.asyncio import Redis as AsyncRedis

from gomarket.config import get_redis_credentials


def create_redis() -> AsyncRedis:
    """
    Build an async Upstash Redis client.

    The caller owns the client; it is handed to RedisCartStore rather than
    looked up globally.
    """
    url, token = get_redis_credentials()
    if not url or not token:
        raise ValueError("UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN must be set")
    return AsyncRedis(url=url, token=token)
