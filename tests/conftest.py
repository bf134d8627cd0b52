"""Pytest configuration and fixtures"""
import os
import pytest
from unittest.mock import AsyncMock, Mock

# Set test environment variables
os.environ.setdefault("UPSTASH_REDIS_REST_URL", "https://test.upstash.io")
os.environ.setdefault("UPSTASH_REDIS_REST_TOKEN", "test_token")
os.environ.setdefault("CART_STORE_BACKEND", "memory")

from gomarket.cart import CartLedger, MemoryCartStore, ProductInput
from gomarket.errors import CartStoreError

CART_KEY = "@GoMarketplace:cart"


class FailingCartStore(MemoryCartStore):
    """Memory store whose writes fail while ``fail_writes`` is set."""

    def __init__(self, initial=None):
        super().__init__(initial)
        self.fail_writes = True
        self.fail_reads = False

    async def get(self, key):
        if self.fail_reads:
            raise CartStoreError("get", ConnectionError("store offline"))
        return await super().get(key)

    async def set(self, key, value):
        if self.fail_writes:
            raise CartStoreError("set", ConnectionError("store offline"))
        await super().set(key, value)


@pytest.fixture
def memory_store():
    """Empty in-memory store"""
    return MemoryCartStore()


@pytest.fixture
def failing_store():
    """Store that rejects writes"""
    return FailingCartStore()


@pytest.fixture
def ledger(memory_store):
    """Ledger over an empty in-memory store"""
    return CartLedger(memory_store, key=CART_KEY)


@pytest.fixture
def shirt():
    """Sample product"""
    return ProductInput(id="A", title="Shirt", image_url="u", price=10)


@pytest.fixture
def shoe_snapshot():
    """Stored snapshot with one product"""
    return '[{"id": "B", "title": "Shoe", "image_url": "v", "price": 20, "quantity": 5}]'


@pytest.fixture
def mock_redis():
    """Mock Upstash async Redis client"""
    redis = Mock()
    redis.get = AsyncMock(return_value=None)
    redis.set = AsyncMock(return_value="OK")
    return redis
