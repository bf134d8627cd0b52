"""Cart package: models, storage, and the ledger."""
from .models import LineItem, ProductInput, dump_cart, load_cart
from .service import CartLedger
from .storage import CartStore, MemoryCartStore, RedisCartStore, create_cart_store

__all__ = [
    "LineItem",
    "ProductInput",
    "dump_cart",
    "load_cart",
    "CartLedger",
    "CartStore",
    "MemoryCartStore",
    "RedisCartStore",
    "create_cart_store",
]
