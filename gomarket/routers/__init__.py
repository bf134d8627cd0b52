"""HTTP routers."""
from .cart import router as cart_router
from .deps import get_cart_ledger, provide_cart_ledger, require_cart_ledger

__all__ = [
    "cart_router",
    "get_cart_ledger",
    "provide_cart_ledger",
    "require_cart_ledger",
]
