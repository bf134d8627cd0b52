"""
Cart Router

Thin HTTP surface over the session's CartLedger. Unknown product ids are not
errors: increment/decrement on them return the unchanged cart.
"""
from fastapi import APIRouter, Depends

from gomarket.cart import CartLedger
from gomarket.logging import get_logger, sanitize_id_for_logging
from .deps import get_cart_ledger
from .models import AddToCartRequest, CartResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("", response_model=CartResponse)
async def get_cart(ledger: CartLedger = Depends(get_cart_ledger)):
    """Current cart contents."""
    return CartResponse.from_items(ledger.products)


@router.post("/items", response_model=CartResponse)
async def add_to_cart(request: AddToCartRequest, ledger: CartLedger = Depends(get_cart_ledger)):
    """Add a product or bump its quantity."""
    items = await ledger.add_to_cart(request.to_product())
    logger.info(f"Cart add: {sanitize_id_for_logging(request.id)}")
    return CartResponse.from_items(items)


@router.post("/items/{product_id}/increment", response_model=CartResponse)
async def increment_item(product_id: str, ledger: CartLedger = Depends(get_cart_ledger)):
    items = await ledger.increment(product_id)
    return CartResponse.from_items(items)


@router.post("/items/{product_id}/decrement", response_model=CartResponse)
async def decrement_item(product_id: str, ledger: CartLedger = Depends(get_cart_ledger)):
    items = await ledger.decrement(product_id)
    return CartResponse.from_items(items)
