"""Cart ledger: in-memory cart mirrored to a persistent store."""
import asyncio
from typing import List, Optional

from gomarket.config import get_cart_storage_key
from gomarket.errors import CartSnapshotError, CartStoreError
from gomarket.logging import get_logger, sanitize_id_for_logging
from .models import LineItem, ProductInput, dump_cart, load_cart
from .storage import CartStore

logger = get_logger(__name__)


class CartLedger:
    """
    Owns the canonical cart for one application session.

    Features:
    - add / increment / decrement with a quantity floor of 1
    - identity merge: re-adding a product bumps quantity, keeps first metadata
    - single-writer persistence: at most one store write in flight, and each
      write serializes the cart as it is when the write starts
    - one-shot hydration from the store at startup
    """

    def __init__(self, store: CartStore, key: Optional[str] = None):
        self._store = store
        self._key = key or get_cart_storage_key()
        self._items: List[LineItem] = []
        self._hydrated = False
        self._dirty = False
        self._writer: Optional[asyncio.Task] = None
        self.last_write_error: Optional[CartStoreError] = None

    @property
    def key(self) -> str:
        return self._key

    @property
    def hydrated(self) -> bool:
        return self._hydrated

    @property
    def products(self) -> List[LineItem]:
        """Current cart contents in insertion order."""
        return list(self._items)

    # ==================== HYDRATION ====================

    async def hydrate(self) -> List[LineItem]:
        """
        Load the persisted snapshot, once.

        A present snapshot replaces the in-memory cart wholesale. A missing
        snapshot leaves it empty. A malformed snapshot or an unreadable store
        falls back to an empty cart; nothing is raised.
        """
        if self._hydrated:
            return self.products
        self._hydrated = True

        try:
            raw = await self._store.get(self._key)
        except CartStoreError as e:
            logger.error(f"Cart hydration skipped, store read failed: {e}")
            self._items = []
            return self.products

        if raw is None:
            logger.info("No stored cart found, starting empty")
            return self.products

        try:
            self._items = load_cart(raw)
        except CartSnapshotError as e:
            logger.warning(f"Discarding stored cart: {e}")
            self._items = []
            return self.products

        logger.info(f"Cart hydrated with {len(self._items)} item(s)")
        return self.products

    # ==================== MUTATIONS ====================

    async def add_to_cart(self, product: ProductInput) -> List[LineItem]:
        """Add a product, or bump its quantity if it is already in the cart."""
        index = self._find(product.id)
        if index is None:
            self._items.append(LineItem.from_product(product))
        else:
            current = self._items[index]
            self._items[index] = current.with_quantity(current.quantity + 1)

        logger.debug(f"Added {sanitize_id_for_logging(product.id)} to cart")
        self._schedule_write()
        return self.products

    async def increment(self, product_id: str) -> List[LineItem]:
        """Raise quantity by one. Unknown ids are ignored."""
        index = self._find(product_id)
        if index is None:
            return self.products

        current = self._items[index]
        self._items[index] = current.with_quantity(current.quantity + 1)
        logger.debug(f"Incremented {sanitize_id_for_logging(product_id)}")
        self._schedule_write()
        return self.products

    async def decrement(self, product_id: str) -> List[LineItem]:
        """Lower quantity by one, never below 1. Unknown ids are ignored."""
        index = self._find(product_id)
        if index is None or self._items[index].quantity <= 1:
            return self.products

        current = self._items[index]
        self._items[index] = current.with_quantity(current.quantity - 1)
        logger.debug(f"Decremented {sanitize_id_for_logging(product_id)}")
        self._schedule_write()
        return self.products

    def _find(self, product_id: str) -> Optional[int]:
        return next(
            (index for index, item in enumerate(self._items) if item.id == product_id),
            None,
        )

    # ==================== PERSISTENCE ====================

    def _schedule_write(self) -> None:
        """Mark the cart dirty and make sure the writer task is running."""
        self._dirty = True
        if self._writer is None or self._writer.done():
            self._writer = asyncio.create_task(self._drain_writes())

    async def _drain_writes(self) -> None:
        # Mutations landing during an await only set _dirty; the loop picks
        # them up with a fresh snapshot, so writes never go out of order.
        while self._dirty:
            self._dirty = False
            try:
                await self._store.set(self._key, dump_cart(self._items))
            except CartStoreError as e:
                logger.error(f"Cart write failed, next mutation will retry with full state: {e}")
                self.last_write_error = e
            except Exception as e:
                # Protocol breach: backends should wrap failures in CartStoreError
                logger.error(f"Unexpected cart write failure: {e}", exc_info=True)
                self.last_write_error = CartStoreError("set", e)
            else:
                self.last_write_error = None

    async def flush(self) -> None:
        """Wait until every scheduled write has been attempted."""
        while self._writer is not None and not self._writer.done():
            await self._writer
