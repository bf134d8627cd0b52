"""Cart line items and their JSON snapshot format."""
import json
import math
from dataclasses import dataclass, replace
from typing import List, Union

from gomarket.errors import CartSnapshotError

Price = Union[int, float]

SNAPSHOT_FIELDS = ("id", "title", "image_url", "price", "quantity")


@dataclass(frozen=True)
class ProductInput:
    """Product metadata handed to add_to_cart (a line item without quantity)."""
    id: str
    title: str
    image_url: str
    price: Price


@dataclass(frozen=True)
class LineItem:
    """One product's presence in the cart."""
    id: str
    title: str
    image_url: str
    price: Price
    quantity: int = 1

    @classmethod
    def from_product(cls, product: ProductInput) -> "LineItem":
        """First appearance of a product in the cart."""
        return cls(
            id=product.id,
            title=product.title,
            image_url=product.image_url,
            price=product.price,
            quantity=1,
        )

    def with_quantity(self, quantity: int) -> "LineItem":
        return replace(self, quantity=quantity)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {name: getattr(self, name) for name in SNAPSHOT_FIELDS}

    @classmethod
    def from_dict(cls, data: dict) -> "LineItem":
        """
        Create from dictionary, validating every field.

        Raises:
            KeyError: a field is missing
            TypeError: a field has the wrong type
            ValueError: price is not finite or quantity is below 1
        """
        missing = [name for name in SNAPSHOT_FIELDS if name not in data]
        if missing:
            raise KeyError(missing[0])

        for field_name in ("id", "title", "image_url"):
            if not isinstance(data[field_name], str):
                raise TypeError(f"{field_name} must be a string")

        price = data["price"]
        # bool is an int subclass but never a price
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise TypeError("price must be a number")
        if isinstance(price, float) and not math.isfinite(price):
            raise ValueError("price must be finite")

        quantity = data["quantity"]
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise TypeError("quantity must be an integer")
        if quantity < 1:
            raise ValueError("quantity must be at least 1")

        return cls(
            id=data["id"],
            title=data["title"],
            image_url=data["image_url"],
            price=price,
            quantity=quantity,
        )


def dump_cart(items: List[LineItem]) -> str:
    """Serialize the cart, in order, to the JSON snapshot stored in the slot."""
    return json.dumps([item.to_dict() for item in items], allow_nan=False)


def load_cart(raw: str) -> List[LineItem]:
    """
    Decode a JSON snapshot back into line items.

    Raises:
        CartSnapshotError: the snapshot is not a valid cart
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        raise CartSnapshotError(f"invalid JSON ({e})") from e

    if not isinstance(data, list):
        raise CartSnapshotError(f"expected a list, got {type(data).__name__}")

    items: List[LineItem] = []
    seen_ids = set()
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise CartSnapshotError(f"entry {index} is not an object")
        try:
            item = LineItem.from_dict(entry)
        except KeyError as e:
            raise CartSnapshotError(f"entry {index} is missing field {e}") from e
        except (TypeError, ValueError) as e:
            raise CartSnapshotError(f"entry {index}: {e}") from e

        if item.id in seen_ids:
            raise CartSnapshotError(f"duplicate id {item.id!r}")
        seen_ids.add(item.id)
        items.append(item)

    return items
