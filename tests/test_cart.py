"""
Tests for cart line items and the snapshot format
"""

import json
import pytest
from gomarket.cart import LineItem, ProductInput, dump_cart, load_cart
from gomarket.cart.models import SNAPSHOT_FIELDS
from gomarket.errors import CartSnapshotError


class TestLineItem:
    """Tests for LineItem dataclass."""

    def test_from_product_starts_at_one(self):
        """A product enters the cart with quantity 1."""
        item = LineItem.from_product(
            ProductInput(id="prod-1", title="Shirt", image_url="u", price=10)
        )

        assert item.quantity == 1
        assert item.title == "Shirt"

    def test_with_quantity_keeps_metadata(self):
        """Changing quantity leaves the other fields alone."""
        item = LineItem(id="prod-1", title="Shirt", image_url="u", price=10)
        bumped = item.with_quantity(4)

        assert bumped.quantity == 4
        assert bumped.title == "Shirt"
        assert item.quantity == 1

    def test_to_dict(self):
        """Test serialization to dict."""
        item = LineItem(id="prod-1", title="Shirt", image_url="u", price=9.5, quantity=2)

        assert item.to_dict() == {
            "id": "prod-1",
            "title": "Shirt",
            "image_url": "u",
            "price": 9.5,
            "quantity": 2,
        }

    def test_from_dict_rejects_zero_quantity(self):
        """Quantity 0 is never a valid line item."""
        with pytest.raises(ValueError):
            LineItem.from_dict(
                {"id": "a", "title": "t", "image_url": "u", "price": 1, "quantity": 0}
            )


class TestSnapshot:
    """Tests for dump_cart / load_cart."""

    def test_round_trip_preserves_order_and_fields(self):
        """Serialize then deserialize gives back an equal cart."""
        items = [
            LineItem(id="B", title="Shoe", image_url="v", price=20, quantity=5),
            LineItem(id="A", title="Shirt", image_url="u", price=10.25, quantity=1),
        ]

        assert load_cart(dump_cart(items)) == items

    def test_dump_is_json_array(self):
        """The stored format is a JSON array of objects."""
        items = [LineItem(id="A", title="Shirt", image_url="u", price=10, quantity=3)]

        data = json.loads(dump_cart(items))
        assert data == [
            {"id": "A", "title": "Shirt", "image_url": "u", "price": 10, "quantity": 3}
        ]

    def test_empty_cart(self):
        assert load_cart(dump_cart([])) == []

    @pytest.mark.parametrize(
        "raw",
        [
            "not json",
            '{"id": "A"}',
            "[1, 2]",
            '[{"id": "A", "title": "t", "image_url": "u", "price": 1}]',
            '[{"id": "A", "title": "t", "image_url": "u", "price": "1", "quantity": 1}]',
            '[{"id": "A", "title": "t", "image_url": "u", "price": true, "quantity": 1}]',
            '[{"id": "A", "title": "t", "image_url": "u", "price": 1, "quantity": 1.5}]',
            '[{"id": "A", "title": "t", "image_url": "u", "price": 1, "quantity": 0}]',
            '[{"id": 7, "title": "t", "image_url": "u", "price": 1, "quantity": 1}]',
            '[{"id": "A", "title": "t", "image_url": "u", "price": Infinity, "quantity": 1}]',
            '[{"id": "A", "title": "t", "image_url": "u", "price": NaN, "quantity": 1}]',
        ],
    )
    def test_malformed_snapshots_rejected(self, raw):
        """Anything that is not a valid cart raises CartSnapshotError."""
        with pytest.raises(CartSnapshotError):
            load_cart(raw)

    def test_duplicate_ids_rejected(self):
        """Ids must be unique within a snapshot."""
        entry = {"id": "A", "title": "t", "image_url": "u", "price": 1, "quantity": 1}

        with pytest.raises(CartSnapshotError) as exc_info:
            load_cart(json.dumps([entry, entry]))

        assert "duplicate" in exc_info.value.reason

    def test_dump_keeps_integer_prices(self):
        """Integer prices are not widened to floats"""
        items = [LineItem(id="A", title="Shirt", image_url="u", price=10, quantity=1)]

        assert type(json.loads(dump_cart(items))[0]["price"]) is int
        assert type(load_cart(dump_cart(items))[0].price) is int

    def test_dump_rejects_non_finite_price(self):
        """The stored snapshot is always standard JSON"""
        items = [LineItem(id="A", title="Shirt", image_url="u", price=float("inf"), quantity=1)]

        with pytest.raises(ValueError):
            dump_cart(items)

    def test_fields_follow_snapshot_layout(self):
        item = LineItem(id="A", title="Shirt", image_url="u", price=10, quantity=2)

        assert tuple(item.to_dict()) == SNAPSHOT_FIELDS

    def test_large_integer_price_loads(self):
        raw = json.dumps([{"id": "A", "title": "t", "image_url": "u", "price": 10 ** 400, "quantity": 1}])

        assert load_cart(raw)[0].price == 10 ** 400
