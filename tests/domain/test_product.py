"""Unit tests for the Product aggregate."""

import dataclasses
import unicodedata
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Price


def _fields(exc_info) -> list[str]:
    return [e.field for e in exc_info.value.errors]


class TestProductCreate:

    def test_create_normalizes_fields(self):
        p = Product.create("  Widget ", "19.99")
        assert p.id is None
        assert p.title == "Widget"
        assert p.price == Price(Decimal("19.99"))
        assert p.created_at.tzinfo is not None

    def test_decomposed_unicode_title_accepted(self):
        p = Product.create(unicodedata.normalize("NFD", "Café"), "1.00")
        assert p.title == "Café"

    def test_create_accepts_explicit_timestamp(self):
        p = Product.create("Widget", 5, id=3, created_at="2024-01-15T10:30:00+00:00")
        assert p.id == 3
        assert p.created_at == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

    def test_invalid_timestamp_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Product.create("Widget", 5, created_at="yesterday")
        assert _fields(exc_info) == ["created_at"]

    def test_reports_all_failing_fields_together(self):
        with pytest.raises(ValidationError) as exc_info:
            Product.create("", "free")
        assert _fields(exc_info) == ["title", "price"]

    def test_invalid_id_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Product.create("Widget", 5, id=0)
        assert _fields(exc_info) == ["id"]


class TestProductValidationBoundary:

    @pytest.mark.parametrize("price", ["0.01", "999999.99"])
    def test_price_bounds_accepted(self, price):
        assert Product.create("Widget", price).price.amount == Decimal(price)

    @pytest.mark.parametrize("price", ["0.00", "1000000.00"])
    def test_price_bounds_rejected(self, price):
        with pytest.raises(ValidationError) as exc_info:
            Product.create("Widget", price)
        assert _fields(exc_info) == ["price"]

    @pytest.mark.parametrize("length", [1, 255])
    def test_title_lengths_accepted(self, length):
        assert len(Product.create("x" * length, "1").title) == length

    @pytest.mark.parametrize("length", [0, 256])
    def test_title_lengths_rejected(self, length):
        with pytest.raises(ValidationError) as exc_info:
            Product.create("x" * length, "1")
        assert _fields(exc_info) == ["title"]

    def test_title_is_not_truncated(self):
        with pytest.raises(ValidationError):
            Product.create("y" * 300, "1")

    def test_markup_only_title_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Product.create("<script></script>", "1")
        assert _fields(exc_info) == ["title"]


class TestProductImmutability:

    def test_fields_cannot_be_assigned(self):
        p = Product.create("Widget", "19.99", id=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.title = "Other"  # type: ignore[misc]

    def test_with_changes_returns_new_value(self):
        original = Product.create("Widget", "19.99", id=1)
        changed = original.with_changes(title="Widget Pro")
        assert changed is not original
        assert original.title == "Widget"
        assert changed.title == "Widget Pro"
        assert changed.price == original.price
        assert changed.id == original.id
        assert changed.created_at == original.created_at

    def test_with_changes_price_only(self):
        original = Product.create("Widget", "19.99", id=1)
        changed = original.with_changes(price="25")
        assert changed.title == "Widget"
        assert changed.price.amount == Decimal("25.00")

    def test_with_changes_revalidates(self):
        original = Product.create("Widget", "19.99", id=1)
        with pytest.raises(ValidationError):
            original.with_changes(price="0")

    def test_with_id_and_created_at(self):
        original = Product.create("Widget", "19.99")
        stamped = original.with_id(7).with_created_at("2023-05-01T00:00:00+00:00")
        assert stamped.id == 7
        assert stamped.created_at_iso == "2023-05-01T00:00:00+00:00"
        assert original.id is None

    def test_with_id_rejects_non_positive(self):
        with pytest.raises(ValidationError):
            Product.create("Widget", "1").with_id(0)


class TestProductRecord:

    def test_record_round_trip(self):
        raw = {
            "id": 4,
            "title": "Gadget",
            "price": 25.5,
            "created_at": "2024-01-15T10:30:00+00:00",
        }
        product = Product.from_record(raw)
        assert product.to_record() == raw

    def test_record_price_is_two_decimal_float(self):
        record = Product.create("Gadget", "10.555", id=1).to_record()
        assert record["price"] == 10.56
