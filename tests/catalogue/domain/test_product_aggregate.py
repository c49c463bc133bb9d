"""Tests for the Product aggregate root."""

import pytest
from protean.exceptions import ValidationError
from storefront.catalogue.product.events import ProductCreated, StockAdjusted
from storefront.catalogue.product.product import Product, ProductSpecs
from storefront.exceptions import InsufficientStock


def _product(**overrides):
    defaults = {
        "name": "USB  Cable!!",
        "price": 100.0,
        "description": "Braided cable",
        "stock": 5,
    }
    defaults.update(overrides)
    return Product.create(**defaults)


class TestProductCreation:
    def test_slug_derived_from_name(self):
        assert _product().slug == "usb-cable"

    def test_defaults(self):
        product = _product()
        assert product.rating == 0.0
        assert product.review_count == 0
        assert product.is_active is True
        assert product.is_featured is False
        assert product.specs.warranty == "1 Year"
        assert product.feature_list == []
        assert product.tag_list == []
        assert product.created_at is not None

    def test_lists_are_kept_in_order(self):
        product = _product(features=["Braided", "3A", "1m"], tags=["usb", "cable"])
        assert product.feature_list == ["Braided", "3A", "1m"]
        assert product.tag_list == ["usb", "cable"]

    def test_images_keep_position(self):
        product = _product(
            images=[
                {"url": "https://img.example/1.jpg", "storage_id": "p/1"},
                {"url": "https://img.example/2.jpg", "storage_id": "p/2"},
            ]
        )
        assert [i.display_order for i in product.ordered_images()] == [0, 1]
        assert product.primary_image_url == "https://img.example/1.jpg"
        assert sorted(product.storage_ids()) == ["p/1", "p/2"]

    def test_custom_specs(self):
        product = _product(specs=ProductSpecs(warranty="2 Years", power="30W"))
        assert product.specs.warranty == "2 Years"
        assert product.specs.power == "30W"

    def test_raises_created_event(self):
        product = _product()
        assert len(product._events) == 1
        event = product._events[0]
        assert isinstance(event, ProductCreated)
        assert event.slug == "usb-cable"
        assert event.stock == 5

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            _product(price=-1.0)

    def test_rating_above_five_rejected(self):
        with pytest.raises(ValidationError):
            Product(name="X", slug="x", price=1.0, description="d", rating=5.5)

    def test_discount_above_price_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _product(discount_price=150.0)
        assert "Discount price cannot exceed the price" in str(exc.value)


class TestProductDetails:
    def test_rename_recomputes_slug(self):
        product = _product()
        product.update_details(name="Braided USB-C Cable (2m)")
        assert product.slug == "braided-usb-c-cable-2m"

    def test_untouched_fields_survive(self):
        product = _product(short_description="Short")
        product.update_details(price=120.0)
        assert product.price == 120.0
        assert product.short_description == "Short"
        assert product.name == "USB  Cable!!"

    def test_stock_edit_raises_audit_event(self):
        product = _product()
        product._events.clear()
        product.update_details(stock=9)
        adjustments = [e for e in product._events if isinstance(e, StockAdjusted)]
        assert len(adjustments) == 1
        assert adjustments[0].previous_stock == 5
        assert adjustments[0].new_stock == 9
        assert adjustments[0].reason == "admin_edit"

    def test_remove_images_by_storage_id(self):
        product = _product(
            images=[
                {"url": "https://img.example/1.jpg", "storage_id": "p/1"},
                {"url": "https://img.example/2.jpg", "storage_id": "p/2"},
            ]
        )
        released = product.remove_images_by_storage_id(["p/1", "missing"])
        assert released == ["p/1"]
        assert [i.storage_id for i in product.ordered_images()] == ["p/2"]
        assert product.ordered_images()[0].display_order == 0


class TestStock:
    def test_reserve_decrements(self):
        product = _product()
        product.reserve_stock(2)
        assert product.stock == 3

    def test_reserve_all_remaining(self):
        product = _product()
        product.reserve_stock(5)
        assert product.stock == 0

    def test_reserve_more_than_available(self):
        product = _product()
        with pytest.raises(InsufficientStock) as exc:
            product.reserve_stock(6)
        assert "Insufficient stock" in str(exc.value)
        assert product.stock == 5

    def test_insufficient_stock_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            _product(stock=0).reserve_stock(1)

    def test_release_increments(self):
        product = _product()
        product.release_stock(3)
        assert product.stock == 8

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError):
            _product().reserve_stock(0)
