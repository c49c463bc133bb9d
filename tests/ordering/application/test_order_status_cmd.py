"""Application tests for admin status updates and cancellation."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from storefront.catalogue.product.product import Product
from storefront.catalogue.product.removal import DeleteProduct
from storefront.exceptions import InvalidTransition
from storefront.ordering.order.cancellation import CancelOrder
from storefront.ordering.order.order import Order
from storefront.ordering.order.status import UpdateOrderStatus


def _update(order, status, tracking_number=None):
    current_domain.process(
        UpdateOrderStatus(order_id=order.id, status=status, tracking_number=tracking_number),
        asynchronous=False,
    )
    return current_domain.repository_for(Order).get(order.id)


def _cancel(order):
    current_domain.process(CancelOrder(order_id=order.id), asynchronous=False)
    return current_domain.repository_for(Order).get(order.id)


def _stock(product):
    return current_domain.repository_for(Product).get(product.id).stock


class TestUpdateOrderStatus:
    def test_ship_with_tracking_number(self, make_product, place_order):
        order = place_order(make_product())
        updated = _update(order, "shipped", tracking_number="TRK-100")
        assert updated.status == "shipped"
        assert updated.tracking_number == "TRK-100"

    def test_deliver_stamps_time(self, make_product, place_order):
        order = place_order(make_product())
        updated = _update(order, "delivered")
        assert updated.delivered_at is not None

    def test_backwards_rejected(self, make_product, place_order):
        order = place_order(make_product())
        _update(order, "shipped")
        with pytest.raises(InvalidTransition):
            _update(order, "pending")
        assert current_domain.repository_for(Order).get(order.id).status == "shipped"

    def test_unknown_status_rejected(self, make_product, place_order):
        order = place_order(make_product())
        with pytest.raises(ValidationError):
            _update(order, "teleported")

    def test_cancelled_status_restores_stock(self, make_product, place_order):
        product = make_product(stock=5)
        order = place_order(product, quantity=2)

        updated = _update(order, "cancelled")
        assert updated.status == "cancelled"
        assert _stock(product) == 5

    def test_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(UpdateOrderStatus(order_id="missing", status="shipped"), asynchronous=False)


class TestCancelOrder:
    def test_restores_stock(self, make_product, place_order):
        product = make_product(stock=5)
        order = place_order(product, quantity=2)
        assert _stock(product) == 3

        cancelled = _cancel(order)
        assert cancelled.status == "cancelled"
        assert cancelled.cancelled_at is not None
        assert _stock(product) == 5

    def test_pending_order_restores_stock(self, make_product, place_order):
        product = make_product(stock=5)
        order = place_order(product, quantity=2)
        repo = current_domain.repository_for(Order)
        pending = repo.get(order.id)
        pending.status = "pending"
        repo.add(pending)
        assert _stock(product) == 3

        cancelled = _cancel(order)
        assert cancelled.status == "cancelled"
        assert cancelled.cancelled_at is not None
        assert _stock(product) == 5

    def test_shipped_order_cannot_be_cancelled(self, make_product, place_order):
        product = make_product(stock=5)
        order = place_order(product, quantity=2)
        _update(order, "shipped")

        with pytest.raises(InvalidTransition) as exc:
            _cancel(order)
        assert "Cannot cancel order with status shipped" in str(exc.value)
        assert _stock(product) == 3

    def test_second_cancellation_does_not_restock_twice(self, make_product, place_order):
        product = make_product(stock=5)
        order = place_order(product, quantity=2)
        _cancel(order)

        with pytest.raises(InvalidTransition):
            _cancel(order)
        assert _stock(product) == 5

    def test_deleted_product_is_skipped(self, make_product, place_order):
        product = make_product()
        order = place_order(product)
        current_domain.process(DeleteProduct(product_id=product.id), asynchronous=False)

        cancelled = _cancel(order)
        assert cancelled.status == "cancelled"

    def test_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(CancelOrder(order_id="missing"), asynchronous=False)
