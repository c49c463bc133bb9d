"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A verified payment turned into an order."""

    __version__ = 1

    order_id = Identifier(required=True)
    order_code = String(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    total_amount = Float(required=True)
    gateway_payment_id = String(required=True)
    placed_at = DateTime(required=True)


@storefront.event(part_of="Order")
class OrderStatusChanged:
    """An admin moved the order forward or attached a tracking number."""

    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    tracking_number = String()
    changed_at = DateTime(required=True)


@storefront.event(part_of="Order")
class OrderCancelled:
    """The order was cancelled before shipping; its quantity goes back to stock."""

    __version__ = 1

    order_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    cancelled_at = DateTime(required=True)
