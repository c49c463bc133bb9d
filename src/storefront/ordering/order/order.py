"""Order aggregate: a single-product purchase paid through the gateway.

State Machine:
    PENDING → CONFIRMED → SHIPPED → DELIVERED
    CANCELLED (from PENDING, CONFIRMED)

Orders are created CONFIRMED, because they are only written once the
gateway's payment signature has been verified. Forward moves may skip
states (CONFIRMED → DELIVERED); nothing moves backwards and nothing leaves
DELIVERED or CANCELLED.

The purchased product is copied into a ``ProductSnapshot`` at placement
time. Later catalogue edits never reach an existing order.
"""

import secrets
import string
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String, ValueObject

from storefront.domain import storefront
from storefront.exceptions import InvalidTransition
from storefront.ordering.order.events import OrderCancelled, OrderPlaced, OrderStatusChanged


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentStatus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


# Position along the forward path; CANCELLED is a side exit, not a step.
_PROGRESSION = {
    OrderStatus.PENDING.value: 0,
    OrderStatus.CONFIRMED.value: 1,
    OrderStatus.SHIPPED.value: 2,
    OrderStatus.DELIVERED.value: 3,
}

_TERMINAL_STATES = {OrderStatus.DELIVERED.value, OrderStatus.CANCELLED.value}

_CANCELLABLE_STATES = {OrderStatus.PENDING.value, OrderStatus.CONFIRMED.value}

_CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_order_code(now: datetime | None = None) -> str:
    """Human-facing order reference, e.g. ``ORD-261018-7KQ2ZD``."""
    now = now or datetime.now(UTC)
    suffix = "".join(secrets.choice(_CODE_ALPHABET) for _ in range(6))
    return f"ORD-{now:%y%m%d}-{suffix}"


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@storefront.value_object(part_of="Order")
class CustomerContact:
    name = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    phone = String(required=True, max_length=20)


@storefront.value_object(part_of="Order")
class ShippingAddress:
    """Where the order is delivered, as entered at checkout."""

    line1 = String(required=True, max_length=255)
    line2 = String(max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    pincode = String(required=True, max_length=10)
    country = String(max_length=100, default="India")


@storefront.value_object(part_of="Order")
class ProductSnapshot:
    """The product as it was sold: a copy, not a reference to the live catalogue."""

    product_id = Identifier(required=True)
    name = String(required=True, max_length=200)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    image = String(max_length=500)


@storefront.value_object(part_of="Order")
class PaymentRecord:
    gateway_order_id = String(required=True, max_length=100)
    gateway_payment_id = String(required=True, max_length=100)
    signature = String(required=True, max_length=255)
    method = String(max_length=30, default="razorpay")
    status = String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------
@storefront.aggregate
class Order:
    order_code = String(required=True, max_length=20, unique=True)
    customer = ValueObject(CustomerContact, required=True)
    shipping_address = ValueObject(ShippingAddress, required=True)
    product = ValueObject(ProductSnapshot, required=True)
    payment = ValueObject(PaymentRecord, required=True)
    subtotal = Float(required=True, min_value=0.0)
    shipping_charge = Float(default=0.0, min_value=0.0)
    tax = Float(default=0.0, min_value=0.0)
    total_amount = Float(required=True, min_value=0.0)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    tracking_number = String(max_length=100)
    delivered_at = DateTime()
    cancelled_at = DateTime()
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def total_must_add_up(self):
        expected = (self.subtotal or 0.0) + (self.shipping_charge or 0.0) + (self.tax or 0.0)
        if round(self.total_amount or 0.0, 2) != round(expected, 2):
            raise ValidationError({"total_amount": ["Total must equal subtotal plus shipping and tax"]})

    @classmethod
    def place(cls, customer, shipping_address, product, payment, shipping_charge=0.0, tax=0.0):
        """Record a paid order. ``payment`` must already be verified."""
        now = datetime.now(UTC)
        subtotal = round(product.price * product.quantity, 2)

        order = cls(
            order_code=generate_order_code(now),
            customer=customer,
            shipping_address=shipping_address,
            product=product,
            payment=payment,
            subtotal=subtotal,
            shipping_charge=shipping_charge,
            tax=tax,
            total_amount=round(subtotal + shipping_charge + tax, 2),
            status=OrderStatus.CONFIRMED.value,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=order.id,
                order_code=order.order_code,
                product_id=product.product_id,
                quantity=product.quantity,
                total_amount=order.total_amount,
                gateway_payment_id=payment.gateway_payment_id,
                placed_at=now,
            )
        )
        return order

    @property
    def is_cancellable(self) -> bool:
        return self.status in _CANCELLABLE_STATES

    def change_status(self, new_status, tracking_number=None):
        """Move along the forward path, optionally recording a tracking number.

        Re-applying the current status is allowed so a tracking number can be
        attached without a transition. Cancellation has its own method because
        it also has to give the stock back.
        """
        if new_status == OrderStatus.CANCELLED.value:
            raise InvalidTransition({"status": ["Use order cancellation to cancel an order"]})
        if new_status not in _PROGRESSION:
            raise ValidationError({"status": [f"Unknown order status '{new_status}'"]})

        previous = self.status
        if new_status != previous:
            if previous in _TERMINAL_STATES:
                raise InvalidTransition({"status": [f"Cannot change status of a {previous} order"]})
            if _PROGRESSION[new_status] < _PROGRESSION[previous]:
                raise InvalidTransition({"status": [f"Cannot move order from {previous} back to {new_status}"]})

        now = datetime.now(UTC)
        if tracking_number:
            self.tracking_number = tracking_number
        if new_status != previous:
            self.status = new_status
            if new_status == OrderStatus.DELIVERED.value:
                self.delivered_at = now
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=self.id,
                previous_status=previous,
                new_status=new_status,
                tracking_number=self.tracking_number,
                changed_at=now,
            )
        )

    def cancel(self):
        if not self.is_cancellable:
            raise InvalidTransition({"status": [f"Cannot cancel order with status {self.status}"]})

        now = datetime.now(UTC)
        self.status = OrderStatus.CANCELLED.value
        self.cancelled_at = now
        self.updated_at = now

        self.raise_(
            OrderCancelled(
                order_id=self.id,
                product_id=self.product.product_id,
                quantity=self.product.quantity,
                cancelled_at=now,
            )
        )
