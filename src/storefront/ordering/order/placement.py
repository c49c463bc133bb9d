"""Checkout: opening a gateway order and placing the paid order.

Checkout is two round trips. ``open_gateway_order`` registers the amount
with the payment gateway so the client can collect the payment; once the
gateway returns a signed payment, ``PlaceOrder`` verifies the signature,
records the order and takes the quantity out of stock in one unit of work.
"""

import json
import time

from protean import handle
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.config import get_settings
from storefront.domain import storefront
from storefront.exceptions import InsufficientStock, InvalidPayment
from storefront.ordering.order.order import (
    CustomerContact,
    Order,
    PaymentRecord,
    PaymentStatus,
    ProductSnapshot,
    ShippingAddress,
)
from storefront.payments.gateway import get_gateway
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _check_stock(product, quantity):
    if quantity > product.stock:
        raise InsufficientStock({"stock": [f"Insufficient stock. Only {product.stock} items available"]})


def open_gateway_order(product_id: str, quantity: int) -> dict:
    """Register ``quantity`` units of a product with the payment gateway.

    Nothing is reserved yet: stock is checked again when the paid order is
    placed.
    """
    product = current_domain.repository_for(Product).by_id(product_id)
    _check_stock(product, quantity)

    settings = get_settings()
    gateway_order = get_gateway().create_order(
        amount=int(round(product.price * quantity * 100)),
        currency=settings.currency,
        receipt=f"order_{int(time.time() * 1000)}",
        notes={
            "product_id": str(product.id),
            "product_name": product.name,
            "quantity": str(quantity),
        },
    )
    logger.info(
        "gateway_order_opened",
        gateway_order_id=gateway_order.id,
        product_id=str(product.id),
        amount=gateway_order.amount,
    )

    return {
        "order_id": gateway_order.id,
        "amount": gateway_order.amount,
        "currency": gateway_order.currency,
        "product": {
            "id": str(product.id),
            "name": product.name,
            "price": product.price,
            "image": product.primary_image_url,
        },
    }


@storefront.command(part_of="Order")
class PlaceOrder:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    customer = Text(required=True)  # JSON: {name, email, phone}
    shipping_address = Text(required=True)  # JSON: address dict
    gateway_order_id = String(required=True, max_length=100)
    gateway_payment_id = String(required=True, max_length=100)
    signature = String(required=True, max_length=255)


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        product_repo = current_domain.repository_for(Product)
        product = product_repo.by_id(command.product_id)
        _check_stock(product, command.quantity)

        verified = get_gateway().verify_payment_signature(
            command.gateway_order_id,
            command.gateway_payment_id,
            command.signature,
        )
        if not verified:
            logger.warning(
                "payment_signature_rejected",
                gateway_order_id=command.gateway_order_id,
                gateway_payment_id=command.gateway_payment_id,
            )
            raise InvalidPayment({"signature": ["Invalid payment signature"]})

        order = Order.place(
            customer=CustomerContact(**json.loads(command.customer)),
            shipping_address=ShippingAddress(**json.loads(command.shipping_address)),
            product=ProductSnapshot(
                product_id=product.id,
                name=product.name,
                price=product.price,
                quantity=command.quantity,
                image=product.primary_image_url,
            ),
            payment=PaymentRecord(
                gateway_order_id=command.gateway_order_id,
                gateway_payment_id=command.gateway_payment_id,
                signature=command.signature,
                status=PaymentStatus.COMPLETED.value,
            ),
        )
        product.reserve_stock(command.quantity)

        current_domain.repository_for(Order).add(order)
        product_repo.add(product)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            order_code=order.order_code,
            product_id=str(product.id),
            quantity=command.quantity,
            total_amount=order.total_amount,
            stock_remaining=product.stock,
        )
        return str(order.id)
