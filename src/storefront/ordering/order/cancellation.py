"""Order cancellation: command and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.ordering.order.order import Order
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Order")
class CancelOrder:
    order_id = Identifier(required=True)


def cancel_and_restock(order):
    """Cancel ``order`` and return its quantity to the product's stock.

    The caller persists the order. A product that has since been deleted
    has no stock to return to; the cancellation still goes through.
    """
    order.cancel()

    product_repo = current_domain.repository_for(Product)
    product = product_repo.find_by_id(str(order.product.product_id))
    if product is None:
        logger.warning(
            "stock_restore_skipped",
            order_id=str(order.id),
            product_id=str(order.product.product_id),
            reason="product no longer exists",
        )
        return

    product.release_stock(order.product.quantity)
    product_repo.add(product)


@storefront.command_handler(part_of=Order)
class CancelOrderHandler:
    @handle(CancelOrder)
    def cancel_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.by_id(command.order_id)
        cancel_and_restock(order)
        repo.add(order)
        logger.info(
            "order_cancelled",
            order_id=str(order.id),
            order_code=order.order_code,
            quantity_restored=order.product.quantity,
        )
