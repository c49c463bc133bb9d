"""Order status updates: command and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.ordering.order.cancellation import cancel_and_restock
from storefront.ordering.order.order import Order, OrderStatus
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, choices=OrderStatus)
    tracking_number = String(max_length=100)


@storefront.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.by_id(command.order_id)
        previous = order.status

        if command.status == OrderStatus.CANCELLED.value:
            cancel_and_restock(order)
            if command.tracking_number:
                order.tracking_number = command.tracking_number
        else:
            order.change_status(command.status, tracking_number=command.tracking_number)

        repo.add(order)
        logger.info(
            "order_status_changed",
            order_id=str(order.id),
            previous_status=previous,
            new_status=order.status,
            tracking_number=order.tracking_number,
        )
