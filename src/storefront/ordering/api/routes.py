"""FastAPI routes for checkout and order management."""

from datetime import date, datetime

from fastapi import APIRouter
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.catalogue.views import product_record
from storefront.ordering.api.schemas import (
    CreateGatewayOrderRequest,
    UpdateOrderStatusRequest,
    VerifyPaymentRequest,
)
from storefront.ordering.order.cancellation import CancelOrder
from storefront.ordering.order.listing import OrderFilter
from storefront.ordering.order.order import Order
from storefront.ordering.order.placement import PlaceOrder, open_gateway_order
from storefront.ordering.order.status import UpdateOrderStatus
from storefront.ordering.order.views import order_record, tracking_view
from storefront.shared.envelope import ok, paged

order_router = APIRouter(prefix="/orders", tags=["orders"])


def _with_product_detail(order) -> dict:
    record = order_record(order)
    product = current_domain.repository_for(Product).find_by_id(str(order.product.product_id))
    record["product_detail"] = product_record(product) if product is not None else None
    return record


@order_router.post("/create-razorpay-order")
async def create_gateway_order(body: CreateGatewayOrderRequest):
    return ok(data=open_gateway_order(body.product_id, body.quantity))


@order_router.post("/verify-payment", status_code=201)
async def verify_payment(body: VerifyPaymentRequest):
    command = PlaceOrder(
        product_id=body.product_id,
        quantity=body.quantity,
        customer=body.customer.model_dump_json(),
        shipping_address=body.shipping_address.model_dump_json(),
        gateway_order_id=body.gateway_order_id,
        gateway_payment_id=body.gateway_payment_id,
        signature=body.signature,
    )
    order_id = current_domain.process(command, asynchronous=False)
    order = current_domain.repository_for(Order).by_id(order_id)
    return ok(data=order_record(order), message="Payment verified and order created", status_code=201)


@order_router.get("")
async def list_orders(
    page: int = 1,
    limit: int = 10,
    status: str | None = None,
    payment_status: str | None = None,
    search: str | None = None,
    start_date: date | datetime | None = None,
    end_date: date | datetime | None = None,
):
    order_filter = OrderFilter(
        page=page,
        limit=limit,
        status=status,
        payment_status=payment_status,
        search=search,
        start_date=start_date,
        end_date=end_date,
    )
    result = current_domain.repository_for(Order).search(order_filter)
    return paged(result, [order_record(order) for order in result.items])


@order_router.get("/stats")
async def order_stats():
    return ok(data=current_domain.repository_for(Order).statistics())


@order_router.get("/track/{order_code}")
async def track_order(order_code: str):
    order = current_domain.repository_for(Order).by_code(order_code)
    return ok(data=tracking_view(order))


@order_router.get("/{order_id}")
async def get_order(order_id: str):
    order = current_domain.repository_for(Order).by_id(order_id)
    return ok(data=_with_product_detail(order))


@order_router.put("/{order_id}/status")
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest):
    command = UpdateOrderStatus(
        order_id=order_id,
        status=body.status,
        tracking_number=body.tracking_number,
    )
    current_domain.process(command, asynchronous=False)
    order = current_domain.repository_for(Order).by_id(order_id)
    return ok(data=order_record(order), message="Order status updated successfully")


@order_router.put("/{order_id}/cancel")
async def cancel_order(order_id: str):
    current_domain.process(CancelOrder(order_id=order_id), asynchronous=False)
    order = current_domain.repository_for(Order).by_id(order_id)
    return ok(data=order_record(order), message="Order cancelled successfully")
