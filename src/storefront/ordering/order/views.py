"""Read shapes for orders: the admin record and the public tracking view."""


def _iso(moment):
    return moment.isoformat() if moment else None


def _snapshot(order) -> dict:
    product = order.product
    return {
        "product_id": str(product.product_id),
        "name": product.name,
        "price": product.price,
        "quantity": product.quantity,
        "image": product.image,
    }


def _address(order) -> dict:
    address = order.shipping_address
    return {
        "line1": address.line1,
        "line2": address.line2,
        "city": address.city,
        "state": address.state,
        "pincode": address.pincode,
        "country": address.country,
    }


def order_record(order) -> dict:
    """Everything an admin sees about an order, minus the raw payment signature."""
    return {
        "id": str(order.id),
        "order_code": order.order_code,
        "customer": {
            "name": order.customer.name,
            "email": order.customer.email,
            "phone": order.customer.phone,
        },
        "shipping_address": _address(order),
        "product": _snapshot(order),
        "payment": {
            "gateway_order_id": order.payment.gateway_order_id,
            "gateway_payment_id": order.payment.gateway_payment_id,
            "method": order.payment.method,
            "status": order.payment.status,
        },
        "subtotal": order.subtotal,
        "shipping_charge": order.shipping_charge,
        "tax": order.tax,
        "total_amount": order.total_amount,
        "status": order.status,
        "tracking_number": order.tracking_number,
        "delivered_at": _iso(order.delivered_at),
        "cancelled_at": _iso(order.cancelled_at),
        "created_at": _iso(order.created_at),
        "updated_at": _iso(order.updated_at),
    }


def tracking_view(order) -> dict:
    """What anyone holding the order code may see. No customer or payment data."""
    return {
        "order_code": order.order_code,
        "status": order.status,
        "product": _snapshot(order),
        "shipping_address": _address(order),
        "tracking_number": order.tracking_number,
        "created_at": _iso(order.created_at),
        "delivered_at": _iso(order.delivered_at),
    }
