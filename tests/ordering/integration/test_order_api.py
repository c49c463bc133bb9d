"""Integration tests for the checkout and order endpoints via TestClient."""

import pytest
from fastapi.testclient import TestClient
from protean.exceptions import ExpectedVersionError
from storefront.catalogue.product.product import Product
from storefront.web import create_app

CUSTOMER = {"name": "Asha Rao", "email": "asha@example.com", "phone": "9876543210"}
ADDRESS = {"address": "12 MG Road", "city": "Bengaluru", "state": "Karnataka", "pincode": "560001"}


@pytest.fixture()
def client():
    return TestClient(create_app())


def _create_product(client, price=100.0, stock=5):
    response = client.post(
        "/products",
        json={"name": "USB Cable", "price": price, "description": "Braided cable", "stock": stock},
    )
    assert response.status_code == 201
    return response.json()["data"]


def _checkout(client, gateway, product_id, quantity=1):
    """Open a gateway order, sign the payment like the gateway would and verify it."""
    opened = client.post("/orders/create-razorpay-order", json={"product_id": product_id, "quantity": quantity})
    assert opened.status_code == 200
    gateway_order_id = opened.json()["data"]["order_id"]
    payment_id = "pay_TEST123"

    return client.post(
        "/orders/verify-payment",
        json={
            "razorpay_order_id": gateway_order_id,
            "razorpay_payment_id": payment_id,
            "razorpay_signature": gateway.sign(gateway_order_id, payment_id),
            "product_id": product_id,
            "quantity": quantity,
            "customer": CUSTOMER,
            "shipping_address": ADDRESS,
        },
    )


class TestCheckout:
    def test_create_gateway_order(self, client):
        product = _create_product(client, price=250.0)
        response = client.post("/orders/create-razorpay-order", json={"product_id": product["id"], "quantity": 2})
        body = response.json()

        assert body["success"] is True
        assert body["data"]["amount"] == 50000
        assert body["data"]["currency"] == "INR"
        assert body["data"]["product"]["name"] == "USB Cable"

    def test_full_flow(self, client, gateway):
        product = _create_product(client)
        response = _checkout(client, gateway, product["id"], quantity=2)
        body = response.json()

        assert response.status_code == 201
        assert body["message"] == "Payment verified and order created"
        assert body["data"]["status"] == "confirmed"
        assert body["data"]["total_amount"] == 200.0
        assert body["data"]["shipping_address"]["line1"] == "12 MG Road"
        assert "signature" not in body["data"]["payment"]
        assert client.get(f"/products/{product['id']}").json()["data"]["stock"] == 3

    def test_bad_signature(self, client):
        product = _create_product(client)
        response = client.post(
            "/orders/verify-payment",
            json={
                "gateway_order_id": "order_x",
                "gateway_payment_id": "pay_x",
                "signature": "deadbeef",
                "product_id": product["id"],
                "customer": CUSTOMER,
                "shipping_address": ADDRESS,
            },
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid payment signature"
        assert client.get("/orders").json()["pagination"]["total"] == 0

    def test_insufficient_stock(self, client):
        product = _create_product(client, stock=1)
        response = client.post("/orders/create-razorpay-order", json={"product_id": product["id"], "quantity": 3})
        assert response.status_code == 400
        assert response.json()["message"] == "Insufficient stock. Only 1 items available"

    def test_invalid_email(self, client):
        product = _create_product(client)
        response = client.post(
            "/orders/verify-payment",
            json={
                "gateway_order_id": "order_x",
                "gateway_payment_id": "pay_x",
                "signature": "sig",
                "product_id": product["id"],
                "customer": {**CUSTOMER, "email": "not-an-email"},
                "shipping_address": ADDRESS,
            },
        )
        assert response.status_code == 400
        assert "customer.email" in response.json()["errors"]

    def test_gateway_outage_is_a_server_error(self, gateway):
        client = TestClient(create_app(), raise_server_exceptions=False)
        product = _create_product(client)
        gateway.configure(should_succeed=False)

        response = client.post("/orders/create-razorpay-order", json={"product_id": product["id"]})
        body = response.json()
        assert response.status_code == 500
        assert body["success"] is False
        assert body["message"] == "Something went wrong"
        assert body["error"] == "Gateway unavailable"

    def test_stale_stock_write_is_a_conflict(self, client, gateway, monkeypatch):
        product = _create_product(client, stock=5)

        def reserve_on_stale_copy(self, quantity):
            raise ExpectedVersionError(f"Wrong expected version for Product {self.id}")

        monkeypatch.setattr(Product, "reserve_stock", reserve_on_stale_copy)
        response = _checkout(client, gateway, product["id"], quantity=2)
        body = response.json()

        assert response.status_code == 409
        assert body["success"] is False
        assert body["message"] == "The record was changed by another request; retry"
        assert "Wrong expected version" in body["error"]

        assert client.get(f"/products/{product['id']}").json()["data"]["stock"] == 5
        assert client.get("/orders").json()["pagination"]["total"] == 0


class TestOrderManagement:
    def test_get_order_includes_current_product(self, client, gateway):
        product = _create_product(client)
        order = _checkout(client, gateway, product["id"]).json()["data"]

        body = client.get(f"/orders/{order['id']}").json()
        assert body["data"]["order_code"] == order["order_code"]
        assert body["data"]["product_detail"]["id"] == product["id"]

    def test_track_by_code(self, client, gateway):
        product = _create_product(client)
        order = _checkout(client, gateway, product["id"]).json()["data"]

        body = client.get(f"/orders/track/{order['order_code']}").json()
        assert body["data"]["status"] == "confirmed"
        assert "customer" not in body["data"]
        assert "payment" not in body["data"]

    def test_track_unknown_code(self, client):
        response = client.get("/orders/track/ORD-000000-NOPE00")
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Order not found"}

    def test_status_update_and_cancel_rules(self, client, gateway):
        product = _create_product(client)
        order = _checkout(client, gateway, product["id"], quantity=2).json()["data"]

        shipped = client.put(f"/orders/{order['id']}/status", json={"status": "shipped", "tracking_number": "TRK-9"})
        assert shipped.status_code == 200
        assert shipped.json()["data"]["tracking_number"] == "TRK-9"

        refused = client.put(f"/orders/{order['id']}/cancel")
        assert refused.status_code == 400
        assert refused.json()["message"] == "Cannot cancel order with status shipped"

    def test_cancel_restores_stock(self, client, gateway):
        product = _create_product(client)
        order = _checkout(client, gateway, product["id"], quantity=2).json()["data"]

        response = client.put(f"/orders/{order['id']}/cancel")
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "cancelled"
        assert client.get(f"/products/{product['id']}").json()["data"]["stock"] == 5

    def test_list_filters_and_stats(self, client, gateway):
        product = _create_product(client, stock=10)
        first = _checkout(client, gateway, product["id"]).json()["data"]
        _checkout(client, gateway, product["id"], quantity=3)
        client.put(f"/orders/{first['id']}/cancel")

        listed = client.get("/orders", params={"status": "confirmed"}).json()
        assert listed["pagination"]["total"] == 1
        assert listed["data"][0]["product"]["quantity"] == 3

        stats = client.get("/orders/stats").json()["data"]
        assert stats["total_orders"] == 2
        assert stats["cancelled_orders"] == 1
        assert stats["total_revenue"] == 400.0

    def test_list_rejects_unknown_status(self, client):
        response = client.get("/orders", params={"status": "lost"})
        assert response.status_code == 400
