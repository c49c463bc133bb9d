import os
from pathlib import Path

import pytest
from protean.integrations.pytest import DomainFixture

TEST_KEY_SECRET = "test-key-secret"


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the Protean config overlay before the domain module is imported."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def _adapters():
    """Fresh fake adapters and settings for every test."""
    from storefront.config import Settings, configure, reset_settings
    from storefront.media import reset_image_host, set_image_host
    from storefront.media.fake_adapter import FakeImageHost
    from storefront.payments.gateway import reset_gateway, set_gateway
    from storefront.payments.gateway.fake_adapter import FakeGateway
    from storefront.shipping import reset_carrier, set_carrier
    from storefront.shipping.fake_adapter import FakeShippingRates

    configure(Settings(environment="test", razorpay_key_secret=TEST_KEY_SECRET))
    set_gateway(FakeGateway(key_secret=TEST_KEY_SECRET))
    set_image_host(FakeImageHost())
    set_carrier(FakeShippingRates())

    yield

    reset_gateway()
    reset_image_host()
    reset_carrier()
    reset_settings()


@pytest.fixture()
def gateway():
    from storefront.payments.gateway import get_gateway

    return get_gateway()


@pytest.fixture()
def image_host():
    from storefront.media import get_image_host

    return get_image_host()


@pytest.fixture()
def carrier():
    from storefront.shipping import get_carrier

    return get_carrier()


@pytest.fixture()
def make_product():
    """Create a product through its command and return the stored aggregate."""
    from protean.utils.globals import current_domain

    from storefront.catalogue.product.creation import CreateProduct
    from storefront.catalogue.product.product import Product

    def _make(**overrides):
        defaults = {
            "name": "USB  Cable!!",
            "price": 100.0,
            "description": "Braided USB-C to USB-C cable",
            "stock": 5,
        }
        defaults.update(overrides)
        product_id = current_domain.process(CreateProduct(**defaults), asynchronous=False)
        return current_domain.repository_for(Product).get(product_id)

    return _make


@pytest.fixture()
def place_order(gateway):
    """Place a signed order for ``product`` and return the stored Order."""
    import json
    from uuid import uuid4

    from protean.utils.globals import current_domain

    from storefront.ordering.order.order import Order
    from storefront.ordering.order.placement import PlaceOrder

    def _place(product, quantity=1, **overrides):
        gateway_order_id = f"order_{uuid4().hex[:14]}"
        gateway_payment_id = f"pay_{uuid4().hex[:14]}"
        fields = {
            "product_id": str(product.id),
            "quantity": quantity,
            "customer": json.dumps({"name": "Asha Rao", "email": "asha@example.com", "phone": "9876543210"}),
            "shipping_address": json.dumps(
                {"line1": "12 MG Road", "city": "Bengaluru", "state": "Karnataka", "pincode": "560001"}
            ),
            "gateway_order_id": gateway_order_id,
            "gateway_payment_id": gateway_payment_id,
            "signature": gateway.sign(gateway_order_id, gateway_payment_id),
        }
        fields.update(overrides)
        order_id = current_domain.process(PlaceOrder(**fields), asynchronous=False)
        return current_domain.repository_for(Order).get(order_id)

    return _place
