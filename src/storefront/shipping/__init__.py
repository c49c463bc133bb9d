"""Shipping-rate adapter abstraction: pluggable courier serviceability lookups."""

from storefront.shipping.fake_adapter import FakeShippingRates
from storefront.shipping.port import ShippingRates

_carrier_instance: ShippingRates | None = None


def get_carrier() -> ShippingRates:
    """Return the configured shipping-rate adapter. Defaults to FakeShippingRates."""
    global _carrier_instance
    if _carrier_instance is None:
        _carrier_instance = FakeShippingRates()
    return _carrier_instance


def set_carrier(carrier: ShippingRates) -> None:
    global _carrier_instance
    _carrier_instance = carrier


def reset_carrier():
    """Reset the carrier singleton (useful for testing)."""
    global _carrier_instance
    _carrier_instance = None
