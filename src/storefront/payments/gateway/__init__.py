"""Payment gateway registry.

``src/app.py`` installs ``RazorpayGateway`` when Razorpay credentials are
configured. Otherwise a ``FakeGateway`` stands in, keyed with the configured
secret. Outside development and test a secret is mandatory; in those two
environments a missing secret is replaced by a random per-process key.
"""

import secrets

from protean.exceptions import ConfigurationError

from storefront.config import Settings, get_settings
from storefront.payments.gateway.fake_adapter import FakeGateway
from storefront.payments.gateway.port import PaymentGateway

_SECRETLESS_ENVIRONMENTS = {"development", "test"}

_installed: PaymentGateway | None = None


def fake_gateway_for(settings: Settings) -> FakeGateway:
    if settings.razorpay_key_secret:
        return FakeGateway(key_secret=settings.razorpay_key_secret)
    if settings.environment not in _SECRETLESS_ENVIRONMENTS:
        raise ConfigurationError(f"RAZORPAY_KEY_SECRET must be set in the {settings.environment} environment")
    return FakeGateway(key_secret=secrets.token_hex(32))


def get_gateway() -> PaymentGateway:
    global _installed
    if _installed is None:
        _installed = fake_gateway_for(get_settings())
    return _installed


def set_gateway(gateway: PaymentGateway) -> None:
    global _installed
    _installed = gateway


def reset_gateway() -> None:
    """Drop the installed gateway; the next ``get_gateway()`` builds a fresh fake."""
    global _installed
    _installed = None
