"""Storefront FastAPI application.

Initializes the domain, installs the production adapters for every
third-party service that has credentials configured (fakes stand in for the
rest), then builds the web app.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from storefront.config import Settings, configure
from storefront.domain import storefront
from storefront.media import set_image_host
from storefront.payments.gateway import fake_gateway_for, set_gateway
from storefront.shipping import set_carrier
from storefront.utils.logging import get_logger
from storefront.web import create_app

logger = get_logger(__name__)


def install_adapters(settings: Settings) -> None:
    """Swap in the real gateway, media host and carrier where credentials exist."""
    if settings.has_razorpay_credentials:
        from storefront.payments.gateway.razorpay_adapter import RazorpayGateway

        set_gateway(RazorpayGateway(settings.razorpay_key_id, settings.razorpay_key_secret))
    else:
        # Without a key id the gateway is fake, but signatures still use the configured secret.
        set_gateway(fake_gateway_for(settings))

    if settings.has_cloudinary_credentials:
        from storefront.media.cloudinary_adapter import CloudinaryImageHost

        set_image_host(
            CloudinaryImageHost(
                settings.cloudinary_cloud_name,
                settings.cloudinary_api_key,
                settings.cloudinary_api_secret,
            )
        )

    if settings.has_shiprocket_credentials:
        from storefront.shipping.shiprocket_adapter import ShiprocketRates

        set_carrier(ShiprocketRates(settings.shiprocket_email, settings.shiprocket_password))

    logger.info(
        "adapters_installed",
        payments="razorpay" if settings.has_razorpay_credentials else "fake",
        media="cloudinary" if settings.has_cloudinary_credentials else "fake",
        shipping="shiprocket" if settings.has_shiprocket_credentials else "fake",
    )


settings = Settings.from_env()
configure(settings)

storefront.init()
install_adapters(settings)

app = create_app(settings)
