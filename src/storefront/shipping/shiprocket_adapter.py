"""Shiprocket shipping-rate adapter.

Each quote logs in with the account's email and password to obtain a
bearer token, then queries courier serviceability for the parcel.
"""

import httpx

from storefront.shipping.port import CarrierError, Parcel, ShippingRates
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

API_BASE = "https://apiv2.shiprocket.in/v1/external"


class ShiprocketRates(ShippingRates):
    def __init__(self, email: str, password: str, client: httpx.Client | None = None):
        self.email = email
        self.password = password
        self.client = client or httpx.Client(timeout=10.0)

    def _token(self) -> str:
        try:
            response = self.client.post(
                f"{API_BASE}/auth/login",
                json={"email": self.email, "password": self.password},
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("shiprocket_login_failed", error=str(exc))
            raise CarrierError("Failed to authenticate with Shiprocket") from exc

        token = response.json().get("token")
        if not token:
            raise CarrierError("Failed to authenticate with Shiprocket")
        return token

    def quote(self, pickup_postcode: str, delivery_postcode: str, parcel: Parcel) -> dict:
        params = {
            "pickup_postcode": pickup_postcode,
            "delivery_postcode": delivery_postcode,
            "weight": f"{parcel.weight:g}",
            "length": f"{parcel.length:g}",
            "breadth": f"{parcel.breadth:g}",
            "height": f"{parcel.height:g}",
            "declared_value": f"{parcel.declared_value:g}",
        }
        headers = {"Authorization": f"Bearer {self._token()}"}

        try:
            response = self.client.get(f"{API_BASE}/courier/serviceability", params=params, headers=headers)
        except httpx.HTTPError as exc:
            logger.error("shiprocket_unreachable", error=str(exc))
            raise CarrierError(f"Error calculating shipping: {exc}") from exc

        try:
            body = response.json()
        except ValueError:
            body = {}
        if response.is_error:
            message = body.get("message") or "Failed to calculate shipping"
            logger.error("shiprocket_quote_failed", status=response.status_code, detail=message)
            raise CarrierError(message)

        logger.info("shiprocket_quote", delivery_postcode=delivery_postcode)
        return body
