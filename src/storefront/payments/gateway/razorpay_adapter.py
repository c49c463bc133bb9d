"""Razorpay payment gateway adapter.

Talks to the Razorpay Orders API over HTTPS with basic auth
(``key_id:key_secret``). Signature checks never leave the process: they use
the locally held key secret.
"""

import httpx

from storefront.payments.gateway.port import GatewayError, GatewayOrder, PaymentGateway
from storefront.payments.signature import PaymentVerifier
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

API_BASE = "https://api.razorpay.com/v1"


def _error_detail(response: httpx.Response) -> str:
    try:
        return response.json().get("error", {}).get("description") or response.text
    except ValueError:
        return response.text


class RazorpayGateway(PaymentGateway):
    def __init__(self, key_id: str, key_secret: str, client: httpx.Client | None = None) -> None:
        self.key_id = key_id
        self.auth = httpx.BasicAuth(key_id, key_secret)
        self.verifier = PaymentVerifier(key_secret)
        self.client = client or httpx.Client(timeout=10.0)

    def create_order(self, amount: int, currency: str, receipt: str, notes: dict[str, str]) -> GatewayOrder:
        payload = {"amount": amount, "currency": currency, "receipt": receipt, "notes": notes}
        try:
            response = self.client.post(f"{API_BASE}/orders", json=payload, auth=self.auth)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            detail = _error_detail(exc.response)
            logger.error("razorpay_order_rejected", status=exc.response.status_code, detail=detail)
            raise GatewayError(f"Razorpay rejected the order: {detail}") from exc
        except httpx.HTTPError as exc:
            logger.error("razorpay_unreachable", error=str(exc))
            raise GatewayError(f"Could not reach Razorpay: {exc}") from exc

        body = response.json()
        logger.info("razorpay_order_created", gateway_order_id=body["id"], amount=amount, receipt=receipt)
        return GatewayOrder(
            id=body["id"],
            amount=body["amount"],
            currency=body["currency"],
            receipt=body.get("receipt", receipt),
            status=body.get("status", "created"),
            notes=body.get("notes") or {},
        )

    def verify_payment_signature(self, gateway_order_id: str, gateway_payment_id: str, signature: str) -> bool:
        return self.verifier.verify(gateway_order_id, gateway_payment_id, signature)
