"""Fake payment gateway for development and testing.

Issues gateway order ids locally and verifies signatures with the same HMAC
scheme as the real gateway, so a test can sign a payment with
``verifier.expected_signature(...)`` and walk the whole checkout flow.
"""

from secrets import token_hex
from uuid import uuid4

from storefront.payments.gateway.port import GatewayError, GatewayOrder, PaymentGateway
from storefront.payments.signature import PaymentVerifier


class FakeGateway(PaymentGateway):
    def __init__(self, key_secret: str | None = None) -> None:
        self.verifier = PaymentVerifier(key_secret or token_hex(32))
        self.should_succeed: bool = True
        self.failure_reason: str = "Gateway unavailable"
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Gateway unavailable") -> None:
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def create_order(self, amount: int, currency: str, receipt: str, notes: dict[str, str]) -> GatewayOrder:
        self.calls.append(
            {
                "method": "create_order",
                "amount": amount,
                "currency": currency,
                "receipt": receipt,
                "notes": notes,
            }
        )
        if not self.should_succeed:
            raise GatewayError(self.failure_reason)

        return GatewayOrder(
            id=f"order_fake{uuid4().hex[:14]}",
            amount=amount,
            currency=currency,
            receipt=receipt,
            notes=dict(notes),
        )

    def sign(self, gateway_order_id: str, gateway_payment_id: str) -> str:
        """The signature the real gateway would hand the client."""
        return self.verifier.expected_signature(gateway_order_id, gateway_payment_id)

    def verify_payment_signature(self, gateway_order_id: str, gateway_payment_id: str, signature: str) -> bool:
        return self.verifier.verify(gateway_order_id, gateway_payment_id, signature)
