"""Payment signature verification.

After checkout the gateway hands the client three values: its order id, the
payment id and a signature. The signature is the hex HMAC-SHA256 of
``"{order_id}|{payment_id}"`` keyed by the merchant's key secret, so only
someone holding the secret can produce it.
"""

import hashlib
import hmac


class PaymentVerifier:
    def __init__(self, key_secret: str) -> None:
        self._key = key_secret.encode()

    def expected_signature(self, gateway_order_id: str, gateway_payment_id: str) -> str:
        message = f"{gateway_order_id}|{gateway_payment_id}".encode()
        return hmac.new(self._key, message, hashlib.sha256).hexdigest()

    def verify(self, gateway_order_id: str, gateway_payment_id: str, signature: str) -> bool:
        expected = self.expected_signature(gateway_order_id, gateway_payment_id)
        return hmac.compare_digest(expected.encode(), (signature or "").encode())
