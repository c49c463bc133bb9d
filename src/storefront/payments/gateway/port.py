"""Payment gateway port (abstract interface).

Defines the contract that all payment gateway adapters must implement,
so the order workflow runs unchanged against FakeGateway (dev/test) and
RazorpayGateway (production).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class GatewayError(Exception):
    """The gateway could not be reached or refused the request."""


@dataclass(frozen=True)
class GatewayOrder:
    """An order registered with the gateway, ready for client-side checkout."""

    id: str
    amount: int
    currency: str
    receipt: str
    status: str = "created"
    notes: dict[str, str] = field(default_factory=dict)


class PaymentGateway(ABC):
    """Abstract payment gateway interface."""

    @abstractmethod
    def create_order(
        self,
        amount: int,
        currency: str,
        receipt: str,
        notes: dict[str, str],
    ) -> GatewayOrder:
        """Register an order for ``amount`` minor currency units."""
        ...

    @abstractmethod
    def verify_payment_signature(
        self,
        gateway_order_id: str,
        gateway_payment_id: str,
        signature: str,
    ) -> bool:
        """Check the signature the gateway issued for a completed payment."""
        ...
