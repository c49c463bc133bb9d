"""Business-rule failures raised by the storefront workflows.

All of them are Protean ``ValidationError`` subclasses carrying the usual
``{field: [message]}`` payload, so they surface as HTTP 400 like any other
validation failure while remaining distinguishable by type.
"""

from protean.exceptions import ValidationError


class InsufficientStock(ValidationError):
    """Requested quantity exceeds the product's current stock."""


class InvalidPayment(ValidationError):
    """The payment signature does not match the gateway order/payment ids."""


class InvalidTransition(ValidationError):
    """The order cannot move from its current status to the requested one."""
