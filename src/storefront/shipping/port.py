"""Shipping-rate port: abstract interface for courier serviceability lookups.

Adapters return the provider's payload as-is; the storefront passes it
through to the client without interpreting courier options.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class CarrierError(Exception):
    """The shipping provider could not authenticate or answer."""


@dataclass(frozen=True)
class Parcel:
    """Weight in kg, dimensions in cm."""

    weight: float = 1.0
    length: float = 15.0
    breadth: float = 10.0
    height: float = 10.0
    declared_value: float = 0.0


class ShippingRates(ABC):
    """Abstract interface for shipping-rate adapters."""

    @abstractmethod
    def quote(self, pickup_postcode: str, delivery_postcode: str, parcel: Parcel) -> dict:
        """Return the provider's courier options for sending ``parcel``."""
        ...
