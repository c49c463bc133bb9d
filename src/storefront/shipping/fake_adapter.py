"""Fake shipping-rate adapter: deterministic quotes for testing and development."""

from storefront.shipping.port import CarrierError, Parcel, ShippingRates


class FakeShippingRates(ShippingRates):
    """Quotes a flat rate per kg and can be told to fail."""

    def __init__(self, rate_per_kg: float = 50.0):
        self.rate_per_kg = rate_per_kg
        self.should_succeed = True
        self.failure_reason = "Carrier unavailable"
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool = True, failure_reason: str = "Carrier unavailable"):
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def quote(self, pickup_postcode: str, delivery_postcode: str, parcel: Parcel) -> dict:
        self.calls.append({"pickup_postcode": pickup_postcode, "delivery_postcode": delivery_postcode})
        if not self.should_succeed:
            raise CarrierError(self.failure_reason)

        return {
            "status": 200,
            "data": {
                "available_courier_companies": [
                    {
                        "courier_name": "Fake Express",
                        "rate": round(self.rate_per_kg * parcel.weight, 2),
                        "estimated_delivery_days": "3",
                        "pickup_postcode": pickup_postcode,
                        "delivery_postcode": delivery_postcode,
                    }
                ]
            },
        }
