"""Pydantic request schemas for the ordering API.

These are the external contracts; they are translated into Protean commands
by the routes. Gateway fields also accept the ``razorpay_*`` names the
checkout widget produces.
"""

from pydantic import AliasChoices, BaseModel, EmailStr, Field


class CustomerSchema(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    phone: str = Field(min_length=5, max_length=20)


class AddressSchema(BaseModel):
    line1: str = Field(min_length=1, max_length=255, validation_alias=AliasChoices("line1", "address"))
    line2: str | None = Field(default=None, max_length=255)
    city: str = Field(min_length=1, max_length=100)
    state: str = Field(min_length=1, max_length=100)
    pincode: str = Field(min_length=3, max_length=10)
    country: str = "India"


class CreateGatewayOrderRequest(BaseModel):
    product_id: str
    quantity: int = Field(default=1, ge=1)


class VerifyPaymentRequest(BaseModel):
    gateway_order_id: str = Field(validation_alias=AliasChoices("gateway_order_id", "razorpay_order_id"))
    gateway_payment_id: str = Field(validation_alias=AliasChoices("gateway_payment_id", "razorpay_payment_id"))
    signature: str = Field(validation_alias=AliasChoices("signature", "razorpay_signature"))
    product_id: str
    quantity: int = Field(default=1, ge=1)
    customer: CustomerSchema
    shipping_address: AddressSchema

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "razorpay_order_id": "order_N5c8k2x1",
                    "razorpay_payment_id": "pay_N5c9aa7Q",
                    "razorpay_signature": "9f2c...",
                    "product_id": "prod-001",
                    "quantity": 2,
                    "customer": {"name": "Asha Rao", "email": "asha@example.com", "phone": "9876543210"},
                    "shipping_address": {
                        "line1": "12 MG Road",
                        "city": "Bengaluru",
                        "state": "Karnataka",
                        "pincode": "560001",
                    },
                }
            ]
        }
    }


class UpdateOrderStatusRequest(BaseModel):
    status: str
    tracking_number: str | None = Field(default=None, max_length=100)
