"""FastAPI route for shipping quotes."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from storefront.config import get_settings
from storefront.shared.envelope import ok
from storefront.shipping import get_carrier
from storefront.shipping.port import Parcel

shipping_router = APIRouter(prefix="/shipping", tags=["shipping"])


class DeliveryChargesRequest(BaseModel):
    pincode: str = Field(min_length=3, max_length=10)


@shipping_router.post("/delivery-charges")
async def delivery_charges(body: DeliveryChargesRequest):
    quote = get_carrier().quote(
        pickup_postcode=get_settings().shiprocket_pickup_postcode,
        delivery_postcode=body.pincode,
        parcel=Parcel(),
    )
    return ok(data=quote)
