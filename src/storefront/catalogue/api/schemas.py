"""Pydantic request schemas for the catalogue API.

Admin clients post form-style payloads, so list fields accept either a JSON
array or a comma-separated string, and ``specs`` accepts a JSON string as
well as an object. The ``before`` validators normalise those shapes before
the usual type checks run.
"""

import json
from datetime import datetime
from typing import Annotated

from pydantic import AliasChoices, BaseModel, BeforeValidator, Field


def _split_list(value):
    if isinstance(value, str):
        text = value.strip()
        if text.startswith("["):
            return json.loads(text)
        return [part.strip() for part in text.split(",") if part.strip()]
    return value


def _parse_object(value):
    if isinstance(value, str):
        text = value.strip()
        return json.loads(text) if text else None
    return value


StringList = Annotated[list[str], BeforeValidator(_split_list)]


class ImageSchema(BaseModel):
    url: str = Field(max_length=500)
    storage_id: str | None = Field(default=None, max_length=255)


class ProductSpecsSchema(BaseModel):
    warranty: str | None = None
    power: str | None = None
    compatibility: str | None = None
    dimensions: str | None = None
    weight: str | None = None


SpecsField = Annotated[ProductSpecsSchema | None, BeforeValidator(_parse_object)]


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------
class CreateProductRequest(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    category_id: str | None = Field(default=None, validation_alias=AliasChoices("category_id", "category"))
    price: float = Field(ge=0)
    discount_price: float | None = Field(default=None, ge=0)
    description: str = Field(min_length=1, max_length=2000)
    short_description: str | None = Field(default=None, max_length=300)
    features: StringList = []
    tags: StringList = []
    specs: SpecsField = None
    images: list[ImageSchema] = []
    stock: int = Field(default=0, ge=0)
    sku: str | None = Field(default=None, max_length=50)
    is_active: bool = True
    is_featured: bool = False

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "USB-C Fast Charger 30W",
                    "category_id": "cat-001",
                    "price": 1499.0,
                    "discount_price": 1199.0,
                    "description": "Compact 30W charger with PD support.",
                    "features": "PD 3.0, Foldable pins",
                    "specs": '{"warranty": "1 Year", "power": "30W"}',
                    "images": [{"url": "https://img.example/charger.jpg", "storage_id": "charger_1"}],
                    "stock": 25,
                    "sku": "CHG-30W",
                }
            ]
        }
    }


class UpdateProductRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    category_id: str | None = Field(default=None, validation_alias=AliasChoices("category_id", "category"))
    price: float | None = Field(default=None, ge=0)
    discount_price: float | None = Field(default=None, ge=0)
    clear_discount: bool = False
    description: str | None = Field(default=None, max_length=2000)
    short_description: str | None = Field(default=None, max_length=300)
    features: StringList | None = None
    tags: StringList | None = None
    specs: SpecsField = None
    stock: int | None = Field(default=None, ge=0)
    sku: str | None = Field(default=None, max_length=50)
    is_active: bool | None = None
    is_featured: bool | None = None
    add_images: list[ImageSchema] = []
    remove_images: StringList = []


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------
class CreateCategoryRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    is_active: bool = True
    display_order: int = Field(default=0, validation_alias=AliasChoices("display_order", "order"))


class UpdateCategoryRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    is_active: bool | None = None


class CategoryPosition(BaseModel):
    id: str
    display_order: int = Field(validation_alias=AliasChoices("display_order", "order"))


class ReorderCategoriesRequest(BaseModel):
    categories: list[CategoryPosition]


# ---------------------------------------------------------------------------
# Banners
# ---------------------------------------------------------------------------
class CreateBannerRequest(BaseModel):
    title: str = Field(min_length=1, max_length=100)
    subtitle: str | None = Field(default=None, max_length=150)
    description: str | None = Field(default=None, max_length=300)
    image: ImageSchema
    button_text: str | None = Field(default=None, max_length=30)
    button_link: str | None = Field(default=None, max_length=255)
    badge: str | None = Field(default=None, max_length=30)
    display_order: int = Field(default=0, validation_alias=AliasChoices("display_order", "order"))
    is_active: bool = True
    starts_at: datetime | None = Field(default=None, validation_alias=AliasChoices("starts_at", "start_date"))
    ends_at: datetime | None = Field(default=None, validation_alias=AliasChoices("ends_at", "end_date"))
