"""Product creation: command and handler."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product, ProductSpecs
from storefront.domain import storefront


@storefront.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=200)
    category_id: Identifier()
    price: Float(required=True, min_value=0.0)
    discount_price: Float(min_value=0.0)
    description: String(required=True, max_length=2000)
    short_description: String(max_length=300)
    features: Text()
    tags: Text()
    specs: Text()
    images: Text()
    stock: Integer(min_value=0, default=0)
    sku: String(max_length=50)
    is_active: Boolean(default=True)
    is_featured: Boolean(default=False)


def specs_from_json(raw):
    """Build ``ProductSpecs`` from a JSON object, ignoring keys it does not know."""
    if not raw:
        return None
    data = json.loads(raw)
    known = {key: data[key] for key in ("warranty", "power", "compatibility", "dimensions", "weight") if key in data}
    return ProductSpecs(**known)


def ensure_unique_sku(repo, sku, product_id=None):
    if not sku:
        return
    existing = repo.find_by_sku(sku)
    if existing is not None and existing.id != product_id:
        raise ValidationError({"sku": ["A product with this SKU already exists"]})


@storefront.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        repo = current_domain.repository_for(Product)
        ensure_unique_sku(repo, command.sku)

        product = Product.create(
            name=command.name,
            price=command.price,
            description=command.description,
            category_id=command.category_id,
            discount_price=command.discount_price,
            short_description=command.short_description,
            features=json.loads(command.features) if command.features else None,
            tags=json.loads(command.tags) if command.tags else None,
            specs=specs_from_json(command.specs),
            images=json.loads(command.images) if command.images else None,
            stock=command.stock,
            sku=command.sku,
            is_active=command.is_active,
            is_featured=command.is_featured,
        )
        repo.add(product)
        return str(product.id)
