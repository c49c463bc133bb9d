"""Product editing: command and handler.

Every field is optional; only the ones supplied change. Images listed in
``remove_images`` (by storage id) are detached first and released on the
media host only after the edited product is saved. New ``add_images``
entries are appended after the existing ones.
"""

import json

from protean import handle
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.creation import ensure_unique_sku, specs_from_json
from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.media import get_image_host
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(max_length=200)
    category_id: Identifier()
    price: Float(min_value=0.0)
    discount_price: Float(min_value=0.0)
    clear_discount: Boolean(default=False)
    description: String(max_length=2000)
    short_description: String(max_length=300)
    features: Text()
    tags: Text()
    specs: Text()
    stock: Integer(min_value=0)
    sku: String(max_length=50)
    is_active: Boolean()
    is_featured: Boolean()
    add_images: Text()
    remove_images: Text()


@storefront.command_handler(part_of=Product)
class UpdateProductHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.by_id(command.product_id)
        ensure_unique_sku(repo, command.sku, product_id=product.id)

        detached = []
        if command.remove_images:
            detached = product.remove_images_by_storage_id(json.loads(command.remove_images))

        for image in json.loads(command.add_images) if command.add_images else []:
            product.add_image(url=image["url"], storage_id=image.get("storage_id"))

        if command.clear_discount:
            product.discount_price = None

        product.update_details(
            name=command.name,
            category_id=command.category_id,
            price=command.price,
            discount_price=command.discount_price,
            description=command.description,
            short_description=command.short_description,
            features=json.loads(command.features) if command.features else None,
            tags=json.loads(command.tags) if command.tags else None,
            specs=specs_from_json(command.specs),
            stock=command.stock,
            sku=command.sku,
            is_active=command.is_active,
            is_featured=command.is_featured,
        )
        repo.add(product)

        # Assets are released only once the edit has validated and been saved.
        host = get_image_host()
        for storage_id in detached:
            host.release(storage_id)

        logger.info(
            "product_updated",
            product_id=str(product.id),
            slug=product.slug,
            images_released=len(detached),
        )
