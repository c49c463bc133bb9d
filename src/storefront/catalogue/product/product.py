"""Product aggregate root with its Image entity and Specs value object."""

import json
from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import (
    Boolean,
    DateTime,
    Float,
    HasMany,
    Identifier,
    Integer,
    String,
    Text,
    ValueObject,
)

from storefront.catalogue.shared.slug import slugify
from storefront.domain import storefront
from storefront.exceptions import InsufficientStock


def _encode_list(values) -> str | None:
    if values is None:
        return None
    if isinstance(values, str):
        return values
    return json.dumps([str(v) for v in values])


def _decode_list(raw: str | None) -> list[str]:
    if not raw:
        return []
    return json.loads(raw)


@storefront.value_object(part_of="Product")
class ProductSpecs:
    """Technical specification sheet shown on the product page."""

    warranty: String(max_length=100, default="1 Year")
    power: String(max_length=100)
    compatibility: String(max_length=255)
    dimensions: String(max_length=100)
    weight: String(max_length=50)


@storefront.entity(part_of="Product")
class ProductImage:
    """An image already hosted on the media host.

    ``storage_id`` is the host's identifier, used to release the asset when
    the image is removed or the product is deleted.
    """

    url: String(required=True, max_length=500)
    storage_id: String(max_length=255)
    display_order: Integer(default=0)


@storefront.aggregate
class Product:
    """Product aggregate root."""

    name: String(required=True, max_length=200)
    slug: String(max_length=220)
    category_id: Identifier()
    price: Float(required=True, min_value=0.0)
    discount_price: Float(min_value=0.0)
    images: HasMany(ProductImage)
    rating: Float(min_value=0.0, max_value=5.0, default=0.0)
    review_count: Integer(min_value=0, default=0)
    description: String(required=True, max_length=2000)
    short_description: String(max_length=300)
    features: Text()
    specs: ValueObject(ProductSpecs)
    stock: Integer(min_value=0, default=0)
    sku: String(max_length=50)
    is_active: Boolean(default=True)
    is_featured: Boolean(default=False)
    tags: Text()
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def slug_must_follow_name(self):
        if self.name and self.slug != slugify(self.name):
            raise ValidationError({"slug": ["Slug must be derived from the product name"]})

    @invariant.post
    def discount_cannot_exceed_price(self):
        if self.discount_price is not None and self.price is not None and self.discount_price > self.price:
            raise ValidationError({"discount_price": ["Discount price cannot exceed the price"]})

    @property
    def feature_list(self) -> list[str]:
        return _decode_list(self.features)

    @property
    def tag_list(self) -> list[str]:
        return _decode_list(self.tags)

    @property
    def primary_image_url(self) -> str | None:
        ordered = self.ordered_images()
        return ordered[0].url if ordered else None

    def ordered_images(self) -> list[ProductImage]:
        return sorted(self.images, key=lambda image: image.display_order)

    @classmethod
    def create(
        cls,
        name,
        price,
        description,
        category_id=None,
        discount_price=None,
        short_description=None,
        features=None,
        tags=None,
        specs=None,
        images=None,
        stock=0,
        sku=None,
        is_active=True,
        is_featured=False,
    ):
        from storefront.catalogue.product.events import ProductCreated

        now = datetime.now(UTC)
        product = cls(
            name=name,
            slug=slugify(name),
            category_id=category_id,
            price=price,
            discount_price=discount_price,
            description=description,
            short_description=short_description,
            features=_encode_list(features),
            tags=_encode_list(tags),
            specs=specs or ProductSpecs(),
            stock=stock,
            sku=sku or None,
            is_active=is_active,
            is_featured=is_featured,
            created_at=now,
            updated_at=now,
        )
        for position, image in enumerate(images or []):
            product.add_images(
                ProductImage(
                    url=image["url"],
                    storage_id=image.get("storage_id"),
                    display_order=position,
                )
            )

        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=product.name,
                slug=product.slug,
                category_id=category_id,
                price=price,
                stock=product.stock,
                created_at=now,
            )
        )
        return product

    def update_details(self, **changes):
        """Apply a partial edit. Keys whose value is ``None`` are left untouched.

        Renaming the product recomputes its slug; a changed ``stock`` goes
        through the same audit event as order-driven stock movements.
        """
        from storefront.catalogue.product.events import ProductDetailsUpdated

        new_stock = changes.pop("stock", None)
        for list_field in ("features", "tags"):
            if changes.get(list_field) is not None:
                changes[list_field] = _encode_list(changes[list_field])

        with atomic_change(self):
            for field_name, value in changes.items():
                if value is not None:
                    setattr(self, field_name, value)
            self.slug = slugify(self.name)

        if new_stock is not None and new_stock != self.stock:
            self._adjust_stock(new_stock, reason="admin_edit")

        now = datetime.now(UTC)
        self.updated_at = now
        self.raise_(
            ProductDetailsUpdated(
                product_id=self.id,
                name=self.name,
                slug=self.slug,
                price=self.price,
                updated_at=now,
            )
        )

    def add_image(self, url, storage_id=None):
        image = ProductImage(
            url=url,
            storage_id=storage_id,
            display_order=len(self.images),
        )
        self.add_images(image)
        self.updated_at = datetime.now(UTC)
        return image

    def remove_images_by_storage_id(self, storage_ids) -> list[str]:
        """Detach the images whose ``storage_id`` is listed; return the ids released."""
        from storefront.catalogue.product.events import ProductImageReleased

        wanted = set(storage_ids)
        doomed = [image for image in self.images if image.storage_id in wanted]
        for image in doomed:
            self.remove_images(image)
            self.raise_(ProductImageReleased(product_id=self.id, storage_id=image.storage_id))

        for position, image in enumerate(self.ordered_images()):
            image.display_order = position

        if doomed:
            self.updated_at = datetime.now(UTC)
        return [image.storage_id for image in doomed]

    def storage_ids(self) -> list[str]:
        return [image.storage_id for image in self.images if image.storage_id]

    def reserve_stock(self, quantity: int) -> None:
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        if quantity > self.stock:
            raise InsufficientStock({"stock": [f"Insufficient stock. Only {self.stock} items available"]})
        self._adjust_stock(self.stock - quantity, reason="order_placed")

    def release_stock(self, quantity: int) -> None:
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        self._adjust_stock(self.stock + quantity, reason="order_cancelled")

    def _adjust_stock(self, new_stock: int, reason: str) -> None:
        from storefront.catalogue.product.events import StockAdjusted

        previous = self.stock
        self.stock = new_stock
        self.updated_at = datetime.now(UTC)
        self.raise_(
            StockAdjusted(
                product_id=self.id,
                previous_stock=previous,
                new_stock=new_stock,
                reason=reason,
            )
        )
