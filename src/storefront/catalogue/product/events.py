"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductCreated:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    slug: String(required=True)
    category_id: Identifier()
    price: Float(required=True)
    stock: Integer(required=True)
    created_at: DateTime(required=True)


@storefront.event(part_of="Product")
class ProductDetailsUpdated:
    """An admin edited a product's descriptive or commercial details."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    slug: String(required=True)
    price: Float(required=True)
    updated_at: DateTime(required=True)


@storefront.event(part_of="Product")
class ProductImageReleased:
    """An image was detached from a product."""

    __version__ = 1

    product_id: Identifier(required=True)
    storage_id: String(required=True)


@storefront.event(part_of="Product")
class StockAdjusted:
    """Stock changed, either through an order or an admin edit."""

    __version__ = 1

    product_id: Identifier(required=True)
    previous_stock: Integer(required=True)
    new_stock: Integer(required=True)
    reason: String(required=True)
