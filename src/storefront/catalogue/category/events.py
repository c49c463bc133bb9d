"""Domain events for the Category aggregate."""

from protean.fields import Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Category")
class CategoryCreated:
    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)


@storefront.event(part_of="Category")
class CategoryReordered:
    __version__ = 1

    category_id: Identifier(required=True)
    previous_order: Integer(required=True)
    new_order: Integer(required=True)


@storefront.event(part_of="Category")
class CategoryProductsCounted:
    __version__ = 1

    category_id: Identifier(required=True)
    products_count: Integer(required=True)
