"""Category management: commands and handler."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.category.category import Category
from storefront.domain import storefront
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    description: String(max_length=500)
    is_active: Boolean(default=True)
    display_order: Integer(default=0)


@storefront.command(part_of="Category")
class UpdateCategory:
    category_id: Identifier(required=True)
    name: String(max_length=100)
    description: String(max_length=500)
    is_active: Boolean()


@storefront.command(part_of="Category")
class DeleteCategory:
    category_id: Identifier(required=True)


@storefront.command(part_of="Category")
class ReorderCategories:
    """``orders`` is a JSON array of ``{"id": ..., "display_order": ...}`` objects."""

    orders: Text(required=True)


@storefront.command(part_of="Category")
class RecountCategoryProducts:
    pass


def _parse_orders(raw):
    try:
        orders = json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        raise ValidationError({"categories": ["Categories must be an array"]}) from None

    if not isinstance(orders, list):
        raise ValidationError({"categories": ["Categories must be an array"]})

    parsed = []
    for entry in orders:
        if not isinstance(entry, dict) or "id" not in entry or not isinstance(entry.get("display_order"), int):
            raise ValidationError({"categories": ["Each entry needs an id and an integer display_order"]})
        parsed.append((str(entry["id"]), entry["display_order"]))
    return parsed


@storefront.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)
        if repo.find_by_name(command.name) is not None:
            raise ValidationError({"name": ["Category already exists"]})

        category = Category.create(
            name=command.name,
            description=command.description,
            is_active=command.is_active,
            display_order=command.display_order,
        )
        repo.add(category)
        return str(category.id)

    @handle(UpdateCategory)
    def update_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.by_id(command.category_id)

        if command.name is not None:
            clash = repo.find_by_name(command.name)
            if clash is not None and clash.id != category.id:
                raise ValidationError({"name": ["Category already exists"]})

        category.update_details(
            name=command.name,
            description=command.description,
            is_active=command.is_active,
        )
        repo.add(category)

    @handle(DeleteCategory)
    def delete_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.by_id(command.category_id)
        repo._dao.delete(category)
        logger.info("category_deleted", category_id=str(category.id), name=category.name)

    @handle(ReorderCategories)
    def reorder_categories(self, command):
        repo = current_domain.repository_for(Category)
        for category_id, display_order in _parse_orders(command.orders):
            category = repo.by_id(category_id)
            if category.display_order != display_order:
                category.reorder(display_order)
                repo.add(category)

    @handle(RecountCategoryProducts)
    def recount_products(self, command):
        from storefront.catalogue.product.product import Product

        repo = current_domain.repository_for(Category)
        product_repo = current_domain.repository_for(Product)

        counts = {}
        for category in repo.in_display_order():
            count = product_repo.count_in_category(str(category.id))
            counts[str(category.id)] = count
            if category.products_count != count:
                category.record_products_count(count)
                repo.add(category)

        logger.info("category_counts_refreshed", categories=len(counts))
        return counts
