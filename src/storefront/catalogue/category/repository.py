"""Repository for the Category aggregate."""

from protean.exceptions import ObjectNotFoundError

from storefront.catalogue.category.category import Category
from storefront.domain import storefront
from storefront.shared.pagination import collect_all


@storefront.repository(part_of=Category)
class CategoryRepository:
    def by_id(self, category_id: str) -> Category:
        try:
            return self.get(category_id)
        except ObjectNotFoundError:
            raise ObjectNotFoundError({"category_id": ["Category not found"]}) from None

    def find_by_id(self, category_id: str) -> Category | None:
        return self._dao.query.filter(id=category_id).all().first

    def find_by_name(self, name: str) -> Category | None:
        """Case-insensitive lookup, used to keep names unique."""
        return self._dao.query.filter(name__iexact=name.strip()).all().first

    def in_display_order(self, active_only: bool = False) -> list[Category]:
        query = self._dao.query
        if active_only:
            query = query.filter(is_active=True)
        return collect_all(query.order_by(["display_order", "name"]))
