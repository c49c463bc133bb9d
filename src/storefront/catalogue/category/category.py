"""Category aggregate root for grouping products on the storefront."""

from datetime import UTC, datetime

from protean.fields import Boolean, DateTime, Integer, String

from storefront.domain import storefront


@storefront.aggregate
class Category:
    """A flat product grouping shown in the storefront navigation.

    ``products_count`` is a cached figure. It only changes when
    ``RecountCategoryProducts`` runs, so it may lag behind catalogue edits.
    """

    name: String(required=True, max_length=100, unique=True)
    description: String(max_length=500)
    is_active: Boolean(default=True)
    display_order: Integer(default=0)
    products_count: Integer(default=0, min_value=0)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def create(cls, name, description=None, is_active=True, display_order=0):
        from storefront.catalogue.category.events import CategoryCreated

        now = datetime.now(UTC)
        category = cls(
            name=name.strip(),
            description=description,
            is_active=is_active,
            display_order=display_order,
            created_at=now,
            updated_at=now,
        )
        category.raise_(CategoryCreated(category_id=category.id, name=category.name))
        return category

    def update_details(self, name=None, description=None, is_active=None):
        if name is not None:
            self.name = name.strip()
        if description is not None:
            self.description = description
        if is_active is not None:
            self.is_active = is_active
        self.updated_at = datetime.now(UTC)

    def reorder(self, new_display_order):
        from storefront.catalogue.category.events import CategoryReordered

        previous_order = self.display_order
        self.display_order = new_display_order
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CategoryReordered(
                category_id=self.id,
                previous_order=previous_order,
                new_order=new_display_order,
            )
        )

    def record_products_count(self, count):
        from storefront.catalogue.category.events import CategoryProductsCounted

        self.products_count = count
        self.updated_at = datetime.now(UTC)
        self.raise_(CategoryProductsCounted(category_id=self.id, products_count=count))
