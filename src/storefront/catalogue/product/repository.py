"""Repository for the Product aggregate."""

from protean.exceptions import ObjectNotFoundError

from storefront.catalogue.product.listing import ProductQuery
from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.shared.pagination import Page, collect_all


@storefront.repository(part_of=Product)
class ProductRepository:
    """Lookups and listings over the product catalogue."""

    def by_id(self, product_id: str) -> Product:
        """Load a product or raise ``ObjectNotFoundError`` keyed on ``product_id``."""
        try:
            return self.get(product_id)
        except ObjectNotFoundError:
            raise ObjectNotFoundError({"product_id": ["Product not found"]}) from None

    def find_by_id(self, product_id: str) -> Product | None:
        if not product_id:
            return None
        return self._dao.query.filter(id=product_id).all().first

    def by_slug(self, slug: str) -> Product:
        product = self._dao.query.filter(slug=slug).all().first
        if product is None:
            raise ObjectNotFoundError({"slug": ["Product not found"]})
        return product

    def find_by_sku(self, sku: str) -> Product | None:
        return self._dao.query.filter(sku=sku).all().first

    def search(self, query: ProductQuery) -> Page:
        results = (
            self._dao.query.filter(**query.filters())
            .order_by(query.ordering)
            .offset(query.skip)
            .limit(query.limit)
            .all()
        )
        return Page(items=results.items, page=query.page, limit=query.limit, total=results.total)

    def count_in_category(self, category_id: str) -> int:
        """Active products filed under ``category_id``."""
        return self._dao.query.filter(category_id=category_id, is_active=True).all().total

    def category_ids_in_use(self) -> list[str]:
        """Distinct categories that at least one active product belongs to."""
        products = collect_all(self._dao.query.filter(is_active=True).order_by("created_at"))
        return sorted({str(p.category_id) for p in products if p.category_id})
