"""Catalogue listing: the filter, sort and page window for product queries.

``ProductQuery`` is a plain description of what the caller asked for. The
``ProductRepository`` turns it into a Protean queryset; the API turns the
resulting ``Page`` into JSON with each product's category expanded.
"""

from dataclasses import dataclass
from enum import Enum

from protean.exceptions import ValidationError

from storefront.shared.pagination import skip_for, validate_page_window


class ProductSort(Enum):
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    RATING = "rating"
    REVIEWS = "reviews"
    NEWEST = "newest"

    @classmethod
    def parse(cls, value: str | None) -> "ProductSort":
        """Unknown or missing sort keys fall back to newest first."""
        try:
            return cls(value)
        except ValueError:
            return cls.NEWEST


# Secondary key keeps pages stable when the primary key ties.
_ORDERING = {
    ProductSort.PRICE_LOW: ["price", "-created_at"],
    ProductSort.PRICE_HIGH: ["-price", "-created_at"],
    ProductSort.RATING: ["-rating", "-created_at"],
    ProductSort.REVIEWS: ["-review_count", "-created_at"],
    ProductSort.NEWEST: ["-created_at"],
}


@dataclass(frozen=True)
class ProductQuery:
    page: int = 1
    limit: int = 10
    category: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    search: str | None = None
    featured: bool = False
    active_only: bool = True
    sort: ProductSort = ProductSort.NEWEST

    def __post_init__(self):
        validate_page_window(self.page, self.limit)
        if self.min_price is not None and self.max_price is not None and self.min_price > self.max_price:
            raise ValidationError({"min_price": ["Minimum price cannot exceed maximum price"]})

    @property
    def skip(self) -> int:
        return skip_for(self.page, self.limit)

    @property
    def ordering(self) -> list[str]:
        return _ORDERING[self.sort]

    def filters(self) -> dict:
        """Protean lookup keywords for the active filters."""
        criteria = {}
        if self.category:
            criteria["category_id"] = self.category
        if self.min_price is not None:
            criteria["price__gte"] = self.min_price
        if self.max_price is not None:
            criteria["price__lte"] = self.max_price
        if self.search:
            criteria["name__icontains"] = self.search.strip()
        if self.featured:
            criteria["is_featured"] = True
        if self.active_only:
            criteria["is_active"] = True
        return criteria
