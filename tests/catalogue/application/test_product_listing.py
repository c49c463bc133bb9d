"""Application tests for catalogue searches against the repository."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError
from storefront.catalogue.product.listing import ProductQuery, ProductSort
from storefront.catalogue.product.product import Product


@pytest.fixture()
def repo():
    return current_domain.repository_for(Product)


@pytest.fixture()
def catalogue(make_product):
    """Five products across two categories; one inactive, one featured."""
    return {
        "cable": make_product(name="USB Cable", price=100.0, category_id="cat-acc"),
        "charger": make_product(name="Wall Charger", price=900.0, category_id="cat-acc", is_featured=True),
        "earbuds": make_product(name="Wireless Earbuds", price=2500.0, category_id="cat-audio"),
        "speaker": make_product(name="Mini Speaker", price=1500.0, category_id="cat-audio"),
        "retired": make_product(name="Old Cable", price=50.0, category_id="cat-acc", is_active=False),
    }


def _names(page):
    return [p.name for p in page.items]


class TestProductSearch:
    def test_active_only_by_default(self, repo, catalogue):
        page = repo.search(ProductQuery(limit=100))
        assert page.total == 4
        assert "Old Cable" not in _names(page)

    def test_price_low_to_high(self, repo, catalogue):
        page = repo.search(ProductQuery(sort=ProductSort.PRICE_LOW))
        assert _names(page) == ["USB Cable", "Wall Charger", "Mini Speaker", "Wireless Earbuds"]

    def test_price_high_to_low(self, repo, catalogue):
        page = repo.search(ProductQuery(sort=ProductSort.PRICE_HIGH))
        assert _names(page)[0] == "Wireless Earbuds"

    def test_category_filter(self, repo, catalogue):
        page = repo.search(ProductQuery(category="cat-audio", sort=ProductSort.PRICE_LOW))
        assert _names(page) == ["Mini Speaker", "Wireless Earbuds"]

    def test_price_bounds_are_inclusive(self, repo, catalogue):
        page = repo.search(ProductQuery(min_price=900.0, max_price=1500.0, sort=ProductSort.PRICE_LOW))
        assert _names(page) == ["Wall Charger", "Mini Speaker"]

    def test_search_is_case_insensitive(self, repo, catalogue):
        page = repo.search(ProductQuery(search="cable"))
        assert _names(page) == ["USB Cable"]

    def test_featured_only(self, repo, catalogue):
        page = repo.search(ProductQuery(featured=True))
        assert _names(page) == ["Wall Charger"]

    def test_pagination_reports_total_before_paging(self, repo, catalogue):
        page = repo.search(ProductQuery(page=2, limit=3, sort=ProductSort.PRICE_LOW))
        assert _names(page) == ["Wireless Earbuds"]
        assert page.pagination() == {"page": 2, "limit": 3, "total": 4, "pages": 2}

    def test_page_past_the_end_is_empty(self, repo, catalogue):
        page = repo.search(ProductQuery(page=5, limit=10))
        assert page.items == []
        assert page.total == 4


class TestProductLookups:
    def test_by_slug(self, repo, catalogue):
        assert repo.by_slug("wall-charger").id == catalogue["charger"].id

    def test_by_slug_missing(self, repo):
        with pytest.raises(ObjectNotFoundError):
            repo.by_slug("nothing-here")

    def test_count_in_category_ignores_inactive(self, repo, catalogue):
        assert repo.count_in_category("cat-acc") == 2

    def test_category_ids_in_use(self, repo, catalogue):
        assert repo.category_ids_in_use() == ["cat-acc", "cat-audio"]
