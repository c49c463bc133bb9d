"""Tests for the shared page window helpers."""

import pytest
from protean.exceptions import ValidationError
from storefront.shared.pagination import MAX_PAGE_SIZE, Page, page_count, skip_for, validate_page_window


class TestPageWindow:
    def test_first_page_skips_nothing(self):
        assert skip_for(1, 10) == 0

    def test_skip(self):
        assert skip_for(4, 25) == 75

    @pytest.mark.parametrize("total, limit, pages", [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (95, 20, 5)])
    def test_page_count(self, total, limit, pages):
        assert page_count(total, limit) == pages

    def test_accepts_max_page_size(self):
        validate_page_window(1, MAX_PAGE_SIZE)

    def test_rejects_zero_page(self):
        with pytest.raises(ValidationError) as exc:
            validate_page_window(0, 10)
        assert "Page must be 1 or greater" in str(exc.value)

    def test_rejects_oversized_limit(self):
        with pytest.raises(ValidationError) as exc:
            validate_page_window(1, MAX_PAGE_SIZE + 1)
        assert f"Limit cannot exceed {MAX_PAGE_SIZE}" in str(exc.value)


class TestPage:
    def test_pagination_block(self):
        page = Page(items=["a", "b"], page=2, limit=2, total=5)
        assert page.pages == 3
        assert page.pagination() == {"page": 2, "limit": 2, "total": 5, "pages": 3}
