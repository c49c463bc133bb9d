"""Offset pagination shared by the catalogue and order listings."""

import math
from dataclasses import dataclass
from typing import Any

from protean.exceptions import ValidationError

MAX_PAGE_SIZE = 100


def validate_page_window(page: int, limit: int) -> None:
    errors = {}
    if page < 1:
        errors["page"] = ["Page must be 1 or greater"]
    if limit < 1:
        errors["limit"] = ["Limit must be 1 or greater"]
    elif limit > MAX_PAGE_SIZE:
        errors["limit"] = [f"Limit cannot exceed {MAX_PAGE_SIZE}"]
    if errors:
        raise ValidationError(errors)


def skip_for(page: int, limit: int) -> int:
    return (page - 1) * limit


def page_count(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit > 0 else 0


@dataclass(frozen=True)
class Page:
    """One page of results plus the numbers a client needs to page further."""

    items: list[Any]
    page: int
    limit: int
    total: int

    @property
    def pages(self) -> int:
        return page_count(self.total, self.limit)

    def pagination(self) -> dict[str, int]:
        return {"page": self.page, "limit": self.limit, "total": self.total, "pages": self.pages}


def collect_all(queryset, batch_size: int = MAX_PAGE_SIZE) -> list[Any]:
    """Exhaust a Protean queryset in fixed-size batches.

    Querysets carry a default limit, so reading "everything" means walking
    the offsets until a short batch comes back.
    """
    collected: list[Any] = []
    offset = 0
    while True:
        batch = queryset.offset(offset).limit(batch_size).all().items
        collected.extend(batch)
        if len(batch) < batch_size:
            return collected
        offset += batch_size
