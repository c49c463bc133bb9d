"""Admin order listing: filters and page window."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, time

from protean.exceptions import ValidationError
from protean.utils.query import Q

from storefront.ordering.order.order import OrderStatus, PaymentStatus
from storefront.shared.pagination import skip_for, validate_page_window


def _start_of(bound: date | datetime) -> datetime:
    if isinstance(bound, datetime):
        return bound if bound.tzinfo else bound.replace(tzinfo=UTC)
    return datetime.combine(bound, time.min, tzinfo=UTC)


def _end_of(bound: date | datetime) -> datetime:
    # A bare date covers the whole day.
    if isinstance(bound, datetime):
        return bound if bound.tzinfo else bound.replace(tzinfo=UTC)
    return datetime.combine(bound, time.max, tzinfo=UTC)


@dataclass(frozen=True)
class OrderFilter:
    page: int = 1
    limit: int = 10
    status: str | None = None
    payment_status: str | None = None
    search: str | None = None
    start_date: date | datetime | None = None
    end_date: date | datetime | None = None

    def __post_init__(self):
        validate_page_window(self.page, self.limit)
        if self.status and self.status not in {s.value for s in OrderStatus}:
            raise ValidationError({"status": [f"Unknown order status '{self.status}'"]})
        if self.payment_status and self.payment_status not in {s.value for s in PaymentStatus}:
            raise ValidationError({"payment_status": [f"Unknown payment status '{self.payment_status}'"]})

    @property
    def skip(self) -> int:
        return skip_for(self.page, self.limit)

    def search_clause(self) -> Q | None:
        """Case-insensitive match on the order code, customer contact or payment id."""
        if not self.search:
            return None
        term = self.search.strip()
        return (
            Q(order_code__icontains=term)
            | Q(customer_name__icontains=term)
            | Q(customer_email__icontains=term)
            | Q(customer_phone__icontains=term)
            | Q(payment_gateway_payment_id__icontains=term)
        )

    def filters(self) -> dict:
        criteria = {}
        if self.status:
            criteria["status"] = self.status
        if self.payment_status:
            criteria["payment_status"] = self.payment_status
        if self.start_date:
            criteria["created_at__gte"] = _start_of(self.start_date)
        if self.end_date:
            criteria["created_at__lte"] = _end_of(self.end_date)
        return criteria
