"""Repository for the Order aggregate."""

from protean.exceptions import ObjectNotFoundError

from storefront.domain import storefront
from storefront.ordering.order.listing import OrderFilter
from storefront.ordering.order.order import Order, OrderStatus, PaymentStatus
from storefront.shared.pagination import Page, collect_all


@storefront.repository(part_of=Order)
class OrderRepository:
    """Order lookups, the admin listing and the dashboard figures."""

    def by_id(self, order_id: str) -> Order:
        try:
            return self.get(order_id)
        except ObjectNotFoundError:
            raise ObjectNotFoundError({"order_id": ["Order not found"]}) from None

    def by_code(self, order_code: str) -> Order:
        order = self._dao.query.filter(order_code=order_code).all().first
        if order is None:
            raise ObjectNotFoundError({"order_code": ["Order not found"]})
        return order

    def search(self, order_filter: OrderFilter) -> Page:
        query = self._dao.query
        clause = order_filter.search_clause()
        if clause is not None:
            query = query.filter(clause)

        results = (
            query.filter(**order_filter.filters())
            .order_by("-created_at")
            .offset(order_filter.skip)
            .limit(order_filter.limit)
            .all()
        )
        return Page(items=results.items, page=order_filter.page, limit=order_filter.limit, total=results.total)

    def statistics(self) -> dict:
        counts = {
            f"{status.value}_orders": self._dao.query.filter(status=status.value).all().total
            for status in OrderStatus
        }
        paid = collect_all(
            self._dao.query.filter(payment_status=PaymentStatus.COMPLETED.value).order_by("created_at")
        )

        return {
            "total_orders": self._dao.query.all().total,
            **counts,
            "total_revenue": round(sum(order.total_amount for order in paid), 2),
        }
