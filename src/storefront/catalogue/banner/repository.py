"""Repository for the Banner aggregate."""

from datetime import datetime

from protean.exceptions import ObjectNotFoundError

from storefront.catalogue.banner.banner import Banner
from storefront.domain import storefront
from storefront.shared.pagination import collect_all


@storefront.repository(part_of=Banner)
class BannerRepository:
    def by_id(self, banner_id: str) -> Banner:
        try:
            return self.get(banner_id)
        except ObjectNotFoundError:
            raise ObjectNotFoundError({"banner_id": ["Banner not found"]}) from None

    def in_display_order(self) -> list[Banner]:
        return collect_all(self._dao.query.order_by("display_order"))

    def live(self, at: datetime | None = None) -> list[Banner]:
        """Active banners whose schedule window covers ``at`` (default: now)."""
        candidates = collect_all(self._dao.query.filter(is_active=True).order_by("display_order"))
        return [banner for banner in candidates if banner.is_live(at)]
