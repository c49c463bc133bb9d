"""Banner aggregate: promotional slides on the storefront home page."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Integer, String

from storefront.domain import storefront


def _as_utc(moment: datetime) -> datetime:
    # Some providers hand datetimes back without tzinfo; they were stored as UTC.
    return moment if moment.tzinfo else moment.replace(tzinfo=UTC)


@storefront.aggregate
class Banner:
    title: String(required=True, max_length=100)
    subtitle: String(max_length=150)
    description: String(max_length=300)
    image_url: String(required=True, max_length=500)
    image_storage_id: String(max_length=255)
    button_text: String(max_length=30, default="Shop Now")
    button_link: String(max_length=255, default="/products")
    badge: String(max_length=30)
    display_order: Integer(default=0)
    is_active: Boolean(default=True)
    starts_at: DateTime()
    ends_at: DateTime()
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def window_must_not_be_inverted(self):
        if self.starts_at and self.ends_at and _as_utc(self.starts_at) > _as_utc(self.ends_at):
            raise ValidationError({"ends_at": ["Banner cannot end before it starts"]})

    @classmethod
    def create(cls, title, image_url, **details):
        from storefront.catalogue.banner.events import BannerCreated

        now = datetime.now(UTC)
        supplied = {key: value for key, value in details.items() if value is not None}
        banner = cls(title=title, image_url=image_url, created_at=now, updated_at=now, **supplied)
        banner.raise_(BannerCreated(banner_id=banner.id, title=title))
        return banner

    def is_live(self, at: datetime | None = None) -> bool:
        """Active, and ``at`` falls inside whichever window bounds are set."""
        if not self.is_active:
            return False
        at = at or datetime.now(UTC)
        if self.starts_at and _as_utc(self.starts_at) > at:
            return False
        if self.ends_at and _as_utc(self.ends_at) < at:
            return False
        return True

