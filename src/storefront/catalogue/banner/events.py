"""Domain events for the Banner aggregate."""

from protean.fields import Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Banner")
class BannerCreated:
    """A promotional banner was added to the home page rotation."""

    __version__ = 1

    banner_id: Identifier(required=True)
    title: String(required=True)
