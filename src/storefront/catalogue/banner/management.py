"""Banner management: commands and handler."""

from protean import handle
from protean.fields import Boolean, DateTime, Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.catalogue.banner.banner import Banner
from storefront.domain import storefront
from storefront.media import get_image_host
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Banner")
class CreateBanner:
    title: String(required=True, max_length=100)
    subtitle: String(max_length=150)
    description: String(max_length=300)
    image_url: String(required=True, max_length=500)
    image_storage_id: String(max_length=255)
    button_text: String(max_length=30)
    button_link: String(max_length=255)
    badge: String(max_length=30)
    display_order: Integer(default=0)
    is_active: Boolean(default=True)
    starts_at: DateTime()
    ends_at: DateTime()


@storefront.command(part_of="Banner")
class DeleteBanner:
    banner_id: Identifier(required=True)


@storefront.command_handler(part_of=Banner)
class ManageBannerHandler:
    @handle(CreateBanner)
    def create_banner(self, command):
        banner = Banner.create(
            title=command.title,
            image_url=command.image_url,
            subtitle=command.subtitle,
            description=command.description,
            image_storage_id=command.image_storage_id,
            button_text=command.button_text,
            button_link=command.button_link,
            badge=command.badge,
            display_order=command.display_order,
            is_active=command.is_active,
            starts_at=command.starts_at,
            ends_at=command.ends_at,
        )
        current_domain.repository_for(Banner).add(banner)
        return str(banner.id)

    @handle(DeleteBanner)
    def delete_banner(self, command):
        repo = current_domain.repository_for(Banner)
        banner = repo.by_id(command.banner_id)
        if banner.image_storage_id:
            get_image_host().release(banner.image_storage_id)
        repo._dao.delete(banner)
        logger.info("banner_deleted", banner_id=str(banner.id))
