"""Product deletion: command and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.media import get_image_host
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


@storefront.command_handler(part_of=Product)
class DeleteProductHandler:
    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.by_id(command.product_id)

        # Images go first; a media host failure aborts the delete.
        host = get_image_host()
        for storage_id in product.storage_ids():
            host.release(storage_id)

        repo._dao.delete(product)
        logger.info("product_deleted", product_id=str(product.id), images_released=len(product.storage_ids()))
