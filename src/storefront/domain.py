"""Storefront bounded context: catalogue, orders and payments.

A single domain owns both the catalogue (products, categories, banners) and
the order store, so an order and the stock decrement it causes are written
in the same unit of work.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
