"""Catalogue API package."""

from storefront.catalogue.api.routes import banner_router, category_router, product_router

__all__ = ["product_router", "category_router", "banner_router"]
