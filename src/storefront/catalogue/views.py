"""Read shapes for catalogue records."""


def _iso(moment):
    return moment.isoformat() if moment else None


def category_record(category) -> dict:
    return {
        "id": str(category.id),
        "name": category.name,
        "description": category.description,
        "is_active": category.is_active,
        "display_order": category.display_order,
        "products_count": category.products_count,
        "created_at": _iso(category.created_at),
        "updated_at": _iso(category.updated_at),
    }


def product_record(product, category=None) -> dict:
    """Product as JSON, with ``category`` expanded when the category is known.

    A dangling or empty ``category_id`` yields ``"category": null``.
    """
    specs = product.specs
    return {
        "id": str(product.id),
        "name": product.name,
        "slug": product.slug,
        "category": category_record(category) if category is not None else None,
        "category_id": str(product.category_id) if product.category_id else None,
        "price": product.price,
        "discount_price": product.discount_price,
        "images": [
            {"url": image.url, "storage_id": image.storage_id, "display_order": image.display_order}
            for image in product.ordered_images()
        ],
        "rating": product.rating,
        "review_count": product.review_count,
        "description": product.description,
        "short_description": product.short_description,
        "features": product.feature_list,
        "specs": {
            "warranty": specs.warranty if specs else "1 Year",
            "power": specs.power if specs else None,
            "compatibility": specs.compatibility if specs else None,
            "dimensions": specs.dimensions if specs else None,
            "weight": specs.weight if specs else None,
        },
        "stock": product.stock,
        "sku": product.sku,
        "is_active": product.is_active,
        "is_featured": product.is_featured,
        "tags": product.tag_list,
        "created_at": _iso(product.created_at),
        "updated_at": _iso(product.updated_at),
    }


def banner_record(banner) -> dict:
    return {
        "id": str(banner.id),
        "title": banner.title,
        "subtitle": banner.subtitle,
        "description": banner.description,
        "image": {"url": banner.image_url, "storage_id": banner.image_storage_id},
        "button_text": banner.button_text,
        "button_link": banner.button_link,
        "badge": banner.badge,
        "display_order": banner.display_order,
        "is_active": banner.is_active,
        "starts_at": _iso(banner.starts_at),
        "ends_at": _iso(banner.ends_at),
        "created_at": _iso(banner.created_at),
    }
