"""FastAPI endpoints for the catalogue: products, categories and banners."""

import json

from fastapi import APIRouter
from protean.utils.globals import current_domain

from storefront.catalogue.api.schemas import (
    CreateBannerRequest,
    CreateCategoryRequest,
    CreateProductRequest,
    ReorderCategoriesRequest,
    UpdateCategoryRequest,
    UpdateProductRequest,
)
from storefront.catalogue.banner.banner import Banner
from storefront.catalogue.banner.management import CreateBanner, DeleteBanner
from storefront.catalogue.category.category import Category
from storefront.catalogue.category.management import (
    CreateCategory,
    DeleteCategory,
    RecountCategoryProducts,
    ReorderCategories,
    UpdateCategory,
)
from storefront.catalogue.product.creation import CreateProduct
from storefront.catalogue.product.details import UpdateProduct
from storefront.catalogue.product.listing import ProductQuery, ProductSort
from storefront.catalogue.product.product import Product
from storefront.catalogue.product.removal import DeleteProduct
from storefront.catalogue.views import banner_record, category_record, product_record
from storefront.shared.envelope import ok, paged

product_router = APIRouter(prefix="/products", tags=["products"])
category_router = APIRouter(prefix="/categories", tags=["categories"])
banner_router = APIRouter(prefix="/banners", tags=["banners"])


def _expanded(products) -> list[dict]:
    """Product records with their category resolved, one lookup per distinct category."""
    category_repo = current_domain.repository_for(Category)
    categories = {}
    for category_id in {str(p.category_id) for p in products if p.category_id}:
        found = category_repo.find_by_id(category_id)
        if found is not None:
            categories[category_id] = found
    return [product_record(p, categories.get(str(p.category_id))) for p in products]


def _dump_json(value):
    return json.dumps(value) if value else None


# --- Product endpoints ---


@product_router.get("")
async def list_products(
    page: int = 1,
    limit: int = 10,
    category: str | None = None,
    min_price: float | None = None,
    max_price: float | None = None,
    search: str | None = None,
    featured: bool = False,
    active: bool = True,
    sort: str | None = None,
):
    query = ProductQuery(
        page=page,
        limit=limit,
        category=category,
        min_price=min_price,
        max_price=max_price,
        search=search,
        featured=featured,
        active_only=active,
        sort=ProductSort.parse(sort),
    )
    result = current_domain.repository_for(Product).search(query)
    return paged(result, _expanded(result.items))


@product_router.get("/categories")
async def list_product_categories():
    """Categories that at least one active product is filed under."""
    category_repo = current_domain.repository_for(Category)
    records = []
    for category_id in current_domain.repository_for(Product).category_ids_in_use():
        category = category_repo.find_by_id(category_id)
        if category is not None:
            records.append(category_record(category))
    return ok(data=records)


@product_router.get("/slug/{slug}")
async def get_product_by_slug(slug: str):
    product = current_domain.repository_for(Product).by_slug(slug)
    return ok(data=_expanded([product])[0])


@product_router.get("/{product_id}")
async def get_product(product_id: str):
    product = current_domain.repository_for(Product).by_id(product_id)
    return ok(data=_expanded([product])[0])


@product_router.post("", status_code=201)
async def create_product(body: CreateProductRequest):
    command = CreateProduct(
        name=body.name,
        category_id=body.category_id,
        price=body.price,
        discount_price=body.discount_price,
        description=body.description,
        short_description=body.short_description,
        features=_dump_json(body.features),
        tags=_dump_json(body.tags),
        specs=body.specs.model_dump_json(exclude_none=True) if body.specs else None,
        images=_dump_json([image.model_dump() for image in body.images]),
        stock=body.stock,
        sku=body.sku,
        is_active=body.is_active,
        is_featured=body.is_featured,
    )
    product_id = current_domain.process(command, asynchronous=False)
    product = current_domain.repository_for(Product).by_id(product_id)
    return ok(data=_expanded([product])[0], message="Product created successfully", status_code=201)


@product_router.put("/{product_id}")
async def update_product(product_id: str, body: UpdateProductRequest):
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        category_id=body.category_id,
        price=body.price,
        discount_price=body.discount_price,
        clear_discount=body.clear_discount,
        description=body.description,
        short_description=body.short_description,
        features=_dump_json(body.features),
        tags=_dump_json(body.tags),
        specs=body.specs.model_dump_json(exclude_none=True) if body.specs else None,
        stock=body.stock,
        sku=body.sku,
        is_active=body.is_active,
        is_featured=body.is_featured,
        add_images=_dump_json([image.model_dump() for image in body.add_images]),
        remove_images=_dump_json(body.remove_images),
    )
    current_domain.process(command, asynchronous=False)
    product = current_domain.repository_for(Product).by_id(product_id)
    return ok(data=_expanded([product])[0], message="Product updated successfully")


@product_router.delete("/{product_id}")
async def delete_product(product_id: str):
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return ok(message="Product deleted successfully")


# --- Category endpoints ---


@category_router.get("")
async def list_categories(active_only: bool = False):
    categories = current_domain.repository_for(Category).in_display_order(active_only=active_only)
    return ok(data=[category_record(c) for c in categories])


@category_router.post("", status_code=201)
async def create_category(body: CreateCategoryRequest):
    command = CreateCategory(
        name=body.name,
        description=body.description,
        is_active=body.is_active,
        display_order=body.display_order,
    )
    category_id = current_domain.process(command, asynchronous=False)
    category = current_domain.repository_for(Category).by_id(category_id)
    return ok(data=category_record(category), message="Category created successfully", status_code=201)


@category_router.put("/reorder")
async def reorder_categories(body: ReorderCategoriesRequest):
    orders = [{"id": c.id, "display_order": c.display_order} for c in body.categories]
    current_domain.process(ReorderCategories(orders=json.dumps(orders)), asynchronous=False)
    categories = current_domain.repository_for(Category).in_display_order()
    return ok(data=[category_record(c) for c in categories], message="Categories reordered successfully")


@category_router.put("/update-counts")
async def update_category_counts():
    counts = current_domain.process(RecountCategoryProducts(), asynchronous=False)
    return ok(data=counts, message="Product counts updated successfully")


@category_router.get("/{category_id}")
async def get_category(category_id: str):
    category = current_domain.repository_for(Category).by_id(category_id)
    return ok(data=category_record(category))


@category_router.put("/{category_id}")
async def update_category(category_id: str, body: UpdateCategoryRequest):
    command = UpdateCategory(
        category_id=category_id,
        name=body.name,
        description=body.description,
        is_active=body.is_active,
    )
    current_domain.process(command, asynchronous=False)
    category = current_domain.repository_for(Category).by_id(category_id)
    return ok(data=category_record(category), message="Category updated successfully")


@category_router.delete("/{category_id}")
async def delete_category(category_id: str):
    current_domain.process(DeleteCategory(category_id=category_id), asynchronous=False)
    return ok(message="Category deleted successfully")


# --- Banner endpoints ---


@banner_router.get("")
async def list_banners(active: bool = True):
    repo = current_domain.repository_for(Banner)
    banners = repo.live() if active else repo.in_display_order()
    return ok(data=[banner_record(b) for b in banners])


@banner_router.get("/admin/all")
async def list_all_banners():
    banners = current_domain.repository_for(Banner).in_display_order()
    return ok(data=[banner_record(b) for b in banners])


@banner_router.post("", status_code=201)
async def create_banner(body: CreateBannerRequest):
    command = CreateBanner(
        title=body.title,
        subtitle=body.subtitle,
        description=body.description,
        image_url=body.image.url,
        image_storage_id=body.image.storage_id,
        button_text=body.button_text,
        button_link=body.button_link,
        badge=body.badge,
        display_order=body.display_order,
        is_active=body.is_active,
        starts_at=body.starts_at,
        ends_at=body.ends_at,
    )
    banner_id = current_domain.process(command, asynchronous=False)
    banner = current_domain.repository_for(Banner).by_id(banner_id)
    return ok(data=banner_record(banner), message="Banner created successfully", status_code=201)


@banner_router.delete("/{banner_id}")
async def delete_banner(banner_id: str):
    current_domain.process(DeleteBanner(banner_id=banner_id), asynchronous=False)
    return ok(message="Banner deleted successfully")
