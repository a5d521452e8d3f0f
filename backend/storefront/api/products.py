"""
Products API Endpoints
Storefront catalog: product listing with filters, featured products,
product detail and categories

Author: FastDeal
Date: 2026-10-19
"""
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query

from storefront.api.deps import get_catalog_service, raise_http_error
from storefront.services.catalog_service import CatalogService, SORT_NEWEST, filter_products
from storefront.services.share_service import share_links

router = APIRouter()
categories_router = APIRouter()


@router.get("/")
async def get_products(
    category: Optional[str] = Query(None, description="Category slug"),
    search: Optional[str] = Query(None, description="Search by name or description"),
    featured: bool = Query(False, description="Only featured products"),
    min_price: Optional[Decimal] = Query(None, ge=0, description="Minimum price (inclusive)"),
    max_price: Optional[Decimal] = Query(None, ge=0, description="Maximum price (inclusive)"),
    sort: str = Query(SORT_NEWEST, description="newest, price-low, price-high or name"),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """
    Active products, refined by search, featured flag, price range and sort
    """
    try:
        products = catalog.list_products(category_slug=category)
        products = filter_products(
            products,
            search=search,
            featured_only=featured,
            min_price=min_price,
            max_price=max_price,
            sort_by=sort,
        )

        return {
            "status": "success",
            "count": len(products),
            "data": [product.to_dict() for product in products]
        }

    except Exception as e:
        raise_http_error(e, "fetching products")


@router.get("/featured")
async def get_featured_products(catalog: CatalogService = Depends(get_catalog_service)):
    """Featured products for the home page"""
    try:
        products = catalog.list_featured()
        return {
            "status": "success",
            "count": len(products),
            "data": [product.to_dict() for product in products]
        }

    except Exception as e:
        raise_http_error(e, "fetching featured products")


@router.get("/{slug}")
async def get_product(slug: str, catalog: CatalogService = Depends(get_catalog_service)):
    """
    Product detail by slug

    Includes share links for the product page
    """
    try:
        product = catalog.get_product(slug)
        data = product.to_dict()
        data["share"] = share_links(product)

        return {
            "status": "success",
            "data": data
        }

    except Exception as e:
        raise_http_error(e, "fetching product")


@categories_router.get("/")
async def get_categories(catalog: CatalogService = Depends(get_catalog_service)):
    """All categories ordered by name"""
    try:
        categories = catalog.list_categories()
        return {
            "status": "success",
            "count": len(categories),
            "data": [category.to_dict() for category in categories]
        }

    except Exception as e:
        raise_http_error(e, "fetching categories")
