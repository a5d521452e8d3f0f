"""
Catalog Service

Storefront product browsing: backend reads plus the in-memory refinement the
product listing applies (search, featured toggle, price range, sort).

Author: FastDeal
Date: 2026-10-19
"""
import logging
import re
from decimal import Decimal
from typing import List, Optional

from storefront.core.config import settings
from storefront.domain.exceptions import NotFoundError
from storefront.domain.product import Product, Category
from storefront.repositories.product_repository import ProductRepository
from storefront.repositories.category_repository import CategoryRepository

logger = logging.getLogger(__name__)

SORT_NEWEST = "newest"
SORT_PRICE_LOW = "price-low"
SORT_PRICE_HIGH = "price-high"
SORT_NAME = "name"

SORT_OPTIONS = [SORT_NEWEST, SORT_PRICE_LOW, SORT_PRICE_HIGH, SORT_NAME]


def slugify(name: str) -> str:
    """Lowercase, runs of non-alphanumerics become '-', no leading/trailing '-'"""
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


def format_price(amount) -> str:
    """Rs. 1,234.50"""
    return f"{settings.CURRENCY_LABEL} {Decimal(amount):,.2f}"


def _created_key(product: Product) -> float:
    return product.created_at.timestamp() if product.created_at else float("-inf")


def filter_products(
    products: List[Product],
    search: Optional[str] = None,
    featured_only: bool = False,
    min_price: Optional[Decimal] = None,
    max_price: Optional[Decimal] = None,
    sort_by: str = SORT_NEWEST,
) -> List[Product]:
    """
    Refine an already-fetched product list

    Args:
        products: Products as returned by the backend
        search: Case-insensitive substring of name or description
        featured_only: Keep only featured products
        min_price: Inclusive lower price bound
        max_price: Inclusive upper price bound
        sort_by: newest (default, also for unknown values), price-low, price-high, name

    Returns:
        New list; the input is not modified
    """
    filtered = list(products)

    if search:
        query = search.lower()
        filtered = [
            p for p in filtered
            if query in p.name.lower() or (p.description and query in p.description.lower())
        ]

    if featured_only:
        filtered = [p for p in filtered if p.featured]

    if min_price is not None:
        filtered = [p for p in filtered if p.price >= min_price]
    if max_price is not None:
        filtered = [p for p in filtered if p.price <= max_price]

    if sort_by == SORT_PRICE_LOW:
        filtered.sort(key=lambda p: p.price)
    elif sort_by == SORT_PRICE_HIGH:
        filtered.sort(key=lambda p: p.price, reverse=True)
    elif sort_by == SORT_NAME:
        filtered.sort(key=lambda p: p.name.casefold())
    else:
        filtered.sort(key=_created_key, reverse=True)

    return filtered


class CatalogService:
    """Read side of the storefront catalog"""

    def __init__(
        self,
        product_repo: Optional[ProductRepository] = None,
        category_repo: Optional[CategoryRepository] = None,
    ):
        self.product_repo = product_repo or ProductRepository()
        self.category_repo = category_repo or CategoryRepository()

    def list_products(self, category_slug: Optional[str] = None) -> List[Product]:
        """
        Active products, newest first

        An unknown category slug leaves the list unfiltered.
        """
        category_id = None
        if category_slug:
            category = self.category_repo.find_by_slug(category_slug)
            if category:
                category_id = category.id
            else:
                logger.info(f"Unknown category slug '{category_slug}', listing all products")

        return self.product_repo.find_active(category_id=category_id)

    def list_featured(self) -> List[Product]:
        return self.product_repo.find_featured(limit=settings.FEATURED_PRODUCTS_LIMIT)

    def get_product(self, slug: str) -> Product:
        product = self.product_repo.find_by_slug(slug)
        if not product:
            raise NotFoundError(f"Product {slug} not found")
        return product

    def get_product_by_id(self, product_id: str) -> Product:
        product = self.product_repo.find_by_id(product_id)
        if not product:
            raise NotFoundError(f"Product {product_id} not found")
        return product

    def list_categories(self) -> List[Category]:
        return self.category_repo.find_all()
