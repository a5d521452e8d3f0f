"""
Catalog Admin Service

Back-office product and category management. The add-product form is
validated here; everything else is a pass-through to the repositories.

Author: FastDeal
Date: 2026-10-19
"""
import logging
from typing import List, Optional

from storefront.domain.exceptions import NotFoundError, ProductFormError
from storefront.domain.product import Category, CategoryInput, Product, ProductCreate, ProductUpdate
from storefront.repositories.category_repository import CategoryRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.services.catalog_service import slugify

logger = logging.getLogger(__name__)


class CatalogAdminService:

    def __init__(
        self,
        product_repo: Optional[ProductRepository] = None,
        category_repo: Optional[CategoryRepository] = None,
    ):
        self.product_repo = product_repo or ProductRepository()
        self.category_repo = category_repo or CategoryRepository()

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    def list_products(self, search: Optional[str] = None) -> List[Product]:
        return self.product_repo.find_all(search=search)

    def build_product_row(self, form: ProductCreate) -> dict:
        """
        Validate the add-product form and build the `products` row

        Raises:
            ProductFormError with the message shown to the admin
        """
        name = form.name.strip()
        if not name:
            raise ProductFormError("Product name is required")

        if form.price is None or form.price <= 0:
            raise ProductFormError("Valid price is required")

        if not form.category:
            raise ProductFormError("Please select a category")

        category = self.category_repo.find_by_name(form.category)
        if not category:
            raise ProductFormError("Category not found. Please create the category first.")

        return {
            "name": name,
            "slug": slugify(name),
            "description": form.description.strip() or None,
            "price": float(form.price),
            "original_price": float(form.original_price) if form.original_price else None,
            "stock_quantity": form.stock_quantity or 0,
            "category_id": category.id,
            # First gallery image is the main image
            "image_url": form.images[0] if form.images else None,
            "images": list(form.images),
            "featured": False,
        }

    def create_product(self, form: ProductCreate) -> Product:
        product = self.product_repo.create(self.build_product_row(form))
        logger.info(f"Product created: {product.name} ({product.slug})")
        return product

    def update_product(self, product_id: str, update: ProductUpdate) -> Product:
        data = update.model_dump(exclude_unset=True, mode="json")
        for field in ("price", "original_price"):
            if data.get(field) is not None:
                data[field] = float(data[field])

        product = self.product_repo.update(product_id, data)
        if not product:
            raise NotFoundError(f"Product {product_id} not found")
        return product

    def delete_product(self, product_id: str) -> None:
        self.product_repo.delete(product_id)
        logger.info(f"Product deleted: {product_id}")

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def list_categories(self) -> List[Category]:
        return self.category_repo.find_all()

    def create_category(self, data: CategoryInput) -> Category:
        return self.category_repo.create(data.model_dump())

    def update_category(self, category_id: str, data: CategoryInput) -> Category:
        category = self.category_repo.update(category_id, data.model_dump())
        if not category:
            raise NotFoundError(f"Category {category_id} not found")
        return category

    def delete_category(self, category_id: str) -> None:
        self.category_repo.delete(category_id)
