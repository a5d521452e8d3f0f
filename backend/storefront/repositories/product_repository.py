"""
Product Repository - Data Access Layer for Products

Handles all backend queries for products and returns Product domain models.

Author: FastDeal
Date: 2026-10-19
"""
from typing import List, Optional

from supabase import Client

from storefront.core.database import get_supabase_client
from storefront.domain.product import Product

# Products are always read with their category embedded
PRODUCT_SELECT = "*, category:categories(*)"


class ProductRepository:
    """
    Repository for Product data access

    All `products` table calls are centralized here.
    Returns Product domain models, not raw dictionaries.
    """

    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase_client()

    @staticmethod
    def _map_row_to_product(row: dict) -> Product:
        """Map a backend row (numeric strings, null images) to a Product"""
        return Product.model_validate(row)

    def _table(self):
        return self.client.table("products")

    def find_active(self, category_id: Optional[str] = None) -> List[Product]:
        """
        Active products, newest first

        Args:
            category_id: Restrict to one category

        Returns:
            List of products
        """
        query = self._table().select(PRODUCT_SELECT).eq("active", True)

        if category_id:
            query = query.eq("category_id", category_id)

        result = query.order("created_at", desc=True).execute()
        return [self._map_row_to_product(row) for row in result.data or []]

    def find_featured(self, limit: int = 8) -> List[Product]:
        """Active featured products, newest first"""
        result = (
            self._table()
            .select(PRODUCT_SELECT)
            .eq("active", True)
            .eq("featured", True)
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [self._map_row_to_product(row) for row in result.data or []]

    def find_by_slug(self, slug: str) -> Optional[Product]:
        """
        Find product by slug

        Returns:
            Product or None if not found
        """
        result = self._table().select(PRODUCT_SELECT).eq("slug", slug).limit(1).execute()
        if not result.data:
            return None
        return self._map_row_to_product(result.data[0])

    def find_by_id(self, product_id: str) -> Optional[Product]:
        result = self._table().select(PRODUCT_SELECT).eq("id", product_id).limit(1).execute()
        if not result.data:
            return None
        return self._map_row_to_product(result.data[0])

    def find_all(self, search: Optional[str] = None) -> List[Product]:
        """
        Every product including inactive ones (back-office listing)

        Args:
            search: Case-insensitive match on product name
        """
        query = self._table().select(PRODUCT_SELECT)

        if search:
            query = query.ilike("name", f"%{search}%")

        result = query.order("created_at", desc=True).execute()
        return [self._map_row_to_product(row) for row in result.data or []]

    def create(self, data: dict) -> Product:
        result = self._table().insert(data).execute()
        return self._map_row_to_product(result.data[0])

    def update(self, product_id: str, data: dict) -> Optional[Product]:
        result = self._table().update(data).eq("id", product_id).execute()
        if not result.data:
            return None
        return self._map_row_to_product(result.data[0])

    def update_stock(self, product_id: str, stock_quantity: int) -> Optional[Product]:
        return self.update(product_id, {"stock_quantity": stock_quantity})

    def delete(self, product_id: str) -> None:
        self._table().delete().eq("id", product_id).execute()
