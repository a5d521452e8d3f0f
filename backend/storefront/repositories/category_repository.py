"""
Category Repository - Data Access Layer for Categories
"""
from typing import List, Optional

from supabase import Client

from storefront.core.database import get_supabase_client
from storefront.domain.product import Category


class CategoryRepository:
    """All `categories` table calls"""

    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase_client()

    def _table(self):
        return self.client.table("categories")

    def _find_one(self, column: str, value: str) -> Optional[Category]:
        result = self._table().select("*").eq(column, value).limit(1).execute()
        if not result.data:
            return None
        return Category.model_validate(result.data[0])

    def find_all(self) -> List[Category]:
        """All categories ordered by name"""
        result = self._table().select("*").order("name").execute()
        return [Category.model_validate(row) for row in result.data or []]

    def find_by_slug(self, slug: str) -> Optional[Category]:
        return self._find_one("slug", slug)

    def find_by_name(self, name: str) -> Optional[Category]:
        return self._find_one("name", name)

    def create(self, data: dict) -> Category:
        result = self._table().insert(data).execute()
        return Category.model_validate(result.data[0])

    def update(self, category_id: str, data: dict) -> Optional[Category]:
        result = self._table().update(data).eq("id", category_id).execute()
        if not result.data:
            return None
        return Category.model_validate(result.data[0])

    def delete(self, category_id: str) -> None:
        self._table().delete().eq("id", category_id).execute()
