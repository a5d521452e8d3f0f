"""
Order Repository - Data Access Layer for Orders

Handles `orders` and `order_items` calls and returns Order domain models.

Author: FastDeal
Date: 2026-10-19
"""
from typing import List, Optional

from supabase import Client

from storefront.core.database import get_supabase_client
from storefront.domain.order import Order, OrderStatus

# Orders are always read with their line items embedded
ORDER_SELECT = "*, order_items(*)"


class OrderRepository:
    """
    Repository for Order data access

    Creating an order is two inserts (header, then items) with no rollback
    between them; the backend offers no multi-table transaction to the client.
    """

    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase_client()

    @staticmethod
    def _map_row_to_order(row: dict) -> Order:
        data = dict(row)
        data["order_items"] = data.get("order_items") or []
        return Order.model_validate(data)

    def find_by_user(self, user_id: str) -> List[Order]:
        """
        Orders placed by one user, newest first

        Args:
            user_id: Auth user ID

        Returns:
            List of orders with items
        """
        result = (
            self.client.table("orders")
            .select(ORDER_SELECT)
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_row_to_order(row) for row in result.data or []]

    def find_all(self, status: Optional[str] = None) -> List[Order]:
        """Every order, newest first (back-office)"""
        query = self.client.table("orders").select(ORDER_SELECT)

        if status:
            query = query.eq("status", status)

        result = query.order("created_at", desc=True).execute()
        return [self._map_row_to_order(row) for row in result.data or []]

    def find_by_id(self, order_id: str) -> Optional[Order]:
        result = self.client.table("orders").select(ORDER_SELECT).eq("id", order_id).limit(1).execute()
        if not result.data:
            return None
        return self._map_row_to_order(result.data[0])

    def create(self, order_row: dict, item_rows: List[dict]) -> Order:
        """
        Insert the order header, then its items

        Args:
            order_row: `orders` columns (without id)
            item_rows: `order_items` columns (without order_id)

        Returns:
            The created order with its items
        """
        result = self.client.table("orders").insert(order_row).execute()
        order = dict(result.data[0])

        rows = [{**item, "order_id": order["id"]} for item in item_rows]
        items_result = self.client.table("order_items").insert(rows).execute()

        order["order_items"] = items_result.data or []
        return self._map_row_to_order(order)

    def update_status(self, order_id: str, status: OrderStatus) -> Optional[Order]:
        result = (
            self.client.table("orders")
            .update({"status": status.value})
            .eq("id", order_id)
            .execute()
        )
        if not result.data:
            return None
        return self._map_row_to_order(result.data[0])
