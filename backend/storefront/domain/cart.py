"""
Cart and Wishlist Domain Models

Client-local collections of product snapshots. Both are plain lists that the
services persist verbatim to the local key-value store.

Author: FastDeal
Date: 2026-10-19
"""
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from storefront.domain.exceptions import CartError
from storefront.domain.product import Product


class CartItem(BaseModel):
    """A product snapshot and the quantity the shopper wants"""
    product: Product
    quantity: int = 1

    @property
    def line_total(self) -> Decimal:
        return self.product.price * self.quantity

    def to_dict(self) -> dict:
        return {
            "product": self.product.to_dict(),
            "quantity": self.quantity,
            "line_total": float(self.line_total),
        }


class Cart(BaseModel):
    """
    Shopping cart

    Quantities are capped at the product's stock_quantity snapshot; a quantity
    that would drop to zero removes the line instead.
    """

    items: List[CartItem] = Field(default_factory=list)
    is_open: bool = False

    def find(self, product_id: str) -> Optional[CartItem]:
        for item in self.items:
            if item.product.id == product_id:
                return item
        return None

    def add(self, product: Product, quantity: int = 1) -> None:
        if product.is_out_of_stock:
            raise CartError(f"{product.name} is out of stock")

        existing = self.find(product.id)
        if existing:
            existing.product = product
            existing.quantity = min(existing.quantity + quantity, product.stock_quantity)
        else:
            self.items.append(CartItem(
                product=product,
                quantity=min(quantity, product.stock_quantity),
            ))
        self.items = [item for item in self.items if item.quantity > 0]
        self.is_open = True

    def remove(self, product_id: str) -> None:
        self.items = [item for item in self.items if item.product.id != product_id]

    def update_quantity(self, product_id: str, quantity: int) -> None:
        if quantity <= 0:
            self.remove(product_id)
            return

        item = self.find(product_id)
        if item:
            item.quantity = min(quantity, item.product.stock_quantity)
            if item.quantity <= 0:
                self.remove(product_id)

    def clear(self) -> None:
        self.items = []

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def total_price(self) -> Decimal:
        return sum((item.line_total for item in self.items), Decimal("0"))

    @property
    def is_empty(self) -> bool:
        return not self.items

    def to_dict(self) -> dict:
        return {
            "items": [item.to_dict() for item in self.items],
            "total_items": self.total_items,
            "total_price": float(self.total_price),
            "is_open": self.is_open,
        }


class Wishlist(BaseModel):
    """Saved products, at most one entry per product id"""

    items: List[Product] = Field(default_factory=list)

    def contains(self, product_id: str) -> bool:
        return any(product.id == product_id for product in self.items)

    def add(self, product: Product) -> bool:
        """Append the product; False when it was already saved"""
        if self.contains(product.id):
            return False
        self.items.append(product)
        return True

    def remove(self, product_id: str) -> Optional[Product]:
        """Drop the product and return it, or None when it was not saved"""
        removed = next((p for p in self.items if p.id == product_id), None)
        self.items = [p for p in self.items if p.id != product_id]
        return removed

    def clear(self) -> None:
        self.items = []

    def to_dict(self) -> dict:
        return {
            "items": [product.to_dict() for product in self.items],
            "count": len(self.items),
        }
