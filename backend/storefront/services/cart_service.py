"""
Cart and Wishlist Stores

Load the client's cart / wishlist from the local key-value store, apply one
change, write the whole list back. Unreadable stored content is logged and
replaced by an empty collection.

Author: FastDeal
Date: 2026-10-19
"""
import json
import logging
from typing import List, Optional

from pydantic import ValidationError

from storefront.core.config import settings
from storefront.core.local_storage import LocalStorage
from storefront.domain.cart import Cart, CartItem, Wishlist
from storefront.domain.product import Product

logger = logging.getLogger(__name__)


def _load_list(storage: LocalStorage, key: str) -> Optional[list]:
    raw = storage.get_item(key)
    if raw is None:
        return None

    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse {key} from local storage: {e}")
        return None

    if not isinstance(value, list):
        logger.error(f"Failed to parse {key} from local storage: expected a list, got {type(value).__name__}")
        return None

    return value


class CartStore:
    """
    The shopper's cart, persisted under CART_STORAGE_KEY

    Every mutating call saves immediately.
    """

    def __init__(self, storage: LocalStorage, key: Optional[str] = None):
        self.storage = storage
        self.key = key or settings.CART_STORAGE_KEY
        self.open_key = f"{self.key}-open"
        self.cart = Cart(items=self._load_items(), is_open=self.storage.get_item(self.open_key) == "true")

    def _load_items(self) -> List[CartItem]:
        raw_items = _load_list(self.storage, self.key)
        if raw_items is None:
            return []

        try:
            return [CartItem.model_validate(item) for item in raw_items]
        except ValidationError as e:
            logger.error(f"Failed to parse cart from local storage: {e}")
            return []

    def save(self) -> None:
        items = [item.model_dump(mode="json") for item in self.cart.items]
        self.storage.set_item(self.key, json.dumps(items))
        self.storage.set_item(self.open_key, "true" if self.cart.is_open else "false")

    def add_to_cart(self, product: Product, quantity: int = 1) -> Cart:
        self.cart.add(product, quantity)
        self.save()
        return self.cart

    def remove_from_cart(self, product_id: str) -> Cart:
        self.cart.remove(product_id)
        self.save()
        return self.cart

    def update_quantity(self, product_id: str, quantity: int) -> Cart:
        self.cart.update_quantity(product_id, quantity)
        self.save()
        return self.cart

    def clear_cart(self) -> Cart:
        self.cart.clear()
        self.save()
        return self.cart

    def set_open(self, is_open: bool) -> Cart:
        self.cart.is_open = is_open
        self.save()
        return self.cart


class WishlistStore:
    """The shopper's wishlist, persisted under WISHLIST_STORAGE_KEY"""

    def __init__(self, storage: LocalStorage, key: Optional[str] = None):
        self.storage = storage
        self.key = key or settings.WISHLIST_STORAGE_KEY
        self.wishlist = Wishlist(items=self._load_items())

    def _load_items(self) -> List[Product]:
        raw_items = _load_list(self.storage, self.key)
        if raw_items is None:
            return []

        try:
            return [Product.model_validate(item) for item in raw_items]
        except ValidationError as e:
            logger.error(f"Failed to parse wishlist: {e}")
            return []

    def save(self) -> None:
        items = [product.model_dump(mode="json") for product in self.wishlist.items]
        self.storage.set_item(self.key, json.dumps(items))

    def add_to_wishlist(self, product: Product) -> Optional[str]:
        """Returns the confirmation message, or None when already saved"""
        if not self.wishlist.add(product):
            return None
        self.save()
        return f"Added {product.name} to wishlist"

    def remove_from_wishlist(self, product_id: str) -> Optional[str]:
        removed = self.wishlist.remove(product_id)
        self.save()
        if removed:
            return f"Removed {removed.name} from wishlist"
        return None

    def is_in_wishlist(self, product_id: str) -> bool:
        return self.wishlist.contains(product_id)

    def clear_wishlist(self) -> None:
        self.wishlist.clear()
        self.save()
