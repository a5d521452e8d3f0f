"""
Domain Layer - Business Entities

Pydantic models mirroring the backend rows plus the client-local cart and
wishlist collections.

Author: FastDeal
Date: 2026-10-19
"""
from storefront.domain.product import Product, Category
from storefront.domain.order import Order, OrderItem, OrderStatus, PaymentMethod
from storefront.domain.cart import Cart, CartItem, Wishlist
from storefront.domain.profile import Profile

__all__ = [
    'Product',
    'Category',
    'Order',
    'OrderItem',
    'OrderStatus',
    'PaymentMethod',
    'Cart',
    'CartItem',
    'Wishlist',
    'Profile',
]
