"""
Checkout Service

Validates the checkout form, turns the cart into an order and clears the cart.

Author: FastDeal
Date: 2026-10-19
"""
import logging
from decimal import Decimal
from typing import List, Optional

from storefront.domain.cart import CartItem
from storefront.domain.exceptions import CheckoutError
from storefront.domain.order import CheckoutForm, Order, OrderStatus, PaymentMethod
from storefront.repositories.order_repository import OrderRepository
from storefront.services.cart_service import CartStore

logger = logging.getLogger(__name__)


def order_total(items: List[CartItem]) -> Decimal:
    return sum((item.product.price * item.quantity for item in items), Decimal("0"))


def orderable_items(items: List[CartItem]) -> List[CartItem]:
    """Cart lines that can become order items (quantity of at least one)"""
    return [item for item in items if item.quantity > 0]


def validate_checkout(form: CheckoutForm, items: List[CartItem], user_id: Optional[str]) -> None:
    """Raise CheckoutError with the message the shopper should see"""
    if not orderable_items(items):
        raise CheckoutError("Your cart is empty")

    if not form.shipping_address.strip() or not form.shipping_city.strip():
        raise CheckoutError("Please fill in all required fields")

    if not user_id and not (form.guest_name.strip() and form.guest_email.strip() and form.guest_phone.strip()):
        raise CheckoutError("Please fill in your contact information")


def build_order_rows(form: CheckoutForm, items: List[CartItem], user_id: Optional[str]):
    """`orders` row and `order_items` rows for one checkout"""
    order_row = {
        "user_id": user_id,
        "guest_email": form.guest_email or None,
        "guest_name": form.guest_name or None,
        "guest_phone": form.guest_phone or None,
        "shipping_address": form.shipping_address,
        "shipping_city": form.shipping_city,
        "total_amount": float(order_total(items)),
        "notes": form.notes or None,
        "status": OrderStatus.PENDING.value,
    }

    item_rows = [
        {
            "product_id": item.product.id,
            "product_name": item.product.name,
            "quantity": item.quantity,
            "unit_price": float(item.product.price),
        }
        for item in items
    ]

    return order_row, item_rows


class CheckoutService:
    """Places orders for signed-in shoppers and guests"""

    def __init__(self, order_repo: Optional[OrderRepository] = None):
        self.order_repo = order_repo or OrderRepository()

    def create_order(self, form: CheckoutForm, items: List[CartItem], user_id: Optional[str] = None) -> Order:
        """
        Insert the order and its items

        Args:
            form: Shipping details, guest contact, payment method
            items: Cart lines to freeze into order items
            user_id: Signed-in user, or None for a guest order

        Returns:
            The created order (status pending)
        """
        items = orderable_items(items)
        validate_checkout(form, items, user_id)

        if form.payment_method == PaymentMethod.CARD:
            logger.info("Processing card payment (simulated)")
        elif form.payment_method == PaymentMethod.KOKO:
            logger.info("Redirecting to Koko (simulated)")

        order_row, item_rows = build_order_rows(form, items, user_id)
        order = self.order_repo.create(order_row, item_rows)

        logger.info(f"Order {order.short_id} created: {len(item_rows)} items, total {order.total_amount}")
        return order

    def checkout(self, form: CheckoutForm, cart_store: CartStore, user_id: Optional[str] = None) -> Order:
        """Create an order from the stored cart and clear the cart on success"""
        order = self.create_order(form, list(cart_store.cart.items), user_id)
        cart_store.clear_cart()
        return order

    def list_orders(self, user_id: Optional[str]) -> List[Order]:
        """The user's orders, newest first; nothing for anonymous callers"""
        if not user_id:
            return []
        return self.order_repo.find_by_user(user_id)
