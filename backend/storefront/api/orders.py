"""
Checkout and Order History API Endpoints

Author: FastDeal
Date: 2026-10-19
"""
from typing import Optional

from fastapi import APIRouter, Depends

from storefront.api.cart import get_cart_store
from storefront.api.deps import get_order_repository, raise_http_error
from storefront.core.auth import TokenUser, get_current_user_optional
from storefront.domain.order import CheckoutForm
from storefront.repositories.order_repository import OrderRepository
from storefront.services.cart_service import CartStore
from storefront.services.checkout_service import CheckoutService

router = APIRouter()


def get_checkout_service(order_repo: OrderRepository = Depends(get_order_repository)) -> CheckoutService:
    return CheckoutService(order_repo)


@router.post("/checkout", status_code=201)
async def checkout(
    form: CheckoutForm,
    cart_store: CartStore = Depends(get_cart_store),
    user: Optional[TokenUser] = Depends(get_current_user_optional),
    service: CheckoutService = Depends(get_checkout_service),
):
    """
    Place an order from the caller's cart

    Guests must supply name, email and phone. The cart is cleared on success.
    """
    try:
        order = service.checkout(form, cart_store, user_id=user.id if user else None)

        return {
            "status": "success",
            "message": "Order placed successfully!",
            "data": {
                "order_id": order.id,
                "short_id": order.short_id,
                "order": order.to_dict(),
            }
        }

    except Exception as e:
        raise_http_error(e, "creating order")


@router.get("/")
async def get_my_orders(
    user: Optional[TokenUser] = Depends(get_current_user_optional),
    service: CheckoutService = Depends(get_checkout_service),
):
    """The signed-in user's orders, newest first (empty for guests)"""
    try:
        orders = service.list_orders(user.id if user else None)
        return {
            "status": "success",
            "count": len(orders),
            "data": [order.to_dict() for order in orders]
        }

    except Exception as e:
        raise_http_error(e, "fetching orders")
