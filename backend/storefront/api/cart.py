"""
Cart and Wishlist API Endpoints

Both collections live in the caller's local store namespace (X-Client-Id).
Products are snapshotted from the catalog when they are added.
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from storefront.api.deps import get_catalog_service, get_client_storage, raise_http_error
from storefront.core.local_storage import LocalStorage
from storefront.services.cart_service import CartStore, WishlistStore
from storefront.services.catalog_service import CatalogService

router = APIRouter()
wishlist_router = APIRouter()


# Request models
class CartAdd(BaseModel):
    product_id: str
    quantity: int = Field(1, ge=1)


class QuantityUpdate(BaseModel):
    quantity: int


class CartOpenUpdate(BaseModel):
    is_open: bool


class WishlistAdd(BaseModel):
    product_id: str


def get_cart_store(storage: LocalStorage = Depends(get_client_storage)) -> CartStore:
    return CartStore(storage)


def get_wishlist_store(storage: LocalStorage = Depends(get_client_storage)) -> WishlistStore:
    return WishlistStore(storage)


# =============================================================================
# Cart
# =============================================================================

@router.get("/")
async def get_cart(store: CartStore = Depends(get_cart_store)):
    return {"status": "success", "data": store.cart.to_dict()}


@router.post("/items")
async def add_to_cart(
    body: CartAdd,
    store: CartStore = Depends(get_cart_store),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Add a product (quantity capped at stock); opens the cart drawer"""
    try:
        product = catalog.get_product_by_id(body.product_id)
        cart = store.add_to_cart(product, body.quantity)
        return {
            "status": "success",
            "message": f"Added {product.name} to cart",
            "data": cart.to_dict()
        }

    except Exception as e:
        raise_http_error(e, "adding to cart")


@router.patch("/items/{product_id}")
async def update_cart_quantity(
    product_id: str,
    body: QuantityUpdate,
    store: CartStore = Depends(get_cart_store),
):
    """Set a line's quantity; zero or less removes the line"""
    cart = store.update_quantity(product_id, body.quantity)
    return {"status": "success", "data": cart.to_dict()}


@router.delete("/items/{product_id}")
async def remove_from_cart(product_id: str, store: CartStore = Depends(get_cart_store)):
    cart = store.remove_from_cart(product_id)
    return {"status": "success", "data": cart.to_dict()}


@router.delete("/")
async def clear_cart(store: CartStore = Depends(get_cart_store)):
    cart = store.clear_cart()
    return {"status": "success", "data": cart.to_dict()}


@router.put("/open")
async def set_cart_open(body: CartOpenUpdate, store: CartStore = Depends(get_cart_store)):
    cart = store.set_open(body.is_open)
    return {"status": "success", "data": cart.to_dict()}


# =============================================================================
# Wishlist
# =============================================================================

@wishlist_router.get("/")
async def get_wishlist(store: WishlistStore = Depends(get_wishlist_store)):
    return {"status": "success", "data": store.wishlist.to_dict()}


@wishlist_router.post("/items")
async def add_to_wishlist(
    body: WishlistAdd,
    store: WishlistStore = Depends(get_wishlist_store),
    catalog: CatalogService = Depends(get_catalog_service),
):
    try:
        product = catalog.get_product_by_id(body.product_id)
        message = store.add_to_wishlist(product)
        return {
            "status": "success",
            "message": message,
            "data": store.wishlist.to_dict()
        }

    except Exception as e:
        raise_http_error(e, "adding to wishlist")


@wishlist_router.get("/items/{product_id}")
async def is_in_wishlist(product_id: str, store: WishlistStore = Depends(get_wishlist_store)):
    return {"status": "success", "data": {"product_id": product_id, "in_wishlist": store.is_in_wishlist(product_id)}}


@wishlist_router.delete("/items/{product_id}")
async def remove_from_wishlist(product_id: str, store: WishlistStore = Depends(get_wishlist_store)):
    message = store.remove_from_wishlist(product_id)
    return {
        "status": "success",
        "message": message,
        "data": store.wishlist.to_dict()
    }


@wishlist_router.delete("/")
async def clear_wishlist(store: WishlistStore = Depends(get_wishlist_store)):
    store.clear_wishlist()
    return {"status": "success", "data": store.wishlist.to_dict()}
