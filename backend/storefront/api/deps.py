"""
Shared FastAPI dependencies for the API routers
"""
import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client

from storefront.core.database import get_supabase
from storefront.core.local_storage import DEFAULT_NAMESPACE, LocalStorage, get_local_storage
from storefront.domain.exceptions import NotFoundError, StorefrontError
from storefront.repositories.category_repository import CategoryRepository
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)


def get_client_storage(x_client_id: Optional[str] = Header(None)) -> LocalStorage:
    """Local store scoped to the calling client (X-Client-Id header)"""
    return get_local_storage(x_client_id or DEFAULT_NAMESPACE)


def get_product_repository(sb: Client = Depends(get_supabase)) -> ProductRepository:
    return ProductRepository(sb)


def get_category_repository(sb: Client = Depends(get_supabase)) -> CategoryRepository:
    return CategoryRepository(sb)


def get_order_repository(sb: Client = Depends(get_supabase)) -> OrderRepository:
    return OrderRepository(sb)


def get_catalog_service(
    product_repo: ProductRepository = Depends(get_product_repository),
    category_repo: CategoryRepository = Depends(get_category_repository),
) -> CatalogService:
    return CatalogService(product_repo, category_repo)


def raise_http_error(error: Exception, action: str):
    """
    Map a caught exception to the HTTP error the client sees

    HTTPException passes through, user-facing validation errors become 400
    (404 for missing records), anything else is logged and becomes 500.
    """
    if isinstance(error, HTTPException):
        raise error
    if isinstance(error, NotFoundError):
        raise HTTPException(status_code=404, detail=str(error))
    if isinstance(error, StorefrontError):
        raise HTTPException(status_code=400, detail=str(error))

    logger.error(f"Error {action}: {error}")
    raise HTTPException(status_code=500, detail=f"Error {action}: {str(error)}")
