"""
Admin API Endpoints
Back-office: dashboard, orders, products, categories, stock, analytics,
finance and store settings. Every route requires the admin role.

Author: FastDeal
Date: 2026-10-19
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import StreamingResponse

from storefront.api.deps import (
    get_category_repository,
    get_order_repository,
    get_product_repository,
    raise_http_error,
)
from storefront.core.auth import require_admin
from storefront.core.local_storage import get_local_storage
from storefront.domain.exceptions import NotFoundError
from storefront.domain.order import OrderStatusUpdate
from storefront.domain.product import CategoryInput, ProductCreate, ProductUpdate, StockUpdate
from storefront.repositories.category_repository import CategoryRepository
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.services import analytics_service
from storefront.services.catalog_admin_service import CatalogAdminService
from storefront.services.inventory_service import InventoryService
from storefront.services.settings_service import StoreSettings, StoreSettingsService
from storefront.services.share_service import share_links

router = APIRouter(dependencies=[Depends(require_admin)])

# Store-wide entries share one namespace, independent of X-Client-Id
STORE_NAMESPACE = "store"


def get_catalog_admin_service(
    product_repo: ProductRepository = Depends(get_product_repository),
    category_repo: CategoryRepository = Depends(get_category_repository),
) -> CatalogAdminService:
    return CatalogAdminService(product_repo, category_repo)


def get_inventory_service(product_repo: ProductRepository = Depends(get_product_repository)) -> InventoryService:
    return InventoryService(product_repo)


def get_store_settings_service() -> StoreSettingsService:
    return StoreSettingsService(get_local_storage(STORE_NAMESPACE))


# =============================================================================
# Dashboard
# =============================================================================

@router.get("/dashboard")
async def get_dashboard(
    order_repo: OrderRepository = Depends(get_order_repository),
    product_repo: ProductRepository = Depends(get_product_repository),
):
    """Revenue, order and stock cards plus the five most recent orders"""
    try:
        stats = analytics_service.dashboard_stats(order_repo.find_all(), product_repo.find_active())
        return {"status": "success", "data": stats}
    except Exception as e:
        raise_http_error(e, "fetching dashboard")


# =============================================================================
# Orders
# =============================================================================

@router.get("/orders")
async def get_orders(
    status: Optional[str] = Query(None, description="Filter by order status"),
    order_repo: OrderRepository = Depends(get_order_repository),
):
    try:
        orders = order_repo.find_all(status=status)
        return {
            "status": "success",
            "count": len(orders),
            "data": [order.to_dict() for order in orders]
        }
    except Exception as e:
        raise_http_error(e, "fetching orders")


@router.patch("/orders/{order_id}/status")
async def update_order_status(
    order_id: str,
    body: OrderStatusUpdate,
    order_repo: OrderRepository = Depends(get_order_repository),
):
    try:
        order = order_repo.update_status(order_id, body.status)
        if not order:
            raise NotFoundError(f"Order {order_id} not found")
        return {
            "status": "success",
            "message": f"Order marked as {body.status.value}",
            "data": order.to_dict()
        }
    except Exception as e:
        raise_http_error(e, "updating order status")


# =============================================================================
# Products
# =============================================================================

@router.get("/products")
async def get_products(
    search: Optional[str] = Query(None, description="Search by name"),
    service: CatalogAdminService = Depends(get_catalog_admin_service),
):
    try:
        products = service.list_products(search=search)
        return {
            "status": "success",
            "count": len(products),
            "data": [product.to_dict() for product in products]
        }
    except Exception as e:
        raise_http_error(e, "fetching products")


@router.post("/products", status_code=201)
async def create_product(
    form: ProductCreate,
    service: CatalogAdminService = Depends(get_catalog_admin_service),
):
    try:
        product = service.create_product(form)
        return {"status": "success", "message": "Product added successfully!", "data": product.to_dict()}
    except Exception as e:
        raise_http_error(e, "adding product")


@router.patch("/products/{product_id}")
async def update_product(
    product_id: str,
    update: ProductUpdate,
    service: CatalogAdminService = Depends(get_catalog_admin_service),
):
    try:
        product = service.update_product(product_id, update)
        return {"status": "success", "message": "Product updated successfully", "data": product.to_dict()}
    except Exception as e:
        raise_http_error(e, "updating product")


@router.delete("/products/{product_id}")
async def delete_product(
    product_id: str,
    service: CatalogAdminService = Depends(get_catalog_admin_service),
):
    try:
        service.delete_product(product_id)
        return {"status": "success", "message": "Product deleted successfully"}
    except Exception as e:
        raise_http_error(e, "deleting product")


# =============================================================================
# Categories
# =============================================================================

@router.get("/categories")
async def get_categories(service: CatalogAdminService = Depends(get_catalog_admin_service)):
    try:
        categories = service.list_categories()
        return {
            "status": "success",
            "count": len(categories),
            "data": [category.to_dict() for category in categories]
        }
    except Exception as e:
        raise_http_error(e, "fetching categories")


@router.post("/categories", status_code=201)
async def create_category(
    body: CategoryInput,
    service: CatalogAdminService = Depends(get_catalog_admin_service),
):
    try:
        category = service.create_category(body)
        return {"status": "success", "message": "Category added successfully", "data": category.to_dict()}
    except Exception as e:
        raise_http_error(e, "saving category")


@router.put("/categories/{category_id}")
async def update_category(
    category_id: str,
    body: CategoryInput,
    service: CatalogAdminService = Depends(get_catalog_admin_service),
):
    try:
        category = service.update_category(category_id, body)
        return {"status": "success", "message": "Category updated successfully", "data": category.to_dict()}
    except Exception as e:
        raise_http_error(e, "saving category")


@router.delete("/categories/{category_id}")
async def delete_category(
    category_id: str,
    service: CatalogAdminService = Depends(get_catalog_admin_service),
):
    try:
        service.delete_category(category_id)
        return {"status": "success", "message": "Category deleted successfully"}
    except Exception as e:
        raise_http_error(e, "deleting category")


# =============================================================================
# Stock
# =============================================================================

@router.get("/stock")
async def get_stock(service: InventoryService = Depends(get_inventory_service)):
    """Stock status per product and the summary cards"""
    try:
        return {"status": "success", "data": service.get_stock_levels()}
    except Exception as e:
        raise_http_error(e, "fetching stock")


@router.get("/stock/export")
async def export_stock(service: InventoryService = Depends(get_inventory_service)):
    """Download the stock table as an Excel workbook"""
    try:
        excel_file = service.export_stock_workbook()
    except Exception as e:
        raise_http_error(e, "exporting stock")

    return StreamingResponse(
        excel_file,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": "attachment; filename=stock.xlsx"}
    )


@router.patch("/stock/{product_id}")
async def update_stock(
    product_id: str,
    body: StockUpdate,
    service: InventoryService = Depends(get_inventory_service),
):
    try:
        product = service.update_stock(product_id, body.stock_quantity)
        return {"status": "success", "message": "Stock updated successfully", "data": product.to_dict()}
    except Exception as e:
        raise_http_error(e, "updating stock")


@router.get("/stock/{product_id}/share")
async def get_share_links(
    product_id: str,
    product_repo: ProductRepository = Depends(get_product_repository),
):
    """Facebook post text and links for a product"""
    try:
        product = product_repo.find_by_id(product_id)
        if not product:
            raise HTTPException(status_code=404, detail=f"Product {product_id} not found")
        return {"status": "success", "data": share_links(product)}
    except Exception as e:
        raise_http_error(e, "building share links")


# =============================================================================
# Analytics & Finance
# =============================================================================

@router.get("/analytics")
async def get_analytics(
    order_repo: OrderRepository = Depends(get_order_repository),
    product_repo: ProductRepository = Depends(get_product_repository),
):
    """Last 7 days, last 6 months, top 5 products and totals"""
    try:
        data = analytics_service.analytics_overview(order_repo.find_all(), product_repo.find_active())
        return {"status": "success", "data": data}
    except Exception as e:
        raise_http_error(e, "fetching analytics")


@router.get("/finance")
async def get_finance(
    period: str = Query(analytics_service.PERIOD_TODAY, description="today, week or month"),
    order_repo: OrderRepository = Depends(get_order_repository),
):
    if period not in analytics_service.PERIODS:
        raise HTTPException(status_code=400, detail="period must be 'today', 'week', or 'month'")

    try:
        data = analytics_service.finance_metrics(order_repo.find_all(), period)
        return {"status": "success", "data": data}
    except Exception as e:
        raise_http_error(e, "fetching finance metrics")


# =============================================================================
# Store settings
# =============================================================================

@router.get("/settings")
async def get_store_settings(service: StoreSettingsService = Depends(get_store_settings_service)):
    return {"status": "success", "data": service.get().model_dump()}


@router.put("/settings")
async def update_store_settings(
    body: StoreSettings,
    service: StoreSettingsService = Depends(get_store_settings_service),
):
    saved = service.save(body)
    return {"status": "success", "message": "Store settings updated successfully", "data": saved.model_dump()}
