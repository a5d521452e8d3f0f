"""
API tests for the back-office endpoints
"""
from io import BytesIO

import pytest
from openpyxl import load_workbook


@pytest.fixture
def placed_order(admin_client):
    """One pending guest order for a Desk Lamp"""
    admin_client.post("/api/v1/cart/items", json={"product_id": "prod-lamp", "quantity": 2})
    response = admin_client.post("/api/v1/orders/checkout", json={
        "shipping_address": "12 Lake Road",
        "shipping_city": "Kandy",
    })
    return response.json()["data"]["order"]


class TestAdminAccess:

    def test_anonymous_is_unauthorized(self, api_client):
        assert api_client.get("/api/v1/admin/dashboard").status_code == 401

    def test_shopper_is_forbidden(self, user_client):
        response = user_client.get("/api/v1/admin/dashboard")

        assert response.status_code == 403
        assert response.json()["detail"] == "Access denied. Admin role required"


class TestDashboardAndOrders:

    def test_dashboard(self, admin_client, placed_order):
        data = admin_client.get("/api/v1/admin/dashboard").json()["data"]

        assert data["total_orders"] == 1
        assert data["total_revenue"] == 3000.0
        assert data["pending_orders"] == 1
        assert data["total_products"] == 3
        # Desk Lamp (5) and Phone Charger (0)
        assert data["low_stock_products"] == 2

    def test_orders_and_status_update(self, admin_client, placed_order):
        response = admin_client.patch(
            f"/api/v1/admin/orders/{placed_order['id']}/status",
            json={"status": "shipped"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "shipped"
        assert admin_client.get("/api/v1/admin/orders", params={"status": "shipped"}).json()["count"] == 1
        assert admin_client.get("/api/v1/admin/orders", params={"status": "pending"}).json()["count"] == 0

    def test_status_update_missing_order(self, admin_client):
        response = admin_client.patch("/api/v1/admin/orders/missing/status", json={"status": "shipped"})

        assert response.status_code == 404

    def test_invalid_status(self, admin_client, placed_order):
        response = admin_client.patch(
            f"/api/v1/admin/orders/{placed_order['id']}/status",
            json={"status": "lost"},
        )

        assert response.status_code == 422


class TestProductAdmin:

    def test_create_product(self, admin_client):
        response = admin_client.post("/api/v1/admin/products", json={
            "name": "Ceramic Mug",
            "price": "950",
            "category": "Home",
            "stock_quantity": 12,
        })

        assert response.status_code == 201
        assert response.json()["message"] == "Product added successfully!"
        assert response.json()["data"]["slug"] == "ceramic-mug"

    def test_create_product_validation(self, admin_client):
        response = admin_client.post("/api/v1/admin/products", json={"name": "Ceramic Mug", "price": "950"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Please select a category"

    def test_list_update_delete(self, admin_client):
        assert admin_client.get("/api/v1/admin/products").json()["count"] == 4
        assert admin_client.get("/api/v1/admin/products", params={"search": "kettle"}).json()["count"] == 1

        updated = admin_client.patch("/api/v1/admin/products/prod-kettle", json={"active": True})
        assert updated.json()["data"]["active"] is True

        assert admin_client.delete("/api/v1/admin/products/prod-kettle").status_code == 200
        assert admin_client.get("/api/v1/admin/products").json()["count"] == 3


class TestCategoryAdmin:

    def test_crud(self, admin_client):
        created = admin_client.post("/api/v1/admin/categories", json={"name": "Garden", "slug": "garden"})
        assert created.status_code == 201
        category_id = created.json()["data"]["id"]

        updated = admin_client.put(
            f"/api/v1/admin/categories/{category_id}",
            json={"name": "Garden & Outdoor", "slug": "garden"},
        )
        assert updated.json()["data"]["name"] == "Garden & Outdoor"

        admin_client.delete(f"/api/v1/admin/categories/{category_id}")
        assert admin_client.get("/api/v1/admin/categories").json()["count"] == 2


class TestStockAdmin:

    def test_stock_levels(self, admin_client):
        data = admin_client.get("/api/v1/admin/stock").json()["data"]

        assert data["summary"]["out_of_stock"] == 1
        statuses = {row["slug"]: row["status"] for row in data["products"]}
        assert statuses == {
            "desk-lamp": "Low Stock",
            "wireless-earbuds": "Medium Stock",
            "phone-charger": "Out of Stock",
        }

    def test_update_stock(self, admin_client):
        response = admin_client.patch("/api/v1/admin/stock/prod-charger", json={"stock_quantity": 30})

        assert response.json()["data"]["stock_quantity"] == 30

    def test_negative_stock_rejected(self, admin_client):
        response = admin_client.patch("/api/v1/admin/stock/prod-charger", json={"stock_quantity": -1})

        assert response.status_code == 422

    def test_export(self, admin_client):
        response = admin_client.get("/api/v1/admin/stock/export")

        assert response.status_code == 200
        assert "attachment; filename=stock.xlsx" in response.headers["content-disposition"]
        ws = load_workbook(BytesIO(response.content)).active
        assert ws.max_row == 4

    def test_share_links(self, admin_client):
        data = admin_client.get("/api/v1/admin/stock/prod-lamp/share").json()["data"]

        assert data["facebook_share_url"].startswith("https://www.facebook.com/sharer/sharer.php?u=")
        assert "Desk Lamp" in data["whatsapp_text"]


class TestAnalyticsAndFinance:

    def test_analytics(self, admin_client, placed_order):
        data = admin_client.get("/api/v1/admin/analytics").json()["data"]

        assert len(data["daily"]) == 7
        assert len(data["monthly"]) == 6
        assert data["top_products"][0]["name"] == "Desk Lamp"
        assert data["totals"]["total_orders"] == 1

    def test_finance_today(self, admin_client, placed_order):
        data = admin_client.get("/api/v1/admin/finance", params={"period": "today"}).json()["data"]

        assert data["income"] == 3000.0
        assert data["estimated_expenses"] == 900.0
        assert data["net_profit"] == 2100.0

    def test_finance_invalid_period(self, admin_client):
        response = admin_client.get("/api/v1/admin/finance", params={"period": "year"})

        assert response.status_code == 400


class TestStoreSettingsAdmin:

    def test_defaults_then_update(self, admin_client):
        assert admin_client.get("/api/v1/admin/settings").json()["data"]["store_name"] == "Everyday Essentials Hub"

        payload = admin_client.get("/api/v1/admin/settings").json()["data"]
        payload["store_name"] = "FastDeal"
        assert admin_client.put("/api/v1/admin/settings", json=payload).status_code == 200

        assert admin_client.get("/api/v1/admin/settings").json()["data"]["store_name"] == "FastDeal"
