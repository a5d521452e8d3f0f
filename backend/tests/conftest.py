"""
Pytest fixtures and configuration for FastDeal Storefront tests

This file provides shared fixtures that can be used across all test modules.
Nothing here talks to a real Supabase project: the client is replaced by
the in-memory FakeSupabase and the local store lives under tmp_path.

Author: FastDeal
Date: 2026-10-19
"""
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from fakes import FakeSupabase

from storefront.api.admin import get_store_settings_service
from storefront.api.auth import get_auth_service
from storefront.api.deps import get_client_storage
from storefront.core.auth import TokenUser, get_current_user, get_current_user_optional
from storefront.core.database import get_supabase
from storefront.core.local_storage import LocalStorage
from storefront.core.rate_limit import rate_limiter
from storefront.domain.product import Category, Product
from storefront.main import app
from storefront.services.auth_service import AuthService
from storefront.services.settings_service import StoreSettingsService

USER_ID = "11111111-aaaa-bbbb-cccc-000000000001"
ADMIN_ID = "22222222-aaaa-bbbb-cccc-000000000002"

ELECTRONICS_ID = "cat-electronics"
HOME_ID = "cat-home"


@pytest.fixture
def sample_tables():
    """
    Backend rows as Supabase returns them: numeric columns as strings,
    timestamps as ISO strings
    """
    return {
        "categories": [
            {"id": ELECTRONICS_ID, "name": "Electronics", "slug": "electronics", "description": None, "image_url": None},
            {"id": HOME_ID, "name": "Home", "slug": "home", "description": "Home & living", "image_url": None},
        ],
        "products": [
            {
                "id": "prod-earbuds",
                "category_id": ELECTRONICS_ID,
                "name": "Wireless Earbuds",
                "slug": "wireless-earbuds",
                "description": "Bluetooth earbuds with charging case",
                "price": "2500.00",
                "original_price": "3000.00",
                "stock_quantity": 25,
                "image_url": "https://cdn.example.com/earbuds.jpg",
                "images": ["https://cdn.example.com/earbuds.jpg"],
                "featured": True,
                "active": True,
                "created_at": "2026-10-01T09:00:00+00:00",
            },
            {
                "id": "prod-lamp",
                "category_id": HOME_ID,
                "name": "Desk Lamp",
                "slug": "desk-lamp",
                "description": "LED lamp with adjustable arm",
                "price": "1500.00",
                "original_price": None,
                "stock_quantity": 5,
                "image_url": None,
                "images": None,
                "featured": False,
                "active": True,
                "created_at": "2026-10-05T09:00:00+00:00",
            },
            {
                "id": "prod-charger",
                "category_id": ELECTRONICS_ID,
                "name": "Phone Charger",
                "slug": "phone-charger",
                "description": None,
                "price": "800.00",
                "original_price": "0",
                "stock_quantity": 0,
                "image_url": None,
                "images": [],
                "featured": True,
                "active": True,
                "created_at": "2026-09-20T09:00:00+00:00",
            },
            {
                "id": "prod-kettle",
                "category_id": HOME_ID,
                "name": "Old Kettle",
                "slug": "old-kettle",
                "description": "Discontinued",
                "price": "1200.00",
                "original_price": None,
                "stock_quantity": 60,
                "image_url": None,
                "images": [],
                "featured": False,
                "active": False,
                "created_at": "2026-08-01T09:00:00+00:00",
            },
        ],
        "orders": [],
        "order_items": [],
        "profiles": [
            {"id": USER_ID, "email": "shopper@example.com", "full_name": "Nimal Perera", "phone": None,
             "address": None, "city": None},
        ],
        "user_roles": [
            {"user_id": ADMIN_ID, "role": "admin"},
        ],
    }


@pytest.fixture
def fake_supabase(sample_tables):
    return FakeSupabase(sample_tables)


@pytest.fixture
def storage(tmp_path):
    """Local store namespace for one client"""
    return LocalStorage(tmp_path / "storage", "test-client")


@pytest.fixture
def electronics():
    return Category(id=ELECTRONICS_ID, name="Electronics", slug="electronics")


@pytest.fixture
def make_product(electronics):
    """Factory for Product domain models"""
    def _make(**overrides):
        data = {
            "id": "prod-1",
            "category_id": electronics.id,
            "name": "Wireless Earbuds",
            "slug": "wireless-earbuds",
            "description": "Bluetooth earbuds",
            "price": Decimal("2500.00"),
            "stock_quantity": 10,
            "created_at": datetime(2026, 10, 1, 9, 0, tzinfo=timezone.utc),
            "category": electronics,
        }
        data.update(overrides)
        return Product(**data)
    return _make


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    rate_limiter.reset()
    yield
    rate_limiter.reset()


# =============================================================================
# API clients
# =============================================================================

@pytest.fixture
def api_client(fake_supabase, storage, tmp_path):
    """
    TestClient for an anonymous shopper

    Supabase, the client's local store and auth are swapped for fakes.
    """
    app.dependency_overrides[get_supabase] = lambda: fake_supabase
    app.dependency_overrides[get_client_storage] = lambda: storage
    app.dependency_overrides[get_store_settings_service] = (
        lambda: StoreSettingsService(LocalStorage(tmp_path / "storage", "store"))
    )
    app.dependency_overrides[get_auth_service] = (
        lambda: AuthService(auth_client_factory=lambda: fake_supabase, admin_client=fake_supabase)
    )

    yield TestClient(app)

    app.dependency_overrides.clear()


def _signed_in_as(user: TokenUser):
    app.dependency_overrides[get_current_user] = lambda: user
    app.dependency_overrides[get_current_user_optional] = lambda: user


@pytest.fixture
def user_client(api_client):
    """TestClient for a signed-in shopper"""
    _signed_in_as(TokenUser(id=USER_ID, email="shopper@example.com", access_token="token-user"))
    return api_client


@pytest.fixture
def admin_client(api_client):
    """TestClient for a user holding the admin role"""
    _signed_in_as(TokenUser(id=ADMIN_ID, email="admin@example.com", access_token="token-admin"))
    return api_client
