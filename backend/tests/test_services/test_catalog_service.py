"""
Unit tests for catalog browsing helpers and CatalogService
"""
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import Mock

import pytest

from storefront.domain.exceptions import NotFoundError
from storefront.domain.product import Category
from storefront.services.catalog_service import (
    CatalogService,
    SORT_NAME,
    SORT_PRICE_HIGH,
    SORT_PRICE_LOW,
    filter_products,
    format_price,
    slugify,
)


@pytest.fixture
def products(make_product):
    return [
        make_product(id="earbuds", name="Wireless Earbuds", price=Decimal("2500"), featured=True,
                     created_at=datetime(2026, 10, 1, tzinfo=timezone.utc)),
        make_product(id="lamp", name="desk Lamp", description="LED light", price=Decimal("1500"),
                     created_at=datetime(2026, 10, 5, tzinfo=timezone.utc)),
        make_product(id="charger", name="Phone Charger", description=None, price=Decimal("800"), featured=True,
                     created_at=datetime(2026, 9, 20, tzinfo=timezone.utc)),
    ]


class TestSlugify:

    def test_basic(self):
        assert slugify("Wireless Earbuds") == "wireless-earbuds"

    def test_collapses_and_trims_separators(self):
        assert slugify("  Kids' Toys & Games!! ") == "kids-toys-games"

    def test_keeps_digits(self):
        assert slugify("USB-C Cable 2m") == "usb-c-cable-2m"


class TestFormatPrice:

    def test_thousands_and_two_decimals(self):
        assert format_price(Decimal("1234.5")) == "Rs. 1,234.50"

    def test_whole_number(self):
        assert format_price(800) == "Rs. 800.00"


class TestFilterProducts:

    def test_default_sort_is_newest_first(self, products):
        result = filter_products(products)
        assert [p.id for p in result] == ["lamp", "earbuds", "charger"]

    def test_unknown_sort_falls_back_to_newest(self, products):
        result = filter_products(products, sort_by="popularity")
        assert [p.id for p in result] == ["lamp", "earbuds", "charger"]

    def test_search_matches_name_or_description_case_insensitive(self, products):
        assert [p.id for p in filter_products(products, search="LAMP")] == ["lamp"]
        assert [p.id for p in filter_products(products, search="led")] == ["lamp"]

    def test_featured_only(self, products):
        result = filter_products(products, featured_only=True)
        assert {p.id for p in result} == {"earbuds", "charger"}

    def test_price_range_is_inclusive(self, products):
        result = filter_products(products, min_price=Decimal("800"), max_price=Decimal("1500"))
        assert {p.id for p in result} == {"lamp", "charger"}

    def test_price_sorts(self, products):
        assert [p.id for p in filter_products(products, sort_by=SORT_PRICE_LOW)] == ["charger", "lamp", "earbuds"]
        assert [p.id for p in filter_products(products, sort_by=SORT_PRICE_HIGH)] == ["earbuds", "lamp", "charger"]

    def test_name_sort_ignores_case(self, products):
        result = filter_products(products, sort_by=SORT_NAME)
        assert [p.id for p in result] == ["lamp", "charger", "earbuds"]

    def test_input_not_modified(self, products):
        before = [p.id for p in products]
        filter_products(products, sort_by=SORT_PRICE_LOW)
        assert [p.id for p in products] == before


class TestCatalogService:
    """Test CatalogService against mocked repositories"""

    def _service(self, category=None, product=None):
        product_repo = Mock()
        category_repo = Mock()
        category_repo.find_by_slug.return_value = category
        product_repo.find_by_slug.return_value = product
        product_repo.find_by_id.return_value = product
        product_repo.find_active.return_value = []
        return CatalogService(product_repo, category_repo), product_repo

    def test_list_products_by_category_slug(self):
        category = Category(id="c1", name="Home", slug="home")
        service, product_repo = self._service(category=category)

        service.list_products(category_slug="home")

        product_repo.find_active.assert_called_once_with(category_id="c1")

    def test_unknown_category_slug_lists_everything(self):
        service, product_repo = self._service(category=None)

        service.list_products(category_slug="nope")

        product_repo.find_active.assert_called_once_with(category_id=None)

    def test_list_featured_uses_limit(self):
        service, product_repo = self._service()

        service.list_featured()

        product_repo.find_featured.assert_called_once_with(limit=8)

    def test_get_product_not_found(self):
        service, _ = self._service(product=None)

        with pytest.raises(NotFoundError):
            service.get_product("missing")

        with pytest.raises(NotFoundError):
            service.get_product_by_id("missing")
