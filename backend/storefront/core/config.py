"""
Centralized application settings
"""
import json
from decimal import Decimal
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Storefront settings, loaded from the environment and .env"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # API Settings
    API_TITLE: str = "FastDeal Storefront API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Storefront and back-office API for FastDeal"
    API_DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Supabase (backend-as-a-service)
    SUPABASE_URL: str = ""
    SUPABASE_ANON_KEY: str = ""
    SUPABASE_SERVICE_ROLE_KEY: str = ""
    SUPABASE_JWT_SECRET: str = ""

    # CORS - comma-separated or JSON array
    ALLOWED_ORIGINS: Optional[str] = "http://localhost:5173,http://localhost:3000"

    # Local key-value store (cart, wishlist, store settings)
    LOCAL_STORAGE_DIR: str = ".storefront_storage"
    CART_STORAGE_KEY: str = "fastdeal-cart"
    WISHLIST_STORAGE_KEY: str = "wishlist"
    STORE_SETTINGS_KEY: str = "store-settings"

    # Storefront behaviour
    PUBLIC_SITE_URL: str = "http://localhost:5173"
    FEATURED_PRODUCTS_LIMIT: int = 8
    LOW_STOCK_THRESHOLD: int = 10
    MEDIUM_STOCK_THRESHOLD: int = 50
    ESTIMATED_EXPENSE_RATIO: Decimal = Decimal("0.30")
    CURRENCY_LABEL: str = "Rs."

    # Requests per minute per client IP on /api/v1/auth
    AUTH_RATE_LIMIT: int = 20

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["http://localhost:5173"]

        # Try JSON parse first (for array format)
        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    @property
    def supabase_key(self) -> str:
        """Service role key when available, anon key otherwise"""
        return self.SUPABASE_SERVICE_ROLE_KEY or self.SUPABASE_ANON_KEY


settings = Settings()
