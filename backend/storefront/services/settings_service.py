"""
Store Settings Service

Store profile shown in the back-office settings page, kept in the local
key-value store.
"""
import json
import logging

from pydantic import BaseModel, ValidationError

from storefront.core.config import settings
from storefront.core.local_storage import LocalStorage

logger = logging.getLogger(__name__)


class StoreSettings(BaseModel):
    store_name: str = "Everyday Essentials Hub"
    store_email: str = "info@everydayessentials.lk"
    store_phone: str = "+94 77 123 4567"
    store_address: str = "123 Main Street, Colombo 03, Sri Lanka"
    store_description: str = (
        "Your trusted online store for quality products at the best prices. "
        "Fast delivery across Sri Lanka."
    )
    free_shipping_threshold: float = 5000
    shipping_fee: float = 350
    tax_rate: float = 0
    currency: str = "LKR"


class StoreSettingsService:

    def __init__(self, storage: LocalStorage):
        self.storage = storage

    def get(self) -> StoreSettings:
        raw = self.storage.get_item(settings.STORE_SETTINGS_KEY)
        if raw is None:
            return StoreSettings()

        try:
            return StoreSettings.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Failed to parse store settings: {e}")
            return StoreSettings()

    def save(self, store_settings: StoreSettings) -> StoreSettings:
        self.storage.set_item(settings.STORE_SETTINGS_KEY, store_settings.model_dump_json())
        logger.info("Store settings updated")
        return store_settings
