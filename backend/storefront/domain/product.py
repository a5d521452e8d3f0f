"""
Product and Category Domain Models

Mirror the `products` and `categories` rows of the hosted backend.
Prices arrive as numeric strings or numbers and are coerced here.

Author: FastDeal
Date: 2026-10-19
"""
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional, List
from datetime import datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP


class Category(BaseModel):
    """
    Category domain model

    Fields:
        id: Category UUID
        name: Display name (unique, used by the add-product form)
        slug: URL slug used for storefront filtering
        description: Optional description
        image_url: Optional banner image
    """

    id: str = Field(..., description="Category ID")
    name: str = Field(..., description="Category name")
    slug: str = Field(..., description="URL slug")
    description: Optional[str] = Field(None, description="Category description")
    image_url: Optional[str] = Field(None, description="Category image URL")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")


class Product(BaseModel):
    """
    Product domain model - represents a product in the storefront catalog

    Fields:
        id: Product UUID
        category_id: Owning category (optional)
        name: Product name
        slug: URL slug (product detail page)
        description: Product description (optional)
        price: Selling price
        original_price: Pre-discount price (optional, drives the discount badge)
        stock_quantity: Units available
        image_url: Main image
        images: Gallery images
        featured: Shown on the home page
        active: Visible in the storefront
        category: Embedded category row when selected with the join
    """

    id: str = Field(..., description="Product ID")
    category_id: Optional[str] = Field(None, description="Category ID")
    name: str = Field(..., description="Product name")
    slug: str = Field(..., description="URL slug")
    description: Optional[str] = Field(None, description="Product description")
    price: Decimal = Field(..., description="Selling price", ge=0)
    original_price: Optional[Decimal] = Field(None, description="Price before discount", ge=0)
    stock_quantity: int = Field(0, description="Units in stock")
    image_url: Optional[str] = Field(None, description="Main image URL")
    images: List[str] = Field(default_factory=list, description="Gallery image URLs")
    featured: bool = Field(False, description="Featured on the home page")
    active: bool = Field(True, description="Visible in the storefront")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")
    category: Optional[Category] = Field(None, description="Embedded category")

    model_config = ConfigDict(from_attributes=True)

    @field_validator("original_price", mode="before")
    @classmethod
    def _blank_original_price(cls, value):
        # 0, "0", "" and null all mean "no original price"
        if not value:
            return None
        try:
            if Decimal(str(value)) == 0:
                return None
        except InvalidOperation:
            pass
        return value

    @field_validator("images", mode="before")
    @classmethod
    def _images_default(cls, value):
        return value or []

    @property
    def discount_percentage(self) -> int:
        """Rounded percentage off the original price, 0 when there is none"""
        if not self.original_price:
            return 0
        ratio = (self.original_price - self.price) / self.original_price * 100
        return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    @property
    def is_out_of_stock(self) -> bool:
        return self.stock_quantity <= 0

    def to_dict(self) -> dict:
        """
        Convert to dictionary with computed fields

        Decimal prices become floats for JSON compatibility.
        """
        data = self.model_dump(mode="json")

        data["price"] = float(self.price)
        data["original_price"] = float(self.original_price) if self.original_price is not None else None
        data["discount_percentage"] = self.discount_percentage
        data["is_out_of_stock"] = self.is_out_of_stock

        return data


class CategoryInput(BaseModel):
    """Schema for creating or updating a category"""
    name: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None


class ProductCreate(BaseModel):
    """Schema for the add-product form"""
    name: str = ""
    price: Optional[Decimal] = None
    original_price: Optional[Decimal] = None
    category: str = ""
    description: str = ""
    stock_quantity: Optional[int] = 0
    images: List[str] = []


class ProductUpdate(BaseModel):
    """Schema for updating an existing product"""
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0)
    original_price: Optional[Decimal] = Field(None, ge=0)
    stock_quantity: Optional[int] = None
    category_id: Optional[str] = None
    image_url: Optional[str] = None
    featured: Optional[bool] = None
    active: Optional[bool] = None


class StockUpdate(BaseModel):
    stock_quantity: int = Field(..., ge=0)
