"""
Order Domain Models

Represents orders placed through checkout and their line items.

Author: FastDeal
Date: 2026-10-19
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List
from datetime import datetime
from decimal import Decimal
from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentMethod(str, Enum):
    CASH_ON_DELIVERY = "cod"
    CARD = "card"
    KOKO = "koko"


class OrderItem(BaseModel):
    """
    Order Item domain model - a cart line frozen at checkout time

    Fields:
        id: Order item ID
        order_id: Parent order ID
        product_id: Product reference (null once the product is deleted)
        product_name: Product name at order time
        quantity: Units ordered
        unit_price: Price per unit at order time
    """

    id: str = Field(..., description="Order item ID")
    order_id: str = Field(..., description="Parent order ID")
    product_id: Optional[str] = Field(None, description="Product ID")
    product_name: str = Field(..., description="Product name at order time")
    quantity: int = Field(..., description="Quantity ordered", ge=1)
    unit_price: Decimal = Field(..., description="Price per unit", ge=0)
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")

    model_config = ConfigDict(from_attributes=True)

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal to float conversion"""
        data = self.model_dump(mode="json")
        data["unit_price"] = float(self.unit_price)
        return data


class Order(BaseModel):
    """
    Order domain model - represents a customer or guest order

    Either user_id is set (signed-in shopper) or the guest_* contact fields are.
    """

    id: str = Field(..., description="Order ID")
    user_id: Optional[str] = Field(None, description="Owning user ID")
    guest_email: Optional[str] = Field(None, description="Guest email")
    guest_name: Optional[str] = Field(None, description="Guest name")
    guest_phone: Optional[str] = Field(None, description="Guest phone")
    status: OrderStatus = Field(OrderStatus.PENDING, description="Order status")
    shipping_address: str = Field(..., description="Street address")
    shipping_city: str = Field(..., description="City")
    total_amount: Decimal = Field(..., description="Order total", ge=0)
    notes: Optional[str] = Field(None, description="Customer notes")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")
    order_items: List[OrderItem] = Field(default_factory=list, description="Line items")

    model_config = ConfigDict(from_attributes=True)

    @property
    def short_id(self) -> str:
        """Reference shown to the shopper after checkout"""
        return self.id[:8]

    @property
    def is_cancelled(self) -> bool:
        return self.status == OrderStatus.CANCELLED

    def to_dict(self) -> dict:
        data = self.model_dump(mode="json")
        data["total_amount"] = float(self.total_amount)
        data["order_items"] = [item.to_dict() for item in self.order_items]
        data["short_id"] = self.short_id
        return data


class CheckoutForm(BaseModel):
    """Checkout form as submitted by the shopper"""
    shipping_address: str = ""
    shipping_city: str = ""
    notes: str = ""
    guest_name: str = ""
    guest_email: str = ""
    guest_phone: str = ""
    payment_method: PaymentMethod = PaymentMethod.CASH_ON_DELIVERY


class OrderStatusUpdate(BaseModel):
    status: OrderStatus
