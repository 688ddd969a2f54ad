"""
Cart schemas for request/response validation
"""

from pydantic import Field
from typing import List
from datetime import datetime

from .base import BaseSchema, DbInt, Money
from .product import ProductResponse


class AddToCartRequest(BaseSchema):
    """Schema for add to cart request"""
    product_id: DbInt = Field(..., description="Product ID")
    quantity: DbInt = Field(default=1, description="Quantity to add")
    session_id: str = Field(..., min_length=1, max_length=255, description="Client session ID")


class UpdateCartRequest(BaseSchema):
    """Schema for updating cart item"""
    quantity: DbInt = Field(..., description="New quantity")


class CartItemResponse(BaseSchema):
    """Schema for cart item response"""
    id: int
    product_id: int
    quantity: int
    session_id: str
    added_at: datetime
    product: ProductResponse


class CartResponse(BaseSchema):
    """Schema for cart response"""
    items: List[CartItemResponse]
    total_items: int
    total_price: Money
