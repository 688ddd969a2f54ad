"""Product Pydantic schemas"""

from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP

from .base import BaseSchema, DbInt, Money
from .category import CategorySummary


class ProductBase(BaseSchema):
    """Base product schema"""
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(default="", max_length=2000)
    price: Decimal = Field(..., ge=0)
    image_url: str = Field(default="", max_length=500)
    stock: DbInt = Field(default=0, ge=0)
    category_id: DbInt

    @field_validator('price')
    @classmethod
    def validate_price(cls, v):
        # Prices carry exactly two decimal places
        return v.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


class ProductCreate(ProductBase):
    """Schema for creating a product"""
    pass


class ProductUpdate(ProductBase):
    """Schema for updating a product, every field is overwritten"""
    pass


class ProductSummary(BaseSchema):
    """Product without its category"""
    id: int
    name: str
    description: str
    price: Money
    image_url: str
    stock: int
    category_id: int
    created_at: datetime


class ProductResponse(ProductSummary):
    """Product with its category attached"""
    category: Optional[CategorySummary] = None


class StockUpdateResponse(BaseSchema):
    product_id: int
    new_stock: int
