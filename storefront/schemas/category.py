"""
Category schemas for request/response validation
"""

from pydantic import Field, field_validator
from typing import List
from datetime import datetime

from .base import BaseSchema


class CategoryBase(BaseSchema):
    """Base schema for categories"""
    name: str = Field(..., min_length=1, max_length=100, description="Category name")
    description: str = Field(default="", max_length=1000, description="Category description")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Category name must not be blank')
        return v


class CategoryCreate(CategoryBase):
    """Schema for creating category"""
    pass


class CategoryUpdate(CategoryBase):
    """Schema for updating category, name and description are overwritten"""
    pass


class CategorySummary(BaseSchema):
    """Category without its products"""
    id: int
    name: str
    description: str


class CategoryResponse(CategorySummary):
    """Schema for category response"""
    created_at: datetime
    products: List["ProductSummary"] = Field(default=[], description="Products in this category")
