"""Schemas package initialization"""

from .base import BaseSchema, MessageResponse, Money
from .category import CategoryCreate, CategoryUpdate, CategorySummary, CategoryResponse
from .product import ProductCreate, ProductUpdate, ProductSummary, ProductResponse, StockUpdateResponse
from .cart import AddToCartRequest, UpdateCartRequest, CartItemResponse, CartResponse

# CategoryResponse lists ProductSummary, which is defined after it
CategoryResponse.model_rebuild()

__all__ = [
    "BaseSchema",
    "MessageResponse",
    "Money",
    "CategoryCreate",
    "CategoryUpdate",
    "CategorySummary",
    "CategoryResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductSummary",
    "ProductResponse",
    "StockUpdateResponse",
    "AddToCartRequest",
    "UpdateCartRequest",
    "CartItemResponse",
    "CartResponse",
]
