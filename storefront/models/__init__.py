"""Models package initialization"""

from .base import Base
from .category import Category
from .product import Product
from .cart import CartItem
from .user import User, UserRole
from .order import Order, OrderItem, OrderStatus

# Export all models
__all__ = [
    "Base",
    "Category",
    "Product",
    "CartItem",
    "User",
    "UserRole",
    "Order",
    "OrderItem",
    "OrderStatus",
]
