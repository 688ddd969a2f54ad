"""Services package"""

from .cart_service import CartService, CartSummary

__all__ = ["CartService", "CartSummary"]
