"""API v1 routes aggregation"""

from fastapi import APIRouter

from .categories.router import router as categories_router
from .products.router import router as products_router
from .cart.router import router as cart_router

# Create v1 router
api_router = APIRouter()

# Include all routers
api_router.include_router(categories_router, prefix="/categories", tags=["Categories"])
api_router.include_router(products_router, prefix="/products", tags=["Products"])
api_router.include_router(cart_router, prefix="/cart", tags=["Cart"])

# Export router
router = api_router
