"""Cart router, carts are keyed by the client's session id"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.config import settings
from storefront.api.params import PathId
from storefront.core.database import get_db
from storefront.schemas.base import MessageResponse
from storefront.schemas.cart import AddToCartRequest, UpdateCartRequest, CartResponse
from storefront.services.cart_service import CartService

router = APIRouter()


def get_cart_service(db: AsyncSession = Depends(get_db)) -> CartService:
    return CartService(db, lock_rows=settings.CART_LOCK_ROWS)


@router.get("/{session_id}", response_model=CartResponse)
async def get_cart(
    session_id: str,
    service: CartService = Depends(get_cart_service)
):
    """Get cart items and totals for a session"""
    summary = await service.get_cart_summary(session_id)
    return {
        "items": summary.items,
        "total_items": summary.total_quantity,
        "total_price": summary.total_price,
    }


@router.post("", response_model=MessageResponse)
async def add_to_cart(
    item_data: AddToCartRequest,
    service: CartService = Depends(get_cart_service)
):
    """Add item to cart"""
    await service.add_to_cart(
        session_id=item_data.session_id,
        product_id=item_data.product_id,
        quantity=item_data.quantity
    )
    return MessageResponse(message="Product added to cart successfully")


@router.put("/{item_id}", response_model=MessageResponse)
async def update_cart_item(
    item_id: PathId,
    update_data: UpdateCartRequest,
    service: CartService = Depends(get_cart_service)
):
    """Update cart item quantity"""
    await service.update_quantity(item_id, update_data.quantity)
    return MessageResponse(message="Cart updated successfully")


@router.delete("/clear/{session_id}", response_model=MessageResponse)
async def clear_cart(
    session_id: str,
    service: CartService = Depends(get_cart_service)
):
    """Remove every item of a session"""
    await service.clear_cart(session_id)
    return MessageResponse(message="Cart cleared successfully")


@router.delete("/{item_id}", response_model=MessageResponse)
async def remove_from_cart(
    item_id: PathId,
    service: CartService = Depends(get_cart_service)
):
    """Remove one item from cart"""
    await service.remove_from_cart(item_id)
    return MessageResponse(message="Item removed from cart successfully")
