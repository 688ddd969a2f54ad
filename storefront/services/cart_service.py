"""
Cart service for managing cart operations

Carts are partitioned by an opaque session id supplied by the client. The
product stock count is a ceiling checked on every add or update, it is never
decremented here.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional
import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, and_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from storefront.models.base import utcnow
from storefront.models.cart import CartItem
from storefront.models.product import Product
from storefront.core.exceptions import (
    NotFoundException,
    ConflictException,
    InvalidArgumentException,
    InsufficientStockException,
)

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


@dataclass
class CartSummary:
    """Cart contents with aggregate totals"""
    items: List[CartItem] = field(default_factory=list)
    total_quantity: int = 0
    total_price: Decimal = Decimal("0.00")


class CartService:
    """
    Service for managing cart operations

    With ``lock_rows`` the product and cart rows read during a stock check are
    selected FOR UPDATE, closing the window where two concurrent adds both pass
    the check. Locks are always taken product row first, then cart row.
    Backends without row locks (SQLite) ignore it.
    """

    def __init__(self, db: AsyncSession, lock_rows: bool = False):
        self.db = db
        self.lock_rows = lock_rows

    async def _get_product(self, product_id: int) -> Optional[Product]:
        query = (
            select(Product)
            .where(Product.id == product_id)
            .execution_options(populate_existing=True)
        )
        if self.lock_rows:
            query = query.with_for_update()
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def _get_cart_item(self, query, for_update: bool = True) -> Optional[CartItem]:
        query = query.execution_options(populate_existing=True)
        if self.lock_rows and for_update:
            query = query.with_for_update()
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def _commit(self, action: str) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Cart {action} conflicted with a concurrent change: {e.orig}")
            raise ConflictException("Cart was modified concurrently, please retry") from e

    async def add_to_cart(
        self,
        session_id: str,
        product_id: int,
        quantity: int = 1
    ) -> CartItem:
        """
        Add item to cart or merge the quantity if the product is already there.
        The merged quantity must still fit the stock, otherwise nothing changes.
        """
        if quantity < 1:
            raise InvalidArgumentException("Quantity must be greater than 0")

        product = await self._get_product(product_id)
        if not product:
            raise NotFoundException(f"Product with ID {product_id} not found")

        if quantity > product.stock:
            logger.warning(
                f"Add rejected for session {session_id}: {quantity} x product {product_id}, "
                f"stock {product.stock}"
            )
            raise InsufficientStockException(product.stock)

        existing_item = await self._get_cart_item(
            select(CartItem).where(
                and_(
                    CartItem.session_id == session_id,
                    CartItem.product_id == product_id
                )
            )
        )

        if existing_item:
            merged = existing_item.quantity + quantity
            if merged > product.stock:
                logger.warning(
                    f"Merge rejected for session {session_id}: {existing_item.quantity} + {quantity} "
                    f"x product {product_id}, stock {product.stock}"
                )
                raise InsufficientStockException(product.stock)

            existing_item.quantity = merged
            cart_item = existing_item
        else:
            cart_item = CartItem(
                session_id=session_id,
                product_id=product_id,
                quantity=quantity,
                added_at=utcnow()
            )
            self.db.add(cart_item)

        await self._commit("add")
        logger.info(
            f"Session {session_id}: product {product_id} quantity now {cart_item.quantity}"
        )
        return cart_item

    async def update_quantity(
        self,
        cart_item_id: int,
        quantity: int
    ) -> CartItem:
        """
        Overwrite cart item quantity. Zero or negative is rejected, callers
        remove the item instead.
        """
        item_query = select(CartItem).where(CartItem.id == cart_item_id)
        cart_item = await self._get_cart_item(item_query, for_update=False)
        if not cart_item:
            raise NotFoundException(f"Cart item with ID {cart_item_id} not found")

        if quantity <= 0:
            raise InvalidArgumentException("Quantity must be greater than 0")

        product = await self._get_product(cart_item.product_id)
        if self.lock_rows:
            # Product row first, then cart row, the same order add_to_cart locks in
            cart_item = await self._get_cart_item(item_query)
        if not product or not cart_item:
            raise NotFoundException(f"Cart item with ID {cart_item_id} not found")

        if quantity > product.stock:
            logger.warning(
                f"Update rejected for cart item {cart_item_id}: {quantity}, stock {product.stock}"
            )
            raise InsufficientStockException(product.stock)

        cart_item.quantity = quantity
        await self._commit("update")
        logger.info(f"Cart item {cart_item_id} quantity set to {quantity}")
        return cart_item

    async def remove_from_cart(self, cart_item_id: int) -> None:
        """
        Remove item from cart
        """
        result = await self.db.execute(
            delete(CartItem).where(CartItem.id == cart_item_id)
        )
        if result.rowcount == 0:
            raise NotFoundException(f"Cart item with ID {cart_item_id} not found")

        await self._commit("remove")
        logger.info(f"Removed cart item {cart_item_id}")

    async def clear_cart(self, session_id: str) -> int:
        """
        Clear all items from a session's cart, returns how many were removed
        """
        result = await self.db.execute(
            delete(CartItem).where(CartItem.session_id == session_id)
        )
        await self._commit("clear")
        logger.info(f"Cleared {result.rowcount} items from session {session_id}")
        return result.rowcount

    async def get_cart_items(self, session_id: str) -> List[CartItem]:
        """
        Get all items in a session's cart with product and category loaded
        """
        result = await self.db.execute(
            select(CartItem)
            .options(
                selectinload(CartItem.product).selectinload(Product.category)
            )
            .where(CartItem.session_id == session_id)
            .order_by(CartItem.added_at, CartItem.id)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def get_cart_summary(self, session_id: str) -> CartSummary:
        """
        Cart items plus total quantity and exact decimal total price
        """
        items = await self.get_cart_items(session_id)

        total_quantity = 0
        total_price = Decimal("0")
        for item in items:
            total_quantity += item.quantity
            total_price += Decimal(str(item.product.price)) * item.quantity

        return CartSummary(
            items=items,
            total_quantity=total_quantity,
            total_price=total_price.quantize(CENT)
        )
