"""
Product CRUD operations
Database operations for products
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload
import logging

from storefront.models import Product
from storefront.schemas.product import ProductCreate, ProductUpdate
from storefront.core.exceptions import (
    NotFoundException,
    ConflictException,
    InvalidArgumentException,
    ReferentialViolationException,
)
from storefront.api.v1.categories.crud import category_exists

logger = logging.getLogger(__name__)


class ProductCRUD:
    """Product CRUD operations"""

    @staticmethod
    def _base_query():
        return (
            select(Product)
            .options(selectinload(Product.category))
            .execution_options(populate_existing=True)
        )

    @staticmethod
    async def get_by_id(
        db: AsyncSession,
        product_id: int
    ) -> Optional[Product]:
        """Get product by ID with its category"""
        query = ProductCRUD._base_query().where(Product.id == product_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    @staticmethod
    async def get_multi(db: AsyncSession) -> List[Product]:
        """Get all products sorted by name"""
        query = ProductCRUD._base_query().order_by(Product.name, Product.id)
        result = await db.execute(query)
        return list(result.scalars().all())

    @staticmethod
    async def get_by_category(
        db: AsyncSession,
        category_id: int
    ) -> List[Product]:
        """Get products of one category sorted by name, empty if none"""
        query = (
            ProductCRUD._base_query()
            .where(Product.category_id == category_id)
            .order_by(Product.name, Product.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    @staticmethod
    async def search(
        db: AsyncSession,
        query_text: Optional[str]
    ) -> List[Product]:
        """
        Case-insensitive substring search on name or description.
        A blank query returns every product. On SQLite lower() only folds
        ASCII letters, so accented characters must match case exactly there.
        """
        if query_text is None or not query_text.strip():
            return await ProductCRUD.get_multi(db)

        query = (
            ProductCRUD._base_query()
            .where(
                or_(
                    Product.name.icontains(query_text, autoescape=True),
                    Product.description.icontains(query_text, autoescape=True)
                )
            )
            .order_by(Product.name, Product.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    @staticmethod
    async def create(
        db: AsyncSession,
        product_in: ProductCreate
    ) -> Product:
        """Create new product in an existing category"""
        if not await category_exists(db, product_in.category_id):
            raise ReferentialViolationException(
                f"Category with ID {product_in.category_id} does not exist"
            )

        product = Product(**product_in.model_dump())
        db.add(product)
        await db.commit()
        logger.info(f"Created product {product.id} '{product.name}'")

        return await ProductCRUD.get_by_id(db, product.id)

    @staticmethod
    async def update(
        db: AsyncSession,
        product_id: int,
        product_in: ProductUpdate
    ) -> Product:
        """Overwrite every editable product field"""
        result = await db.execute(select(Product).where(Product.id == product_id))
        product = result.scalar_one_or_none()
        if not product:
            raise NotFoundException(f"Product with ID {product_id} not found")

        if not await category_exists(db, product_in.category_id):
            raise ReferentialViolationException(
                f"Category with ID {product_in.category_id} does not exist"
            )

        for key, value in product_in.model_dump().items():
            setattr(product, key, value)

        await db.commit()
        logger.info(f"Updated product {product_id}")

        return await ProductCRUD.get_by_id(db, product_id)

    @staticmethod
    async def delete(
        db: AsyncSession,
        product_id: int
    ) -> Product:
        """Delete product, cart items referencing it go with it"""
        result = await db.execute(select(Product).where(Product.id == product_id))
        product = result.scalar_one_or_none()
        if not product:
            raise NotFoundException(f"Product with ID {product_id} not found")

        try:
            await db.execute(delete(Product).where(Product.id == product_id))
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            logger.warning(f"Product {product_id} is referenced by an order: {e.orig}")
            raise ConflictException(f"Product with ID {product_id} is part of an order") from e

        logger.info(f"Deleted product {product_id} '{product.name}'")
        return product

    @staticmethod
    async def set_stock(
        db: AsyncSession,
        product_id: int,
        new_stock: int
    ) -> Product:
        """Overwrite the stock count"""
        result = await db.execute(select(Product).where(Product.id == product_id))
        product = result.scalar_one_or_none()
        if not product:
            raise NotFoundException(f"Product with ID {product_id} not found")

        if new_stock < 0:
            raise InvalidArgumentException("Stock cannot be negative")

        product.stock = new_stock
        await db.commit()
        logger.info(f"Stock of product {product_id} set to {new_stock}")

        return product
