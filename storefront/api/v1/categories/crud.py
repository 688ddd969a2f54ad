"""
Category CRUD operations
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy import select, delete
from typing import Optional, List
import logging

from storefront.models import Category
from storefront.schemas.category import CategoryCreate, CategoryUpdate
from storefront.core.exceptions import NotFoundException

logger = logging.getLogger(__name__)


async def get_category(db: AsyncSession, category_id: int) -> Optional[Category]:
    """Get category by ID with its products"""
    stmt = (
        select(Category)
        .options(selectinload(Category.products))
        .where(Category.id == category_id)
        .execution_options(populate_existing=True)
    )
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def category_exists(db: AsyncSession, category_id: int) -> bool:
    """Check if a category with this ID exists"""
    result = await db.execute(select(Category.id).where(Category.id == category_id))
    return result.scalar() is not None


async def list_categories(db: AsyncSession) -> List[Category]:
    """Get all categories with their products"""
    stmt = (
        select(Category)
        .options(selectinload(Category.products))
        .order_by(Category.id)
        .execution_options(populate_existing=True)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def create_category(db: AsyncSession, category: CategoryCreate) -> Category:
    """Create new category"""
    db_category = Category(**category.model_dump())
    db.add(db_category)
    await db.commit()
    logger.info(f"Created category {db_category.id} '{db_category.name}'")

    return await get_category(db, db_category.id)


async def update_category(
    db: AsyncSession,
    category_id: int,
    category_update: CategoryUpdate
) -> Category:
    """Overwrite category name and description"""
    result = await db.execute(select(Category).where(Category.id == category_id))
    category = result.scalar_one_or_none()
    if not category:
        raise NotFoundException(f"Category with ID {category_id} not found")

    category.name = category_update.name
    category.description = category_update.description
    await db.commit()
    logger.info(f"Updated category {category_id}")

    return await get_category(db, category_id)


async def delete_category(db: AsyncSession, category_id: int) -> Category:
    """Delete category, its products and their cart items go with it"""
    result = await db.execute(select(Category).where(Category.id == category_id))
    category = result.scalar_one_or_none()
    if not category:
        raise NotFoundException(f"Category with ID {category_id} not found")

    await db.execute(delete(Category).where(Category.id == category_id))
    await db.commit()
    logger.info(f"Deleted category {category_id} '{category.name}'")

    return category
