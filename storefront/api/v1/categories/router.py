"""
Category API router
"""

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from storefront.api.params import PathId
from storefront.core.database import get_db
from storefront.core.exceptions import NotFoundException
from storefront.schemas.base import MessageResponse
from storefront.schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse
from . import crud

router = APIRouter()


@router.get("", response_model=List[CategoryResponse])
async def get_categories(db: AsyncSession = Depends(get_db)):
    """Get all categories with their products"""
    return await crud.list_categories(db)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: PathId,
    db: AsyncSession = Depends(get_db)
):
    """Get category by ID with its products"""
    category = await crud.get_category(db, category_id)
    if not category:
        raise NotFoundException(f"Category with ID {category_id} not found")
    return category


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    category_in: CategoryCreate,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db)
):
    """Create a category"""
    category = await crud.create_category(db, category_in)
    response.headers["Location"] = str(request.url_for("get_category", category_id=category.id))
    return category


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: PathId,
    category_in: CategoryUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Update category name and description"""
    return await crud.update_category(db, category_id, category_in)


@router.delete("/{category_id}", response_model=MessageResponse)
async def delete_category(
    category_id: PathId,
    db: AsyncSession = Depends(get_db)
):
    """Delete category together with its products"""
    category = await crud.delete_category(db, category_id)
    return MessageResponse(message=f"Category '{category.name}' deleted successfully")
