"""Products API router"""

from fastapi import APIRouter, Body, Depends, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from storefront.api.params import PathId
from storefront.core.database import get_db
from storefront.core.exceptions import NotFoundException
from storefront.schemas.base import INT_MAX, INT_MIN, MessageResponse
from storefront.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    StockUpdateResponse,
)
from .crud import ProductCRUD

router = APIRouter()


@router.get("", response_model=List[ProductResponse])
async def get_products(db: AsyncSession = Depends(get_db)):
    """Get all products sorted by name"""
    return await ProductCRUD.get_multi(db)


@router.get("/search", response_model=List[ProductResponse])
async def search_products(
    query: Optional[str] = Query(None, description="Text to find in name or description"),
    db: AsyncSession = Depends(get_db)
):
    """Search products, an empty query lists everything"""
    return await ProductCRUD.search(db, query)


@router.get("/category/{category_id}", response_model=List[ProductResponse])
async def get_products_by_category(
    category_id: PathId,
    db: AsyncSession = Depends(get_db)
):
    """Get products of one category"""
    return await ProductCRUD.get_by_category(db, category_id)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: PathId,
    db: AsyncSession = Depends(get_db)
):
    """Get product by ID"""
    product = await ProductCRUD.get_by_id(db, product_id)
    if not product:
        raise NotFoundException(f"Product with ID {product_id} not found")
    return product


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_in: ProductCreate,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db)
):
    """Create a product in an existing category"""
    product = await ProductCRUD.create(db, product_in)
    response.headers["Location"] = str(request.url_for("get_product", product_id=product.id))
    return product


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: PathId,
    product_in: ProductUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Overwrite all product fields"""
    return await ProductCRUD.update(db, product_id, product_in)


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: PathId,
    db: AsyncSession = Depends(get_db)
):
    """Delete product"""
    product = await ProductCRUD.delete(db, product_id)
    return MessageResponse(message=f"Product '{product.name}' deleted successfully")


@router.patch("/{product_id}/stock", response_model=StockUpdateResponse)
async def update_stock(
    product_id: PathId,
    new_stock: int = Body(..., ge=INT_MIN, le=INT_MAX, description="New stock count"),
    db: AsyncSession = Depends(get_db)
):
    """Overwrite the stock count, the body is a bare integer"""
    product = await ProductCRUD.set_stock(db, product_id, new_stock)
    return StockUpdateResponse(product_id=product.id, new_stock=product.stock)
