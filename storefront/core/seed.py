"""Demo catalog loaded into an empty database"""

from decimal import Decimal
from datetime import datetime, timezone
import logging

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models import Category, Product

logger = logging.getLogger(__name__)

SEED_CREATED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)

DEMO_CATEGORIES = [
    {"name": "Electronics", "description": "Electronic devices and gadgets"},
    {"name": "Clothing", "description": "Fashion and apparel"},
    {"name": "Books", "description": "Books and literature"},
    {"name": "Home & Garden", "description": "Home improvement and gardening"},
]

# Products refer to their category by name
DEMO_PRODUCTS = [
    ("Electronics", "Laptop HP Pavilion", "15.6 inch, Intel i5, 8GB RAM, 256GB SSD", "699.99", "Laptop", 15),
    ("Electronics", "Wireless Mouse", "Ergonomic wireless mouse with USB receiver", "25.99", "Mouse", 50),
    ("Electronics", "Smartphone Samsung Galaxy", "6.5 inch display, 128GB storage, 5G enabled", "599.99", "Phone", 30),
    ("Clothing", "Men's T-Shirt", "100% cotton, available in multiple colors", "19.99", "TShirt", 100),
    ("Clothing", "Women's Jeans", "Slim fit denim jeans", "49.99", "Jeans", 60),
    ("Books", "Clean Code", "A Handbook of Agile Software Craftsmanship", "32.99", "Book", 25),
    ("Books", "The Pragmatic Programmer", "Your Journey to Mastery", "39.99", "Book", 20),
]


async def seed_demo_catalog(db: AsyncSession) -> bool:
    """Insert the demo categories and products if no category exists yet"""
    result = await db.execute(select(func.count(Category.id)))
    if result.scalar():
        logger.info("Catalog already populated, skipping seed data")
        return False

    categories = {}
    for data in DEMO_CATEGORIES:
        category = Category(created_at=SEED_CREATED_AT, **data)
        db.add(category)
        categories[category.name] = category

    for category_name, name, description, price, image_text, stock in DEMO_PRODUCTS:
        db.add(Product(
            name=name,
            description=description,
            price=Decimal(price),
            image_url=f"https://via.placeholder.com/300x300?text={image_text}",
            stock=stock,
            category=categories[category_name],
            created_at=SEED_CREATED_AT,
        ))

    await db.commit()
    logger.info(f"Seeded {len(DEMO_CATEGORIES)} categories and {len(DEMO_PRODUCTS)} products")
    return True
