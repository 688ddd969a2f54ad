"""
Shared fixtures

Every test gets its own SQLite file so foreign keys, cascades and unique
constraints behave like they do in a deployed database.
"""
from decimal import Decimal
from types import SimpleNamespace

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from storefront.core.database import build_engine, build_session_factory, get_db
from storefront.main import app
from storefront.models import Base, Category, Product


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return build_session_factory(engine)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def catalog(db):
    """
    Three categories (one empty) and five products.

    Name order: Clean Code, Men's T-Shirt, Signed First Edition,
    The Pragmatic Programmer, Women's Jeans.
    """
    books = Category(name="Books", description="Books and literature")
    clothing = Category(name="Clothing", description="Fashion and apparel")
    garden = Category(name="Home & Garden", description="Home improvement and gardening")
    db.add_all([books, clothing, garden])
    await db.flush()

    products = {
        "tshirt": Product(name="Men's T-Shirt", description="100% cotton, available in multiple colors",
                          price=Decimal("19.99"), stock=100, category_id=clothing.id),
        "jeans": Product(name="Women's Jeans", description="Slim fit denim jeans",
                         price=Decimal("49.99"), stock=60, category_id=clothing.id),
        "clean_code": Product(name="Clean Code", description="A Handbook of Agile Software Craftsmanship",
                              price=Decimal("32.99"), stock=25, category_id=books.id),
        "pragmatic": Product(name="The Pragmatic Programmer", description="Your Journey to Mastery",
                             price=Decimal("39.99"), stock=20, category_id=books.id),
        "rare": Product(name="Signed First Edition", description="Collector's copy",
                        price=Decimal("120.00"), stock=3, category_id=books.id),
    }
    db.add_all(products.values())
    await db.commit()

    return SimpleNamespace(
        books=books.id,
        clothing=clothing.id,
        garden=garden.id,
        **{key: product.id for key, product in products.items()},
    )


@pytest_asyncio.fixture
async def client(session_factory):
    """HTTP client bound to the app, using the per-test database"""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
