"""Product model"""

from sqlalchemy import Column, String, Text, Numeric, Integer, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import relationship

from .base import Base, TimestampedModel


class Product(Base, TimestampedModel):
    """Sellable product with a stock count"""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")

    # Pricing
    price = Column(Numeric(18, 2), nullable=False)

    # Media
    image_url = Column(String(500), nullable=False, default="")

    # Inventory
    stock = Column(Integer, nullable=False, default=0)

    # Categorization
    category_id = Column(
        Integer,
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
    )

    # Relationships
    category = relationship("Category", back_populates="products")
    cart_items = relationship(
        "CartItem",
        back_populates="product",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    # Constraints
    __table_args__ = (
        CheckConstraint("price >= 0", name="check_non_negative_price"),
        CheckConstraint("stock >= 0", name="check_non_negative_stock"),
        Index("idx_products_category_name", "category_id", "name"),
    )
