"""
Category model for product categorization
"""

from sqlalchemy import Column, String, Integer, Text
from sqlalchemy.orm import relationship

from .base import Base, TimestampedModel


class Category(Base, TimestampedModel):
    """Product category, owns its products"""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=False, default="")

    # Products go with the category; the database does the cascade
    products = relationship(
        "Product",
        back_populates="category",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Product.name",
    )
