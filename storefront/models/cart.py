"""
Shopping cart model
Cart rows are partitioned by an opaque client session id
"""

from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Index, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship

from .base import Base, utcnow


class CartItem(Base):
    """Shopping cart items"""

    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Session
    session_id = Column(String(255), nullable=False)

    # Product
    product_id = Column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
    )

    quantity = Column(Integer, nullable=False, default=1)
    added_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Relationships
    product = relationship("Product", back_populates="cart_items")

    # Constraints
    __table_args__ = (
        UniqueConstraint("session_id", "product_id", name="uq_session_product"),
        CheckConstraint("quantity > 0", name="check_positive_cart_quantity"),
        Index("idx_cart_items_session", "session_id"),
    )
