"""Order models, schema only until checkout owns stock decrement"""

from sqlalchemy import Column, String, Numeric, Integer, Enum, ForeignKey, Index, DateTime
from sqlalchemy.orm import relationship
import enum

from .base import Base, utcnow


class OrderStatus(str, enum.Enum):
    PENDING = "Pending"
    PAID = "Paid"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class Order(Base):
    """Placed order"""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    order_date = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    total_amount = Column(Numeric(18, 2), nullable=False, default=0)
    status = Column(Enum(OrderStatus), default=OrderStatus.PENDING, nullable=False)
    delivery_address = Column(String(500), nullable=False, default="")

    # Relationships
    user = relationship("User", back_populates="orders")
    items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan", passive_deletes=True)


class OrderItem(Base):
    """Individual items within an order"""

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    # Products referenced by an order cannot be deleted
    product_id = Column(Integer, ForeignKey("products.id", ondelete="RESTRICT"), nullable=False)

    quantity = Column(Integer, nullable=False)
    price_at_purchase = Column(Numeric(18, 2), nullable=False)

    # Relationships
    order = relationship("Order", back_populates="items")
    product = relationship("Product")

    __table_args__ = (
        Index("idx_order_items_order_product", "order_id", "product_id"),
    )
