"""
User model
Reserved for a future checkout flow, no endpoint reads or writes it yet
"""

from sqlalchemy import Column, String, Boolean, Integer, Enum
from sqlalchemy.orm import relationship
import enum

from .base import Base, TimestampedModel


class UserRole(str, enum.Enum):
    CUSTOMER = "Customer"
    ADMIN = "Admin"


class User(Base, TimestampedModel):
    """Registered shopper"""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    phone_number = Column(String(20), nullable=True)
    address = Column(String(500), nullable=True)
    role = Column(Enum(UserRole), default=UserRole.CUSTOMER, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    orders = relationship("Order", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
