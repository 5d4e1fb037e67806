"""
Customer Models
"""
from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from laundrydesk.core import Base
from .base import IntegerIdMixin, TimestampMixin

class Customer(Base, IntegerIdMixin, TimestampMixin):
    """Laundry customer"""
    __tablename__ = "customer"
    
    name = Column(String(200), nullable=False, index=True)
    email = Column(String(200), unique=True, nullable=False)
    phone = Column(String(30), nullable=False)
    address = Column(Text)
    
    # Relationships
    orders = relationship(
        "LaundryOrder",
        back_populates="customer",
        order_by="[LaundryOrder.created_at.desc(), LaundryOrder.id.desc()]",
    )
