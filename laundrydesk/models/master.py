"""
Master Tables: Package, PaymentMethod, Perfume
"""
from sqlalchemy import Column, String, Boolean, Numeric, Text
from sqlalchemy.orm import relationship
from laundrydesk.core import Base
from .base import IntegerIdMixin, TimestampMixin

class Package(Base, IntegerIdMixin, TimestampMixin):
    """Service package, priced per kilogram"""
    __tablename__ = "package"
    
    name = Column(String(200), unique=True, nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Numeric(12, 2))  # Per kg; NULL means not priced
    active = Column(Boolean, default=True, nullable=False)
    
    # Relationships
    orders = relationship(
        "LaundryOrder",
        back_populates="package",
        order_by="[LaundryOrder.created_at.desc(), LaundryOrder.id.desc()]",
    )

class PaymentMethod(Base, IntegerIdMixin, TimestampMixin):
    """Payment method (Cash, Card, Wallet, etc.)"""
    __tablename__ = "payment_method"
    
    name = Column(String(100), unique=True, nullable=False)
    description = Column(Text, nullable=False)
    active = Column(Boolean, default=True, nullable=False)
    
    # Relationships
    orders = relationship(
        "LaundryOrder",
        back_populates="payment_method",
        order_by="[LaundryOrder.created_at.desc(), LaundryOrder.id.desc()]",
    )

class Perfume(Base, IntegerIdMixin, TimestampMixin):
    """Scent add-on; not linked to orders"""
    __tablename__ = "perfume"
    
    name = Column(String(100), nullable=False, index=True)
    description = Column(Text)
    available = Column(Boolean, default=True, nullable=False)
