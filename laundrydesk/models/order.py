"""
Laundry Order Models
"""
import enum
from sqlalchemy import Column, String, Numeric, Integer, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from laundrydesk.core import Base
from .base import IntegerIdMixin, TimestampMixin, utc_now

class OrderStatus(str, enum.Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"

class PaymentStatus(str, enum.Enum):
    PENDING = "Pending"
    PAID = "Paid"

class LaundryOrder(Base, IntegerIdMixin, TimestampMixin):
    """Laundry order; total_amount is derived from package price and weight"""
    __tablename__ = "laundry_order"
    
    customer_id = Column(Integer, ForeignKey("customer.id"), nullable=False, index=True)
    package_id = Column(Integer, ForeignKey("package.id"), nullable=False, index=True)
    payment_method_id = Column(Integer, ForeignKey("payment_method.id"), index=True)
    
    weight = Column(Numeric(10, 2), nullable=False)  # kg
    status = Column(String(20), default=OrderStatus.PENDING.value, nullable=False, index=True)
    payment_status = Column(String(20), default=PaymentStatus.PENDING.value, nullable=False)
    total_amount = Column(Numeric(14, 2))
    notes = Column(Text)
    order_date = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    
    # Relationships
    customer = relationship("Customer", back_populates="orders")
    package = relationship("Package", back_populates="orders")
    payment_method = relationship("PaymentMethod", back_populates="orders")
