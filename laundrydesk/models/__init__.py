from .base import TimestampMixin, IntegerIdMixin
from .customer import Customer
from .master import Package, PaymentMethod, Perfume
from .order import LaundryOrder, OrderStatus, PaymentStatus

__all__ = [
    # Base
    "TimestampMixin", "IntegerIdMixin",
    # Customer
    "Customer",
    # Master
    "Package", "PaymentMethod", "Perfume",
    # Order
    "LaundryOrder", "OrderStatus", "PaymentStatus",
]
