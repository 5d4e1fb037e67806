"""
Laundry Order Schemas

Also holds the customer/package/payment method views that embed orders, since
those depend on the order shapes defined here.
"""
from pydantic import Field
from typing import Optional, List
from datetime import datetime
from decimal import Decimal

from laundrydesk.models.order import OrderStatus, PaymentStatus
from .common import CamelModel
from .customer import CustomerResponse
from .master import PackageResponse, PaymentMethodResponse

class LaundryOrderCreate(CamelModel):
    customer_id: int = Field(gt=0)
    package_id: int = Field(gt=0)
    weight: Decimal = Field(gt=0, max_digits=10, decimal_places=2, description="Weight must be greater than 0.")
    status: OrderStatus = OrderStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_method_id: Optional[int] = Field(default=None, gt=0)
    notes: Optional[str] = None
    # totalAmount is derived server-side; any client value is ignored

LaundryOrderUpdate = LaundryOrderCreate

class LaundryOrderSummary(CamelModel):
    id: int
    customer_id: int
    package_id: int
    payment_method_id: Optional[int] = None
    weight: float
    status: OrderStatus
    payment_status: PaymentStatus
    total_amount: Optional[float] = None
    notes: Optional[str] = None
    order_date: datetime
    created_at: datetime
    updated_at: datetime

class LaundryOrderResponse(LaundryOrderSummary):
    customer: Optional[CustomerResponse] = None
    package: Optional[PackageResponse] = None
    payment_method: Optional[PaymentMethodResponse] = None

class OrderWithPackage(LaundryOrderSummary):
    package: Optional[PackageResponse] = None

class OrderWithCustomer(LaundryOrderSummary):
    customer: Optional[CustomerResponse] = None

# ===================== VIEWS EMBEDDING ORDERS =====================

class CustomerWithOrders(CustomerResponse):
    orders: List[LaundryOrderSummary] = []

class CustomerDetail(CustomerResponse):
    orders: List[OrderWithPackage] = []

class PackageWithOrders(PackageResponse):
    orders: List[LaundryOrderSummary] = []

class PackageDetail(PackageResponse):
    orders: List[OrderWithCustomer] = []

class PaymentMethodWithOrders(PaymentMethodResponse):
    orders: List[LaundryOrderSummary] = []

class PaymentMethodDetail(PaymentMethodResponse):
    orders: List[OrderWithCustomer] = []
