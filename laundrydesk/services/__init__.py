# Services Package
from .customer_service import CustomerService
from .package_service import PackageService
from .payment_method_service import PaymentMethodService
from .perfume_service import PerfumeService
from .order_service import OrderService, calculate_total_amount

__all__ = [
    "CustomerService",
    "PackageService",
    "PaymentMethodService",
    "PerfumeService",
    "OrderService",
    "calculate_total_amount",
]
