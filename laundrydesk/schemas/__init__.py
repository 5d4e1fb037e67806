# Pydantic Schemas Package
from .common import CamelModel, validate_payload, validation_issues, dump
from .customer import CustomerCreate, CustomerUpdate, CustomerResponse
from .master import (
    PackageCreate, PackageUpdate, PackageResponse,
    PaymentMethodCreate, PaymentMethodUpdate, PaymentMethodResponse,
    PerfumeCreate, PerfumeUpdate, PerfumeResponse,
)
from .order import (
    LaundryOrderCreate, LaundryOrderUpdate, LaundryOrderSummary, LaundryOrderResponse,
    CustomerWithOrders, CustomerDetail, PackageWithOrders, PackageDetail,
    PaymentMethodWithOrders, PaymentMethodDetail,
)

__all__ = [
    "CamelModel", "validate_payload", "validation_issues", "dump",
    "CustomerCreate", "CustomerUpdate", "CustomerResponse",
    "PackageCreate", "PackageUpdate", "PackageResponse",
    "PaymentMethodCreate", "PaymentMethodUpdate", "PaymentMethodResponse",
    "PerfumeCreate", "PerfumeUpdate", "PerfumeResponse",
    "LaundryOrderCreate", "LaundryOrderUpdate", "LaundryOrderSummary", "LaundryOrderResponse",
    "CustomerWithOrders", "CustomerDetail", "PackageWithOrders", "PackageDetail",
    "PaymentMethodWithOrders", "PaymentMethodDetail",
]
