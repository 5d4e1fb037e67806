# Client Services Package
from .base import ApiClient, ApiRequestError, ResourceClient, ServiceResult
from .resources import (
    CustomerClient, PackageClient, PaymentMethodClient, PerfumeClient, LaundryOrderClient,
)

__all__ = [
    "ApiClient", "ApiRequestError", "ResourceClient", "ServiceResult",
    "CustomerClient", "PackageClient", "PaymentMethodClient", "PerfumeClient", "LaundryOrderClient",
]
