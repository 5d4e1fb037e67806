"""
Resource Clients - one per entity
"""
from typing import Optional

from laundrydesk.schemas import (
    CustomerCreate, PackageCreate, PaymentMethodCreate, PerfumeCreate, LaundryOrderCreate,
)
from .base import ResourceClient, ServiceResult


class CustomerClient(ResourceClient):
    RESOURCE = "customers"
    SCHEMA = CustomerCreate


class PackageClient(ResourceClient):
    RESOURCE = "packages"
    SCHEMA = PackageCreate

    async def get_active(self) -> ServiceResult:
        """Packages offered for new orders"""
        return await self.api.request("GET", self.RESOURCE, params={"activeOnly": "true"})


class PaymentMethodClient(ResourceClient):
    RESOURCE = "payment-methods"
    SCHEMA = PaymentMethodCreate


class PerfumeClient(ResourceClient):
    RESOURCE = "perfumes"
    SCHEMA = PerfumeCreate


class LaundryOrderClient(ResourceClient):
    RESOURCE = "orders"
    SCHEMA = LaundryOrderCreate

    async def get_all(self, status: Optional[str] = None) -> ServiceResult:
        if status:
            return await self.api.request("GET", self.RESOURCE, params={"status": status})
        return await super().get_all()
