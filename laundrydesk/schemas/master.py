"""
Package, Payment Method and Perfume Schemas
"""
from pydantic import Field
from typing import Optional
from datetime import datetime
from decimal import Decimal

from .common import CamelModel

# ===================== PACKAGE =====================

class PackageCreate(CamelModel):
    name: str = Field(min_length=3, description="Package name must be at least 3 characters.")
    description: str = Field(min_length=10, description="Description must be at least 10 characters.")
    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    active: bool = True

PackageUpdate = PackageCreate

class PackageResponse(CamelModel):
    id: int
    name: str
    description: str
    price: Optional[float] = None
    active: bool
    created_at: datetime
    updated_at: datetime

# ===================== PAYMENT METHOD =====================

class PaymentMethodCreate(CamelModel):
    name: str = Field(min_length=3, description="Method name must be at least 3 characters.")
    description: str = Field(min_length=5, description="Description must be at least 5 characters.")
    active: bool = True

PaymentMethodUpdate = PaymentMethodCreate

class PaymentMethodResponse(CamelModel):
    id: int
    name: str
    description: str
    active: bool
    created_at: datetime
    updated_at: datetime

# ===================== PERFUME =====================

class PerfumeCreate(CamelModel):
    name: str = Field(min_length=2, description="Perfume name must be at least 2 characters.")
    description: Optional[str] = None
    available: bool = True

PerfumeUpdate = PerfumeCreate

class PerfumeResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    available: bool
    created_at: datetime
    updated_at: datetime
