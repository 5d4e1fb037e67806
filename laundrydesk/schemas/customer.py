"""
Customer Schemas
"""
from pydantic import EmailStr, Field
from typing import Optional
from datetime import datetime

from .common import CamelModel

class CustomerCreate(CamelModel):
    name: str = Field(min_length=2, description="Name must be at least 2 characters.")
    email: EmailStr
    phone: str = Field(min_length=10, description="Please enter a valid phone number.")
    address: Optional[str] = None

# PUT replaces the whole row, so update shares the create rules
CustomerUpdate = CustomerCreate

class CustomerResponse(CamelModel):
    id: int
    name: str
    email: str
    phone: str
    address: Optional[str] = None
    created_at: datetime
    updated_at: datetime
