"""
Customers API
"""
from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
from typing import Any, Dict

from laundrydesk.core import get_db
from laundrydesk.core.exceptions import parse_id
from laundrydesk.core.responses import success_response
from laundrydesk.schemas import (
    CustomerCreate, CustomerUpdate, CustomerResponse, CustomerWithOrders, CustomerDetail,
    validate_payload, dump,
)
from laundrydesk.services import CustomerService
from .utils import RECENT_ORDERS_LIMIT

router = APIRouter(prefix="/customers", tags=["customers"])

@router.get("")
def list_customers(db: Session = Depends(get_db)):
    """List customers with their latest orders"""
    customers = CustomerService.get_customers(db)
    data = []
    for customer in customers:
        item = CustomerWithOrders.model_validate(customer)
        item.orders = item.orders[:RECENT_ORDERS_LIMIT]
        data.append(dump(item))
    return success_response(data=data, count=len(data))

@router.get("/{customer_id}")
def get_customer(customer_id: str, db: Session = Depends(get_db)):
    """Get customer with all orders"""
    customer = CustomerService.get_customer_by_id(db, parse_id(customer_id, "customer"))
    return success_response(data=dump(CustomerDetail.model_validate(customer)))

@router.post("", status_code=status.HTTP_201_CREATED)
def create_customer(payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    data = validate_payload(CustomerCreate, payload)
    customer = CustomerService.create_customer(db, data)
    return success_response(
        data=dump(CustomerResponse.model_validate(customer)),
        message="Customer created successfully",
    )

@router.put("/{customer_id}")
def update_customer(customer_id: str, payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    parsed_id = parse_id(customer_id, "customer")
    data = validate_payload(CustomerUpdate, payload)
    customer = CustomerService.update_customer(db, parsed_id, data)
    return success_response(
        data=dump(CustomerResponse.model_validate(customer)),
        message="Customer updated successfully",
    )

@router.delete("/{customer_id}")
def delete_customer(customer_id: str, db: Session = Depends(get_db)):
    CustomerService.delete_customer(db, parse_id(customer_id, "customer"))
    return success_response(message="Customer deleted successfully")
