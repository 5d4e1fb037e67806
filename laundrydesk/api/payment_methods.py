"""
Payment Methods API
"""
from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
from typing import Any, Dict

from laundrydesk.core import get_db
from laundrydesk.core.exceptions import parse_id
from laundrydesk.core.responses import success_response
from laundrydesk.schemas import (
    PaymentMethodCreate, PaymentMethodUpdate, PaymentMethodResponse,
    PaymentMethodWithOrders, PaymentMethodDetail,
    validate_payload, dump,
)
from laundrydesk.services import PaymentMethodService
from .utils import RECENT_ORDERS_LIMIT

router = APIRouter(prefix="/payment-methods", tags=["payment-methods"])

@router.get("")
def list_payment_methods(db: Session = Depends(get_db)):
    methods = PaymentMethodService.get_payment_methods(db)
    data = []
    for method in methods:
        item = PaymentMethodWithOrders.model_validate(method)
        item.orders = item.orders[:RECENT_ORDERS_LIMIT]
        data.append(dump(item))
    return success_response(data=data, count=len(data))

@router.get("/{payment_method_id}")
def get_payment_method(payment_method_id: str, db: Session = Depends(get_db)):
    method = PaymentMethodService.get_payment_method_by_id(db, parse_id(payment_method_id, "payment method"))
    return success_response(data=dump(PaymentMethodDetail.model_validate(method)))

@router.post("", status_code=status.HTTP_201_CREATED)
def create_payment_method(payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    data = validate_payload(PaymentMethodCreate, payload)
    method = PaymentMethodService.create_payment_method(db, data)
    return success_response(
        data=dump(PaymentMethodResponse.model_validate(method)),
        message="Payment method created successfully",
    )

@router.put("/{payment_method_id}")
def update_payment_method(payment_method_id: str, payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    parsed_id = parse_id(payment_method_id, "payment method")
    data = validate_payload(PaymentMethodUpdate, payload)
    method = PaymentMethodService.update_payment_method(db, parsed_id, data)
    return success_response(
        data=dump(PaymentMethodResponse.model_validate(method)),
        message="Payment method updated successfully",
    )

@router.delete("/{payment_method_id}")
def delete_payment_method(payment_method_id: str, db: Session = Depends(get_db)):
    PaymentMethodService.delete_payment_method(db, parse_id(payment_method_id, "payment method"))
    return success_response(message="Payment method deleted successfully")
