"""
Laundry Orders API
"""
from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional

from laundrydesk.core import get_db
from laundrydesk.core.exceptions import parse_id
from laundrydesk.core.responses import success_response
from laundrydesk.schemas import (
    LaundryOrderCreate, LaundryOrderUpdate, LaundryOrderResponse, validate_payload, dump,
)
from laundrydesk.services import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])

@router.get("")
def list_orders(
    status_filter: Optional[str] = Query(None, alias="status"),
    db: Session = Depends(get_db),
):
    """List orders, newest first"""
    orders = OrderService.get_orders(db, status=status_filter)
    data = [dump(LaundryOrderResponse.model_validate(o)) for o in orders]
    return success_response(data=data, count=len(data))

@router.get("/{order_id}")
def get_order(order_id: str, db: Session = Depends(get_db)):
    order = OrderService.get_order_by_id(db, parse_id(order_id, "order"))
    return success_response(data=dump(LaundryOrderResponse.model_validate(order)))

@router.post("", status_code=status.HTTP_201_CREATED)
def create_order(payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    data = validate_payload(LaundryOrderCreate, payload)
    order = OrderService.create_order(db, data)
    return success_response(
        data=dump(LaundryOrderResponse.model_validate(order)),
        message="Laundry order created successfully",
    )

@router.put("/{order_id}")
def update_order(order_id: str, payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    parsed_id = parse_id(order_id, "order")
    data = validate_payload(LaundryOrderUpdate, payload)
    order = OrderService.update_order(db, parsed_id, data)
    return success_response(
        data=dump(LaundryOrderResponse.model_validate(order)),
        message="Order updated successfully",
    )

@router.delete("/{order_id}")
def delete_order(order_id: str, db: Session = Depends(get_db)):
    OrderService.delete_order(db, parse_id(order_id, "order"))
    return success_response(message="Order deleted successfully")
