"""
Packages API
"""
from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Any, Dict

from laundrydesk.core import get_db
from laundrydesk.core.exceptions import parse_id
from laundrydesk.core.responses import success_response
from laundrydesk.schemas import (
    PackageCreate, PackageUpdate, PackageResponse, PackageWithOrders, PackageDetail,
    validate_payload, dump,
)
from laundrydesk.services import PackageService
from .utils import RECENT_ORDERS_LIMIT

router = APIRouter(prefix="/packages", tags=["packages"])

@router.get("")
def list_packages(
    active_only: bool = Query(False, alias="activeOnly"),
    db: Session = Depends(get_db),
):
    """List packages with their latest orders"""
    packages = PackageService.get_packages(db, active_only=active_only)
    data = []
    for package in packages:
        item = PackageWithOrders.model_validate(package)
        item.orders = item.orders[:RECENT_ORDERS_LIMIT]
        data.append(dump(item))
    return success_response(data=data, count=len(data))

@router.get("/{package_id}")
def get_package(package_id: str, db: Session = Depends(get_db)):
    package = PackageService.get_package_by_id(db, parse_id(package_id, "package"))
    return success_response(data=dump(PackageDetail.model_validate(package)))

@router.post("", status_code=status.HTTP_201_CREATED)
def create_package(payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    data = validate_payload(PackageCreate, payload)
    package = PackageService.create_package(db, data)
    return success_response(
        data=dump(PackageResponse.model_validate(package)),
        message="Package created successfully",
    )

@router.put("/{package_id}")
def update_package(package_id: str, payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    parsed_id = parse_id(package_id, "package")
    data = validate_payload(PackageUpdate, payload)
    package = PackageService.update_package(db, parsed_id, data)
    return success_response(
        data=dump(PackageResponse.model_validate(package)),
        message="Package updated successfully",
    )

@router.delete("/{package_id}")
def delete_package(package_id: str, db: Session = Depends(get_db)):
    PackageService.delete_package(db, parse_id(package_id, "package"))
    return success_response(message="Package deleted successfully")
