"""
Perfumes API
"""
from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
from typing import Any, Dict

from laundrydesk.core import get_db
from laundrydesk.core.exceptions import parse_id
from laundrydesk.core.responses import success_response
from laundrydesk.schemas import PerfumeCreate, PerfumeUpdate, PerfumeResponse, validate_payload, dump
from laundrydesk.services import PerfumeService

router = APIRouter(prefix="/perfumes", tags=["perfumes"])

@router.get("")
def list_perfumes(db: Session = Depends(get_db)):
    perfumes = PerfumeService.get_perfumes(db)
    data = [dump(PerfumeResponse.model_validate(p)) for p in perfumes]
    return success_response(data=data, count=len(data))

@router.get("/{perfume_id}")
def get_perfume(perfume_id: str, db: Session = Depends(get_db)):
    perfume = PerfumeService.get_perfume_by_id(db, parse_id(perfume_id, "perfume"))
    return success_response(data=dump(PerfumeResponse.model_validate(perfume)))

@router.post("", status_code=status.HTTP_201_CREATED)
def create_perfume(payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    data = validate_payload(PerfumeCreate, payload)
    perfume = PerfumeService.create_perfume(db, data)
    return success_response(
        data=dump(PerfumeResponse.model_validate(perfume)),
        message="Perfume created successfully",
    )

@router.put("/{perfume_id}")
def update_perfume(perfume_id: str, payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    parsed_id = parse_id(perfume_id, "perfume")
    data = validate_payload(PerfumeUpdate, payload)
    perfume = PerfumeService.update_perfume(db, parsed_id, data)
    return success_response(
        data=dump(PerfumeResponse.model_validate(perfume)),
        message="Perfume updated successfully",
    )

@router.delete("/{perfume_id}")
def delete_perfume(perfume_id: str, db: Session = Depends(get_db)):
    PerfumeService.delete_perfume(db, parse_id(perfume_id, "perfume"))
    return success_response(message="Perfume deleted successfully")
