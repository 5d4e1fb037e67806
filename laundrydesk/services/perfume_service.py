"""
Perfume Service - scent add-ons, independent of orders
"""
from sqlalchemy.orm import Session
from typing import List
import logging

from laundrydesk.core.exceptions import NotFoundError, store_guard
from laundrydesk.models import Perfume
from laundrydesk.schemas.master import PerfumeCreate, PerfumeUpdate

logger = logging.getLogger(__name__)

class PerfumeService:
    
    @staticmethod
    def get_perfumes(db: Session) -> List[Perfume]:
        with store_guard(db, "Failed to fetch perfumes"):
            return db.query(Perfume).order_by(Perfume.name.asc(), Perfume.id.asc()).all()
    
    @staticmethod
    def get_perfume_by_id(db: Session, perfume_id: int) -> Perfume:
        with store_guard(db, "Failed to fetch perfume"):
            perfume = db.query(Perfume).filter(Perfume.id == perfume_id).first()
        if not perfume:
            raise NotFoundError("Perfume")
        return perfume
    
    @staticmethod
    def create_perfume(db: Session, data: PerfumeCreate) -> Perfume:
        with store_guard(db, "Failed to create perfume"):
            perfume = Perfume(
                name=data.name,
                description=data.description,
                available=data.available,
            )
            db.add(perfume)
            db.commit()
            db.refresh(perfume)
        
        logger.info(f"Created perfume: {perfume.id} - {perfume.name}")
        return perfume
    
    @staticmethod
    def update_perfume(db: Session, perfume_id: int, data: PerfumeUpdate) -> Perfume:
        with store_guard(db, "Failed to update perfume"):
            perfume = db.query(Perfume).filter(Perfume.id == perfume_id).first()
            if not perfume:
                raise NotFoundError("Perfume")
            
            for field, value in data.model_dump().items():
                setattr(perfume, field, value)
            
            db.commit()
            db.refresh(perfume)
        
        logger.info(f"Updated perfume: {perfume.id} - {perfume.name}")
        return perfume
    
    @staticmethod
    def delete_perfume(db: Session, perfume_id: int) -> None:
        with store_guard(db, "Failed to delete perfume"):
            perfume = db.query(Perfume).filter(Perfume.id == perfume_id).first()
            if not perfume:
                raise NotFoundError("Perfume")
            
            db.delete(perfume)
            db.commit()
        
        logger.info(f"Deleted perfume: {perfume_id}")
