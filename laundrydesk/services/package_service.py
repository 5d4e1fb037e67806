"""
Package Service - Business Logic for Service Packages
"""
from sqlalchemy.orm import Session, selectinload
from typing import List, Optional
from decimal import Decimal
import logging

from laundrydesk.core.exceptions import (
    ConflictError, DependencyConflictError, NotFoundError, store_guard,
)
from laundrydesk.models import Package, LaundryOrder
from laundrydesk.schemas.master import PackageCreate, PackageUpdate

logger = logging.getLogger(__name__)

NAME_EXISTS = "Package with this name already exists"
NAME_TAKEN = "Package name is already taken by another package"

class PackageService:
    """Package business logic"""
    
    @staticmethod
    def get_packages(db: Session, active_only: bool = False) -> List[Package]:
        """Get packages ordered by name, with their orders loaded"""
        with store_guard(db, "Failed to fetch packages"):
            query = db.query(Package).options(selectinload(Package.orders))
            if active_only:
                query = query.filter(Package.active == True)
            return query.order_by(Package.name.asc(), Package.id.asc()).all()
    
    @staticmethod
    def get_package_by_id(db: Session, package_id: int) -> Package:
        """Get package by ID, with orders and their customers"""
        with store_guard(db, "Failed to fetch package"):
            package = db.query(Package)\
                .options(selectinload(Package.orders).selectinload(LaundryOrder.customer))\
                .filter(Package.id == package_id)\
                .first()
        if not package:
            raise NotFoundError("Package")
        return package
    
    @staticmethod
    def create_package(db: Session, data: PackageCreate) -> Package:
        """Create new package; name must be unique"""
        with store_guard(db, "Failed to create package", conflict_message=NAME_EXISTS):
            existing = db.query(Package).filter(Package.name == data.name).first()
            if existing:
                logger.warning(f"Rejected package create, name exists: {data.name}")
                raise ConflictError(NAME_EXISTS)
            
            package = Package(
                name=data.name,
                description=data.description,
                price=_normalize_price(data.price),
                active=data.active,
            )
            db.add(package)
            db.commit()
            db.refresh(package)
        
        logger.info(f"Created package: {package.id} - {package.name}")
        return package
    
    @staticmethod
    def update_package(db: Session, package_id: int, data: PackageUpdate) -> Package:
        """Update package; a changed name is re-checked against other packages"""
        with store_guard(db, "Failed to update package", conflict_message=NAME_TAKEN):
            package = db.query(Package).filter(Package.id == package_id).first()
            if not package:
                raise NotFoundError("Package")
            
            if data.name != package.name:
                taken = db.query(Package).filter(
                    Package.name == data.name,
                    Package.id != package_id,
                ).first()
                if taken:
                    logger.warning(f"Rejected package {package_id} update, name taken: {data.name}")
                    raise ConflictError(NAME_TAKEN)
            
            package.name = data.name
            package.description = data.description
            package.price = _normalize_price(data.price)
            package.active = data.active
            
            db.commit()
            db.refresh(package)
        
        # Existing order totals are not repriced
        logger.info(f"Updated package: {package.id} - {package.name}")
        return package
    
    @staticmethod
    def delete_package(db: Session, package_id: int) -> None:
        """Delete package; refused while any order references it"""
        with store_guard(db, "Failed to delete package"):
            package = db.query(Package).filter(Package.id == package_id).first()
            if not package:
                raise NotFoundError("Package")
            
            order_count = db.query(LaundryOrder).filter(LaundryOrder.package_id == package_id).count()
            if order_count > 0:
                logger.warning(f"Refused to delete package {package_id}: {order_count} orders")
                raise DependencyConflictError(
                    "Cannot delete package with existing orders. Please delete or reassign orders first."
                )
            
            db.delete(package)
            db.commit()
        
        logger.info(f"Deleted package: {package_id}")


def _normalize_price(price: Optional[Decimal]) -> Optional[Decimal]:
    # A zero price means "not priced"
    return price if price else None
