"""
Payment Method Service
"""
from sqlalchemy.orm import Session, selectinload
from typing import List
import logging

from laundrydesk.core.exceptions import (
    ConflictError, DependencyConflictError, NotFoundError, store_guard,
)
from laundrydesk.models import PaymentMethod, LaundryOrder
from laundrydesk.schemas.master import PaymentMethodCreate, PaymentMethodUpdate

logger = logging.getLogger(__name__)

NAME_EXISTS = "Payment method with this name already exists"
NAME_TAKEN = "Payment method name is already taken by another method"

class PaymentMethodService:
    
    @staticmethod
    def get_payment_methods(db: Session) -> List[PaymentMethod]:
        with store_guard(db, "Failed to fetch payment methods"):
            return db.query(PaymentMethod)\
                .options(selectinload(PaymentMethod.orders))\
                .order_by(PaymentMethod.name.asc(), PaymentMethod.id.asc())\
                .all()
    
    @staticmethod
    def get_payment_method_by_id(db: Session, payment_method_id: int) -> PaymentMethod:
        with store_guard(db, "Failed to fetch payment method"):
            method = db.query(PaymentMethod)\
                .options(selectinload(PaymentMethod.orders).selectinload(LaundryOrder.customer))\
                .filter(PaymentMethod.id == payment_method_id)\
                .first()
        if not method:
            raise NotFoundError("Payment method")
        return method
    
    @staticmethod
    def create_payment_method(db: Session, data: PaymentMethodCreate) -> PaymentMethod:
        with store_guard(db, "Failed to create payment method", conflict_message=NAME_EXISTS):
            existing = db.query(PaymentMethod).filter(PaymentMethod.name == data.name).first()
            if existing:
                logger.warning(f"Rejected payment method create, name exists: {data.name}")
                raise ConflictError(NAME_EXISTS)
            
            method = PaymentMethod(
                name=data.name,
                description=data.description,
                active=data.active,
            )
            db.add(method)
            db.commit()
            db.refresh(method)
        
        logger.info(f"Created payment method: {method.id} - {method.name}")
        return method
    
    @staticmethod
    def update_payment_method(db: Session, payment_method_id: int, data: PaymentMethodUpdate) -> PaymentMethod:
        with store_guard(db, "Failed to update payment method", conflict_message=NAME_TAKEN):
            method = db.query(PaymentMethod).filter(PaymentMethod.id == payment_method_id).first()
            if not method:
                raise NotFoundError("Payment method")
            
            if data.name != method.name:
                taken = db.query(PaymentMethod).filter(
                    PaymentMethod.name == data.name,
                    PaymentMethod.id != payment_method_id,
                ).first()
                if taken:
                    logger.warning(f"Rejected payment method {payment_method_id} update, name taken: {data.name}")
                    raise ConflictError(NAME_TAKEN)
            
            for field, value in data.model_dump().items():
                setattr(method, field, value)
            
            db.commit()
            db.refresh(method)
        
        logger.info(f"Updated payment method: {method.id} - {method.name}")
        return method
    
    @staticmethod
    def delete_payment_method(db: Session, payment_method_id: int) -> None:
        """Delete payment method; refused while any order references it"""
        with store_guard(db, "Failed to delete payment method"):
            method = db.query(PaymentMethod).filter(PaymentMethod.id == payment_method_id).first()
            if not method:
                raise NotFoundError("Payment method")
            
            order_count = db.query(LaundryOrder)\
                .filter(LaundryOrder.payment_method_id == payment_method_id)\
                .count()
            if order_count > 0:
                logger.warning(f"Refused to delete payment method {payment_method_id}: {order_count} orders")
                raise DependencyConflictError(
                    "Cannot delete payment method with existing orders. Please delete or reassign orders first."
                )
            
            db.delete(method)
            db.commit()
        
        logger.info(f"Deleted payment method: {payment_method_id}")
