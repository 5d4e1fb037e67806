"""
Customer Service - Business Logic for Customers
"""
from sqlalchemy.orm import Session, selectinload
from typing import List
import logging

from laundrydesk.core.exceptions import (
    ConflictError, DependencyConflictError, NotFoundError, store_guard,
)
from laundrydesk.models import Customer, LaundryOrder
from laundrydesk.schemas.customer import CustomerCreate, CustomerUpdate

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Customer with this email already exists"

class CustomerService:
    """Customer business logic"""
    
    @staticmethod
    def get_customers(db: Session) -> List[Customer]:
        """Get all customers ordered by name, with their orders loaded"""
        with store_guard(db, "Failed to fetch customers"):
            return db.query(Customer)\
                .options(selectinload(Customer.orders))\
                .order_by(Customer.name.asc(), Customer.id.asc())\
                .all()
    
    @staticmethod
    def get_customer_by_id(db: Session, customer_id: int) -> Customer:
        """Get customer by ID, with orders and their packages"""
        with store_guard(db, "Failed to fetch customer"):
            customer = db.query(Customer)\
                .options(selectinload(Customer.orders).selectinload(LaundryOrder.package))\
                .filter(Customer.id == customer_id)\
                .first()
        if not customer:
            raise NotFoundError("Customer")
        return customer
    
    @staticmethod
    def create_customer(db: Session, data: CustomerCreate) -> Customer:
        """Create new customer; email must be unique"""
        with store_guard(db, "Failed to create customer", conflict_message=EMAIL_TAKEN):
            existing = db.query(Customer).filter(Customer.email == data.email).first()
            if existing:
                logger.warning(f"Rejected customer create, email taken: {data.email}")
                raise ConflictError(EMAIL_TAKEN)
            
            customer = Customer(
                name=data.name,
                email=data.email,
                phone=data.phone,
                address=data.address,
            )
            db.add(customer)
            db.commit()
            db.refresh(customer)
        
        logger.info(f"Created customer: {customer.id} - {customer.email}")
        return customer
    
    @staticmethod
    def update_customer(db: Session, customer_id: int, data: CustomerUpdate) -> Customer:
        """Update customer; a changed email is re-checked against other customers"""
        conflict = "Email is already taken by another customer"
        with store_guard(db, "Failed to update customer", conflict_message=conflict):
            customer = db.query(Customer).filter(Customer.id == customer_id).first()
            if not customer:
                raise NotFoundError("Customer")
            
            if data.email != customer.email:
                taken = db.query(Customer).filter(
                    Customer.email == data.email,
                    Customer.id != customer_id,
                ).first()
                if taken:
                    logger.warning(f"Rejected customer {customer_id} update, email taken: {data.email}")
                    raise ConflictError(conflict)
            
            for field, value in data.model_dump().items():
                setattr(customer, field, value)
            
            db.commit()
            db.refresh(customer)
        
        logger.info(f"Updated customer: {customer.id} - {customer.email}")
        return customer
    
    @staticmethod
    def delete_customer(db: Session, customer_id: int) -> None:
        """Delete customer; refused while any order references it"""
        with store_guard(db, "Failed to delete customer"):
            customer = db.query(Customer).filter(Customer.id == customer_id).first()
            if not customer:
                raise NotFoundError("Customer")
            
            order_count = db.query(LaundryOrder).filter(LaundryOrder.customer_id == customer_id).count()
            if order_count > 0:
                logger.warning(f"Refused to delete customer {customer_id}: {order_count} orders")
                raise DependencyConflictError(
                    "Cannot delete customer with existing orders. Please delete or reassign orders first."
                )
            
            db.delete(customer)
            db.commit()
        
        logger.info(f"Deleted customer: {customer_id}")
