"""
Laundry Order Service - Business Logic for Orders
"""
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import func
from typing import Any, Dict, List, Optional
from decimal import Decimal
import logging

from laundrydesk.core.exceptions import NotFoundError, store_guard
from laundrydesk.models import (
    Customer, LaundryOrder, OrderStatus, Package, PaymentMethod, Perfume,
)
from laundrydesk.schemas.order import LaundryOrderCreate, LaundryOrderUpdate

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def calculate_total_amount(price: Optional[Decimal], weight: Decimal) -> Optional[Decimal]:
    """Order total = package price x weight; None when the package has no price"""
    if not price:
        return None
    return (Decimal(str(price)) * Decimal(str(weight))).quantize(CENT)


class OrderService:
    """Laundry order business logic"""
    
    @staticmethod
    def _with_relations(query):
        return query.options(
            selectinload(LaundryOrder.customer),
            selectinload(LaundryOrder.package),
            selectinload(LaundryOrder.payment_method),
        )
    
    @staticmethod
    def get_orders(db: Session, status: Optional[str] = None) -> List[LaundryOrder]:
        """Get orders, newest first, with customer, package and payment method"""
        with store_guard(db, "Failed to fetch orders"):
            query = OrderService._with_relations(db.query(LaundryOrder))
            if status and status != "all":
                query = query.filter(LaundryOrder.status == status)
            return query.order_by(LaundryOrder.created_at.desc(), LaundryOrder.id.desc()).all()
    
    @staticmethod
    def get_order_by_id(db: Session, order_id: int) -> LaundryOrder:
        """Get order by ID"""
        with store_guard(db, "Failed to fetch order"):
            order = OrderService._with_relations(db.query(LaundryOrder))\
                .filter(LaundryOrder.id == order_id)\
                .first()
        if not order:
            raise NotFoundError("Order")
        return order
    
    @staticmethod
    def _resolve_references(db: Session, data: LaundryOrderCreate) -> Package:
        """Check that referenced rows exist; returns the package used for pricing"""
        package = db.query(Package).filter(Package.id == data.package_id).first()
        if not package:
            logger.warning(f"Order rejected, package not found: {data.package_id}")
            raise NotFoundError("Package")
        
        if not db.query(Customer.id).filter(Customer.id == data.customer_id).first():
            logger.warning(f"Order rejected, customer not found: {data.customer_id}")
            raise NotFoundError("Customer")
        
        if data.payment_method_id is not None:
            method = db.query(PaymentMethod.id).filter(PaymentMethod.id == data.payment_method_id).first()
            if not method:
                logger.warning(f"Order rejected, payment method not found: {data.payment_method_id}")
                raise NotFoundError("Payment method")
        
        return package
    
    @staticmethod
    def create_order(db: Session, data: LaundryOrderCreate) -> LaundryOrder:
        """Create new order; the total is always computed here"""
        with store_guard(db, "Failed to create order"):
            package = OrderService._resolve_references(db, data)
            
            order = LaundryOrder(
                customer_id=data.customer_id,
                package_id=data.package_id,
                payment_method_id=data.payment_method_id,
                weight=data.weight,
                status=data.status.value,
                payment_status=data.payment_status.value,
                total_amount=calculate_total_amount(package.price, data.weight),
                notes=data.notes,
            )
            db.add(order)
            db.commit()
            order_id = order.id
        
        logger.info(f"Created order: {order_id} (customer {data.customer_id}, package {data.package_id})")
        return OrderService.get_order_by_id(db, order_id)
    
    @staticmethod
    def update_order(db: Session, order_id: int, data: LaundryOrderUpdate) -> LaundryOrder:
        """Update order; total is recomputed only when package or weight changes"""
        with store_guard(db, "Failed to update order"):
            order = db.query(LaundryOrder).filter(LaundryOrder.id == order_id).first()
            if not order:
                raise NotFoundError("Order")
            
            package = OrderService._resolve_references(db, data)
            
            package_changed = order.package_id != data.package_id
            weight_changed = Decimal(str(order.weight)) != data.weight
            
            order.customer_id = data.customer_id
            order.package_id = data.package_id
            order.payment_method_id = data.payment_method_id
            order.weight = data.weight
            order.status = data.status.value
            order.payment_status = data.payment_status.value
            order.notes = data.notes
            
            if package_changed or weight_changed:
                order.total_amount = calculate_total_amount(package.price, data.weight)
            
            db.commit()
        
        logger.info(f"Updated order: {order_id} (status {data.status.value})")
        return OrderService.get_order_by_id(db, order_id)
    
    @staticmethod
    def delete_order(db: Session, order_id: int) -> None:
        """Delete order"""
        with store_guard(db, "Failed to delete order"):
            order = db.query(LaundryOrder).filter(LaundryOrder.id == order_id).first()
            if not order:
                raise NotFoundError("Order")
            
            db.delete(order)
            db.commit()
        
        logger.info(f"Deleted order: {order_id}")
    
    @staticmethod
    def get_dashboard_stats(db: Session) -> Dict[str, Any]:
        """Record counts, orders per status and revenue of completed orders"""
        with store_guard(db, "Failed to fetch dashboard stats"):
            status_rows = db.query(LaundryOrder.status, func.count(LaundryOrder.id))\
                .group_by(LaundryOrder.status)\
                .all()
            by_status = {s.value: 0 for s in OrderStatus}
            for status, count in status_rows:
                by_status[status] = count
            
            revenue = db.query(func.coalesce(func.sum(LaundryOrder.total_amount), 0))\
                .filter(LaundryOrder.status == OrderStatus.COMPLETED.value)\
                .scalar()
            
            return {
                "customers": db.query(Customer).count(),
                "packages": db.query(Package).count(),
                "activePackages": db.query(Package).filter(Package.active == True).count(),
                "paymentMethods": db.query(PaymentMethod).count(),
                "perfumes": db.query(Perfume).count(),
                "orders": sum(by_status.values()),
                "ordersByStatus": by_status,
                "completedRevenue": float(revenue or 0),
            }
