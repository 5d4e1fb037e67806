"""
Print record counts and a few sample orders.

Usage: python scripts/check_db.py
"""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.orm import selectinload

from laundrydesk.core import settings, create_db_engine, create_session_factory
from laundrydesk.models import Customer, LaundryOrder, Package, PaymentMethod, Perfume


def check_database():
    engine = create_db_engine(settings.DATABASE_URL)
    db = create_session_factory(engine)()
    try:
        print("Checking database...\n")
        print("Record counts:")
        print(f"- Customers: {db.query(Customer).count()}")
        print(f"- Packages: {db.query(Package).count()}")
        print(f"- Payment Methods: {db.query(PaymentMethod).count()}")
        print(f"- Perfumes: {db.query(Perfume).count()}")
        print(f"- Laundry Orders: {db.query(LaundryOrder).count()}")
        print()
        
        orders = db.query(LaundryOrder).options(
            selectinload(LaundryOrder.customer),
            selectinload(LaundryOrder.package),
            selectinload(LaundryOrder.payment_method),
        ).order_by(LaundryOrder.created_at.desc()).limit(3).all()
        
        print("Sample Orders:")
        for index, order in enumerate(orders, start=1):
            print(f"{index}. Order #{order.id}")
            print(f"   Customer: {order.customer.name}")
            print(f"   Package: {order.package.name}")
            print(f"   Weight: {order.weight}kg")
            print(f"   Status: {order.status}")
            print(f"   Payment: {order.payment_method.name if order.payment_method else 'N/A'}")
            print(f"   Total: {order.total_amount if order.total_amount is not None else '-'}")
            print()
        
        print("Database verification completed!")
    except Exception as e:
        print(f"Database check failed: {e}")
        sys.exit(1)
    finally:
        db.close()


if __name__ == "__main__":
    check_database()
