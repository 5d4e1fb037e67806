"""
Seed the database with sample payment methods, packages, customers and orders.

Usage: python scripts/seed_db.py [--reset]
"""
import sys
import os
import logging
from decimal import Decimal

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from laundrydesk.core import settings, Base, create_db_engine, create_session_factory
from laundrydesk.models import Customer, LaundryOrder, Package, PaymentMethod, Perfume
from laundrydesk.services import calculate_total_amount

logger = logging.getLogger("seed_db")

PAYMENT_METHODS = [
    {"name": "Cash", "description": "Cash payment"},
    {"name": "Credit Card", "description": "Credit card payment"},
    {"name": "Digital Wallet", "description": "Digital wallet payment (GoPay, OVO, etc.)"},
]

PACKAGES = [
    {"name": "Basic Wash", "description": "Standard washing and drying service", "price": Decimal("15000")},
    {"name": "Premium Wash", "description": "Premium washing with fabric conditioner and folding", "price": Decimal("25000")},
    {"name": "Express Service", "description": "Same-day express laundry service", "price": Decimal("35000")},
]

CUSTOMERS = [
    {"name": "John Doe", "email": "john.doe@example.com", "phone": "+628123456789",
     "address": "Jl. Sudirman No. 123, Jakarta"},
    {"name": "Jane Smith", "email": "jane.smith@example.com", "phone": "+628987654321",
     "address": "Jl. Thamrin No. 456, Jakarta"},
    {"name": "Bob Wilson", "email": "bob.wilson@example.com", "phone": "+628555666777",
     "address": "Jl. Gatot Subroto No. 789, Jakarta"},
]

PERFUMES = [
    {"name": "Lavender", "description": "Calming lavender scent"},
    {"name": "Fresh Linen", "description": "Clean cotton scent"},
]

# (customer index, package index, payment method index, weight, status, payment status, notes)
ORDERS = [
    (0, 0, 0, Decimal("2.5"), "Processing", "Paid", "Please wash gently"),
    (1, 1, 1, Decimal("3.0"), "Pending", "Pending", None),
    (2, 2, 2, Decimal("1.5"), "Completed", "Paid", "Delivered on time"),
]


def seed(db):
    methods = [PaymentMethod(active=True, **data) for data in PAYMENT_METHODS]
    packages = [Package(active=True, **data) for data in PACKAGES]
    customers = [Customer(**data) for data in CUSTOMERS]
    perfumes = [Perfume(available=True, **data) for data in PERFUMES]
    db.add_all(methods + packages + customers + perfumes)
    db.flush()
    
    for cust_idx, pkg_idx, pm_idx, weight, status, payment_status, notes in ORDERS:
        package = packages[pkg_idx]
        db.add(LaundryOrder(
            customer_id=customers[cust_idx].id,
            package_id=package.id,
            payment_method_id=methods[pm_idx].id,
            weight=weight,
            status=status,
            payment_status=payment_status,
            total_amount=calculate_total_amount(package.price, weight),
            notes=notes,
        ))
    
    db.commit()
    print("Database has been seeded successfully!")
    print("Created:")
    print(f"- {len(methods)} Payment Methods")
    print(f"- {len(packages)} Packages")
    print(f"- {len(customers)} Customers")
    print(f"- {len(perfumes)} Perfumes")
    print(f"- {len(ORDERS)} Laundry Orders")


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    engine = create_db_engine(settings.DATABASE_URL)
    if "--reset" in sys.argv:
        logger.info("Dropping existing tables")
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    
    db = create_session_factory(engine)()
    try:
        if db.query(Customer).count() > 0:
            print("Database already contains data; run with --reset to start over.")
            return
        seed(db)
    except Exception:
        db.rollback()
        logger.exception("Seeding failed")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
