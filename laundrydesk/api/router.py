"""
API Router - JSON Endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from datetime import datetime

from laundrydesk import __version__
from laundrydesk.core import get_db
from laundrydesk.core.responses import success_response
from laundrydesk.services import OrderService

# Import sub-routers
from laundrydesk.api.customers import router as customers_router
from laundrydesk.api.packages import router as packages_router
from laundrydesk.api.payment_methods import router as payment_methods_router
from laundrydesk.api.perfumes import router as perfumes_router
from laundrydesk.api.orders import router as orders_router

api_router = APIRouter(tags=["API"])

# Include sub-routers
api_router.include_router(customers_router)
api_router.include_router(packages_router)
api_router.include_router(payment_methods_router)
api_router.include_router(perfumes_router)
api_router.include_router(orders_router)

# ===================== HEALTH & STATUS =====================

@api_router.get("/status")
async def api_status():
    return {"status": "ok", "version": __version__, "timestamp": datetime.now().isoformat()}

# ===================== DASHBOARD =====================

@api_router.get("/dashboard/stats")
def dashboard_stats(db: Session = Depends(get_db)):
    return success_response(data=OrderService.get_dashboard_stats(db))
