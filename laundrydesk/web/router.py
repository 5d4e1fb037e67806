"""
Web Router - HTML Page Routes
"""
from fastapi import APIRouter, Request, Depends
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session
from datetime import datetime
import os

from laundrydesk.core import get_db, settings
from laundrydesk.models import OrderStatus, PaymentStatus
from laundrydesk.services import OrderService

web_router = APIRouter(tags=["Web"])

# Setup templates
templates_path = os.path.join(os.path.dirname(__file__), "..", "templates")
templates = Jinja2Templates(directory=templates_path)

NAV_ITEMS = [
    {"href": "/dashboard", "name": "Dashboard", "icon": "bi-speedometer2"},
    {"href": "/dashboard/laundry-orders", "name": "Laundry Orders", "icon": "bi-basket"},
    {"href": "/dashboard/packages", "name": "Packages", "icon": "bi-box-seam"},
    {"href": "/dashboard/customers", "name": "Customers", "icon": "bi-people"},
    {"href": "/dashboard/payment-methods", "name": "Payment Methods", "icon": "bi-credit-card"},
    {"href": "/dashboard/perfumes", "name": "Perfumes", "icon": "bi-droplet"},
]

# Add datetime and navigation to all templates
def get_template_context(request: Request, **kwargs):
    return {
        "request": request,
        "now": datetime.now,
        "app_name": settings.APP_NAME,
        "nav_items": NAV_ITEMS,
        "current_path": request.url.path,
        **kwargs,
    }

@web_router.get("/login")
async def login_page(request: Request):
    """Login page (not wired to any authentication)"""
    return templates.TemplateResponse(request, "login.html", get_template_context(
        request,
        title="Sign in"
    ))

@web_router.get("/dashboard")
def dashboard(request: Request, db: Session = Depends(get_db)):
    """Dashboard - Overview page"""
    stats = OrderService.get_dashboard_stats(db)
    return templates.TemplateResponse(request, "dashboard.html", get_template_context(
        request,
        title="Dashboard",
        stats=stats
    ))

@web_router.get("/dashboard/customers")
async def customers_page(request: Request):
    return templates.TemplateResponse(request, "customers/list.html", get_template_context(
        request,
        title="Customers"
    ))

@web_router.get("/dashboard/packages")
async def packages_page(request: Request):
    return templates.TemplateResponse(request, "packages/list.html", get_template_context(
        request,
        title="Packages"
    ))

@web_router.get("/dashboard/payment-methods")
async def payment_methods_page(request: Request):
    return templates.TemplateResponse(request, "payment_methods/list.html", get_template_context(
        request,
        title="Payment Methods"
    ))

@web_router.get("/dashboard/perfumes")
async def perfumes_page(request: Request):
    return templates.TemplateResponse(request, "perfumes/list.html", get_template_context(
        request,
        title="Perfumes"
    ))

@web_router.get("/dashboard/laundry-orders")
async def orders_page(request: Request):
    """Laundry Orders page"""
    return templates.TemplateResponse(request, "orders/list.html", get_template_context(
        request,
        title="Laundry Orders",
        order_statuses=[s.value for s in OrderStatus],
        payment_statuses=[s.value for s in PaymentStatus],
    ))
