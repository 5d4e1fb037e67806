"""
Application factory
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from fastapi.responses import JSONResponse, RedirectResponse
from contextlib import asynccontextmanager
from typing import Optional
from sqlalchemy.engine import Engine
import logging
import os

from laundrydesk import __version__
from laundrydesk.core import settings, Base, create_db_engine, create_session_factory
from laundrydesk.core.exceptions import LaundryDeskError
from laundrydesk.core.responses import error_response
from laundrydesk.api import api_router
from laundrydesk.web import web_router
import laundrydesk.models  # noqa: F401  registers tables on Base.metadata

logger = logging.getLogger(__name__)

static_path = os.path.join(os.path.dirname(__file__), "static")


def create_app(engine: Optional[Engine] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The engine is injected so tests and scripts can point the app at their own
    store; by default it is built from settings.DATABASE_URL.
    """
    if engine is None:
        engine = create_db_engine(settings.DATABASE_URL, echo=settings.DEBUG)
    
    # Lifespan for startup/shutdown
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: Create tables if not exist
        Base.metadata.create_all(bind=engine)
        logger.info(f"{settings.APP_NAME} starting on port {settings.APP_PORT}")
        yield
        logger.info(f"{settings.APP_NAME} shutting down")
    
    app = FastAPI(
        title=settings.APP_NAME,
        description="Customers, Packages, Payment Methods, Perfumes & Laundry Orders",
        version=__version__,
        lifespan=lifespan
    )
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    
    # ===================== ERROR HANDLERS =====================
    
    @app.exception_handler(LaundryDeskError)
    async def laundrydesk_error_handler(request: Request, exc: LaundryDeskError):
        return JSONResponse(status_code=exc.status_code, content=error_response(exc.message, exc.details))
    
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Malformed or missing JSON body
        details = [
            {
                "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
                "message": err.get("msg", "Invalid value"),
                "type": err.get("type", "value_error"),
            }
            for err in exc.errors()
        ]
        return JSONResponse(status_code=400, content=error_response("Validation failed", details))
    
    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content=error_response("Internal server error"))
    
    # Mount static files
    app.mount("/static", StaticFiles(directory=static_path), name="static")
    
    # Include routers
    app.include_router(web_router)
    app.include_router(api_router, prefix="/api")
    
    # Root redirect to dashboard
    @app.get("/")
    async def root():
        return RedirectResponse(url="/dashboard")
    
    # Health check
    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "app": settings.APP_NAME}
    
    return app
