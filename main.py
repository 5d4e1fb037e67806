"""
LaundryDesk - Laundry Service Records Management
Server Entry Point
"""
import uvicorn
import logging

from laundrydesk.core import settings
from laundrydesk.main import create_app

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.APP_PORT,
        reload=settings.DEBUG
    )
