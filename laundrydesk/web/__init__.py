from .router import web_router, templates

__all__ = ["web_router", "templates"]
