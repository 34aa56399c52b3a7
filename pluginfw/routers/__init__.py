"""API routers package."""

from .plugins import router as plugins_router

__all__ = ["plugins_router"]
