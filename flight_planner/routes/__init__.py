"""Routes package for API endpoints."""

from .planning_routes import router as planning_router
from .status_routes import router as status_router

__all__ = ["planning_router", "status_router"]
