"""API route registrations."""

from interfaces.api.routes.compound_routes import router as compound_router
from interfaces.api.routes.search_routes import router as search_router

__all__ = ["compound_router", "search_router"]
