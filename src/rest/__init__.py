from src.rest.health import router as health_router
from src.rest.reports import router as reports_router

__all__ = ["health_router", "reports_router"]
