"""
Performance Report Service - FastAPI Application Entry
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from src.config import settings
from src.config.exception_config import configure_exception_handlers
from src.rest import health_router, reports_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.app_name} on port {settings.api_port}")
    settings.print_config()
    yield


def create_app() -> FastAPI:
    """Create FastAPI application"""

    app = FastAPI(
        title="Performance Report Service",
        description="Generates performance test reports from CSV results using AI providers",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Configure exception handlers
    configure_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(reports_router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=settings.api_port,
        reload=settings.debug,
    )
