# Forge Analytics - Main Application
"""
FastAPI application for Forge Analytics.
Serves the project list and the derived analytics view of the dashboard widget.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from forge_analytics.config import settings
from forge_analytics.dependencies import get_project_handler
from forge_analytics.models.responses import HealthResponse
from forge_analytics.routers import (
    analytics_router,
    dashboard_router,
    projects_router,
)
from forge_analytics.utils.logger import setup_logging

# Configure logging
setup_logging(level="DEBUG" if settings.debug else settings.log_level, log_file=settings.log_file)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info(f"Starting {settings.service_name} v{settings.service_version}")
    handler = app.dependency_overrides.get(get_project_handler, get_project_handler)()
    result = await handler.init()
    if result.is_ok:
        logger.info(f"Project store loaded ({len(handler.store)} projects)")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.service_name}")


# Create FastAPI app
app = FastAPI(
    title=settings.service_name,
    version=settings.service_version,
    description="KPI and chart derivation for analytics dashboard projects",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "detail": str(exc)}
    )


# Health check endpoint
@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    handler = app.dependency_overrides.get(get_project_handler, get_project_handler)()

    return HealthResponse(
        status="healthy",
        version=settings.service_version,
        projects_count=len(handler.store),
        storage="database" if settings.database_url else "memory",
    )


# Include routers
app.include_router(dashboard_router, prefix="/api/v1")
app.include_router(projects_router, prefix="/api/v1")
app.include_router(analytics_router, prefix="/api/v1")


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "docs": "/docs",
        "health": "/health"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "forge_analytics.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
