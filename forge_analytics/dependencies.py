# Forge Analytics Dependencies
"""
Construction of the process-wide handler and service, and the FastAPI
dependency functions that hand them to routers.
"""

import logging
from functools import lru_cache

from forge_analytics.adapters import BaseProjectAdapter, InMemoryProjectAdapter, SqlProjectAdapter
from forge_analytics.analytics.service import AnalyticsService
from forge_analytics.analytics.store import get_project_store
from forge_analytics.config import Settings, get_settings
from forge_analytics.database import create_db_engine, create_session_factory, init_db
from forge_analytics.handlers import ProjectHandler

logger = logging.getLogger(__name__)


def create_adapter(settings: Settings) -> BaseProjectAdapter:
    """SQL adapter when a database URL is configured, in-memory otherwise."""
    if not settings.database_url:
        logger.info("No database configured, projects are kept in memory")
        return InMemoryProjectAdapter()

    engine = create_db_engine(settings.database_url, echo=settings.debug)
    init_db(engine)
    return SqlProjectAdapter(create_session_factory(engine))


@lru_cache()
def get_project_handler() -> ProjectHandler:
    """Get the process-wide project handler."""
    settings = get_settings()
    return ProjectHandler(
        adapter=create_adapter(settings),
        store=get_project_store(),
        max_projects=settings.max_projects,
    )


@lru_cache()
def get_analytics_service() -> AnalyticsService:
    """Get the process-wide analytics service."""
    return AnalyticsService(
        store=get_project_store(),
        seed=get_settings().random_seed,
    )
