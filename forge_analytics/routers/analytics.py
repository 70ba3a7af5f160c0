# Forge Analytics - Analytics Router
"""
API endpoint for the expanded analytics view of a project.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from forge_analytics.analytics.models import AnalyticsBundle
from forge_analytics.analytics.service import AnalyticsService
from forge_analytics.dependencies import get_analytics_service
from forge_analytics.errors import ProjectNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["analytics"])


@router.get("/{project_id}/analytics", response_model=AnalyticsBundle)
async def get_project_analytics(
    project_id: str,
    service: AnalyticsService = Depends(get_analytics_service)
):
    """
    Get KPIs and chart specs for a project.

    Every call returns a freshly generated bundle.
    """
    try:
        return service.open(project_id)
    except ProjectNotFoundError:
        raise HTTPException(status_code=404, detail="Project not found")
