# Forge Analytics - Dashboard Router
"""
API endpoint for dashboard widget configuration.
"""

from fastapi import APIRouter, Depends

from forge_analytics.config import Settings, get_settings
from forge_analytics.models.responses import DashboardConfigResponse

router = APIRouter(prefix="/config", tags=["dashboard"])


@router.get("", response_model=DashboardConfigResponse)
async def get_dashboard_config(settings: Settings = Depends(get_settings)):
    """Header text for the dashboard widget."""
    return DashboardConfigResponse(
        dashboard_title=settings.dashboard_title,
        company_name=settings.company_name,
        welcome_message=settings.welcome_message,
        tagline=settings.tagline,
    )
