# Forge Analytics Response Models
"""
Pydantic models for API responses.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    projects_count: int
    storage: str


class DashboardConfigResponse(BaseModel):
    """Text shown in the dashboard header."""
    dashboard_title: str
    company_name: str
    welcome_message: str
    tagline: str


class ProjectCardResponse(BaseModel):
    """Summary of one project for the project listing."""
    id: str
    project_name: str
    analytics_type: str
    status: str
    created_at: datetime
    revenue_display: str
    users_display: str
    conversion_display: str
    budget_display: str
    revenue_progress: float
    user_progress: float


class ProjectCreatedResponse(BaseModel):
    """Response after creating a project."""
    id: str
    message: str


class ListResponse(BaseModel):
    """Generic list response."""
    items: list[Any]
    total: int
    returned: int
    offset: int = 0
    limit: int = 1000


class MessageResponse(BaseModel):
    """Generic success message."""
    success: bool = True
    message: str
