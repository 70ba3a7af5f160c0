# Forge Analytics API Models
from .requests import CreateProjectRequest
from .responses import (
    DashboardConfigResponse,
    HealthResponse,
    ListResponse,
    MessageResponse,
    ProjectCardResponse,
    ProjectCreatedResponse,
)

__all__ = [
    "CreateProjectRequest",
    "DashboardConfigResponse",
    "HealthResponse",
    "ListResponse",
    "MessageResponse",
    "ProjectCardResponse",
    "ProjectCreatedResponse",
]
