# Forge Analytics - Projects Router
"""
API endpoints for project operations.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from forge_analytics.analytics.models import MetricRecord
from forge_analytics.dependencies import get_project_handler
from forge_analytics.errors import (
    ProjectLimitReachedError,
    ProjectNotFoundError,
    ProjectOperationError,
)
from forge_analytics.handlers import ProjectHandler
from forge_analytics.models.requests import CreateProjectRequest
from forge_analytics.models.responses import (
    ListResponse,
    MessageResponse,
    ProjectCreatedResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=ListResponse)
async def list_projects(
    limit: int = Query(1000, ge=1, le=5000, description="Max items to return"),
    offset: int = Query(0, ge=0, description="Offset for pagination"),
    handler: ProjectHandler = Depends(get_project_handler)
):
    """
    List project cards in display order.
    """
    cards = handler.list_project_cards()
    page = cards[offset:offset + limit]

    return ListResponse(
        items=page,
        total=len(cards),
        returned=len(page),
        offset=offset,
        limit=limit
    )


@router.post("", response_model=ProjectCreatedResponse, status_code=201)
async def create_project(
    request: CreateProjectRequest,
    handler: ProjectHandler = Depends(get_project_handler)
):
    """Create a project from dashboard form fields."""
    try:
        record = await handler.create_project(request.model_dump())
    except ProjectLimitReachedError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ProjectOperationError as e:
        logger.error(f"Error creating project: {e}")
        raise HTTPException(status_code=502, detail="Failed to create project. Please try again.")

    return ProjectCreatedResponse(
        id=record.id,
        message="Analytics project launched successfully!"
    )


@router.get("/{project_id}", response_model=MetricRecord)
async def get_project(
    project_id: str,
    handler: ProjectHandler = Depends(get_project_handler)
):
    """Get the stored project, e.g. to pre-fill the edit form."""
    try:
        return handler.get_project(project_id)
    except ProjectNotFoundError:
        raise HTTPException(status_code=404, detail="Project not found")


@router.delete("/{project_id}", response_model=MessageResponse)
async def delete_project(
    project_id: str,
    handler: ProjectHandler = Depends(get_project_handler)
):
    """Delete a project."""
    try:
        await handler.delete_project(project_id)
    except ProjectNotFoundError:
        raise HTTPException(status_code=404, detail="Project not found")
    except ProjectOperationError as e:
        logger.error(f"Error deleting project {project_id}: {e}")
        raise HTTPException(status_code=502, detail="Failed to delete project. Please try again.")

    return MessageResponse(message="Project deleted successfully!")
