"""
Project API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from resource_manager.db.session import get_db
from resource_manager.controllers.project_controller import ProjectController
from resource_manager.schemas.project import (
    ProjectCreate,
    ProjectUpdate,
    ProjectResponse,
    ProjectListResponse,
    RequirementStatusResponse,
)

router = APIRouter()


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    project_data: ProjectCreate,
    db: AsyncSession = Depends(get_db),
) -> ProjectResponse:
    """Create a new project and its staffing requirements."""
    controller = ProjectController(db)
    return await controller.create_project(project_data)


@router.get("", response_model=ProjectListResponse)
async def list_projects(
    db: AsyncSession = Depends(get_db),
) -> ProjectListResponse:
    """List projects with assignments and requirements."""
    controller = ProjectController(db)
    return await controller.list_projects()


@router.get("/search", response_model=ProjectListResponse)
async def search_projects(
    q: str = Query(""),
    status: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> ProjectListResponse:
    """Search projects by name, optionally filtered by status."""
    controller = ProjectController(db)
    return await controller.search_projects(query=q, status=status)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: int,
    db: AsyncSession = Depends(get_db),
) -> ProjectResponse:
    """Get project by ID."""
    controller = ProjectController(db)
    return await controller.get_project(project_id)


@router.get("/{project_id}/requirement-status", response_model=RequirementStatusResponse)
async def get_requirement_status(
    project_id: int,
    db: AsyncSession = Depends(get_db),
) -> RequirementStatusResponse:
    """Coverage of the project's requirements by its current assignments."""
    controller = ProjectController(db)
    return await controller.get_requirement_status(project_id)


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: int,
    project_data: ProjectUpdate,
    db: AsyncSession = Depends(get_db),
) -> ProjectResponse:
    """Update a project; a given requirements list replaces the old one."""
    controller = ProjectController(db)
    return await controller.update_project(project_id, project_data)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: int,
    db: AsyncSession = Depends(get_db),
) -> None:
    """Delete a project with its requirements and assignments."""
    controller = ProjectController(db)
    await controller.delete_project(project_id)
