"""Project router: add, render, delete, duplicate and edit projects."""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from mindscript.db.config import get_session
from mindscript.middleware.auth import CurrentUser, ensure_owner, get_current_user
from mindscript.routers.common import removed_summary, require, require_affected, store_errors
from mindscript.schemas.task import OwnerRequest, ProjectCreate, ProjectEdit, ProjectRead, ProjectRef
from mindscript.services.repository import ProjectRepository
from mindscript.utils.logger import api_logger

router = APIRouter(tags=["Projects"], dependencies=[Depends(get_current_user)])

ID_FIELDS = {"project_id", "user_id"}


def get_project_repository(session: Session = Depends(get_session)) -> ProjectRepository:
    """Dependency for getting ProjectRepository instance."""
    return ProjectRepository(session)


@router.post("/add", status_code=status.HTTP_201_CREATED)
async def create_project(
    body: ProjectCreate,
    current_user: CurrentUser = Depends(get_current_user),
    repo: ProjectRepository = Depends(get_project_repository),
):
    require(
        "All fields are required",
        body.title, body.description, body.due_date, body.status, body.user_id,
    )
    owner_id = ensure_owner(current_user, body.user_id)

    with store_errors("Server error", user_id=owner_id):
        project_id = repo.create(body.model_dump(exclude_none=True, exclude=ID_FIELDS), owner_id)

    api_logger.info("Project created", user_id=owner_id, project_id=project_id)
    return {"success": True, "message": "Project created successfully", "project_id": project_id}


@router.post("/render")
async def get_projects(
    body: OwnerRequest,
    current_user: CurrentUser = Depends(get_current_user),
    repo: ProjectRepository = Depends(get_project_repository),
):
    require("User id is required", body.user_id)
    owner_id = ensure_owner(current_user, body.user_id)

    with store_errors("Server error", user_id=owner_id):
        projects = repo.list_by_owner(owner_id)

    return {
        "success": True,
        "message": "Projects fetched successfully",
        "projects": [ProjectRead.model_validate(project) for project in projects],
    }


@router.post("/delete")
async def remove_project(
    body: ProjectRef,
    current_user: CurrentUser = Depends(get_current_user),
    repo: ProjectRepository = Depends(get_project_repository),
):
    require("User ID is required", body.user_id)
    require("Project ID is required", body.project_id)
    owner_id = ensure_owner(current_user, body.user_id)

    with store_errors("Server error", user_id=owner_id, project_id=body.project_id):
        result = repo.remove(owner_id, body.project_id)

    require_affected(result, "Project not found", removed=removed_summary(result))
    api_logger.info("Project removed", user_id=owner_id, project_id=body.project_id)
    return {
        "success": True,
        "message": "Project has been removed successfully",
        "removed": removed_summary(result),
    }


@router.post("/duplicate")
async def duplicate_project(
    body: ProjectRef,
    current_user: CurrentUser = Depends(get_current_user),
    repo: ProjectRepository = Depends(get_project_repository),
):
    require("Project ID is required", body.project_id)
    owner_id = ensure_owner(current_user, body.user_id)

    with store_errors("Server error", user_id=owner_id, project_id=body.project_id):
        result = repo.duplicate(body.project_id, owner_id)

    require_affected(result, "Project not found")
    return {
        "success": True,
        "message": "Project has been duplicated successfully",
        "project_id": result.id,
    }


@router.post("/edit", status_code=status.HTTP_201_CREATED)
async def edit_project(
    body: ProjectEdit,
    current_user: CurrentUser = Depends(get_current_user),
    repo: ProjectRepository = Depends(get_project_repository),
):
    require("Project ID is required", body.project_id)
    owner_id = ensure_owner(current_user, body.user_id)

    with store_errors("Server error", user_id=owner_id, project_id=body.project_id):
        result = repo.edit(body.model_dump(exclude_none=True, exclude=ID_FIELDS), body.project_id, owner_id)

    require_affected(result, "No project updated. Check project_id/user_id.")
    return {
        "success": True,
        "message": "Project has been edited successfully",
        "project_id": body.project_id,
    }
