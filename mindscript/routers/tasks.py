"""Task router: add, render, delete, duplicate and edit tasks."""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from mindscript.db.config import get_session
from mindscript.middleware.auth import CurrentUser, ensure_owner, get_current_user
from mindscript.routers.common import removed_summary, require, require_affected, store_errors
from mindscript.schemas.task import OwnerRequest, TaskCreate, TaskEdit, TaskRead, TaskRef
from mindscript.services.repository import TaskRepository
from mindscript.utils.logger import api_logger

router = APIRouter(tags=["Tasks"], dependencies=[Depends(get_current_user)])

ID_FIELDS = {"task_id", "user_id"}


def get_task_repository(session: Session = Depends(get_session)) -> TaskRepository:
    """Dependency for getting TaskRepository instance."""
    return TaskRepository(session)


@router.post("/add", status_code=status.HTTP_201_CREATED)
async def add_task(
    body: TaskCreate,
    current_user: CurrentUser = Depends(get_current_user),
    repo: TaskRepository = Depends(get_task_repository),
):
    """Create a task owned by the caller."""
    require("User ID is required", body.user_id)
    require("Title and description are required", body.title, body.description)
    owner_id = ensure_owner(current_user, body.user_id)

    with store_errors("Error creating task", user_id=owner_id):
        task_id = repo.create(body.model_dump(exclude_none=True, exclude=ID_FIELDS), owner_id)

    api_logger.info("Task created", user_id=owner_id, task_id=task_id)
    return {"success": True, "message": "Task created successfully", "task_id": task_id}


@router.post("/render")
async def get_tasks(
    body: OwnerRequest,
    current_user: CurrentUser = Depends(get_current_user),
    repo: TaskRepository = Depends(get_task_repository),
):
    """List every task of the caller."""
    require("User ID is required", body.user_id)
    owner_id = ensure_owner(current_user, body.user_id)

    with store_errors("Error fetching tasks", user_id=owner_id):
        tasks = repo.list_by_owner(owner_id)

    return {
        "success": True,
        "message": "Tasks fetched successfully",
        "tasks": [TaskRead.model_validate(task) for task in tasks],
    }


@router.post("/delete")
async def remove_task(
    body: TaskRef,
    current_user: CurrentUser = Depends(get_current_user),
    repo: TaskRepository = Depends(get_task_repository),
):
    require("User ID and Task ID are required", body.user_id, body.task_id)
    owner_id = ensure_owner(current_user, body.user_id)

    with store_errors("Error removing task", user_id=owner_id, task_id=body.task_id):
        result = repo.remove(owner_id, body.task_id)

    require_affected(result, "Task not found", removed=removed_summary(result))
    api_logger.info("Task removed", user_id=owner_id, task_id=body.task_id)
    return {"success": True, "message": "Task removed successfully", "removed": removed_summary(result)}


@router.post("/duplicate")
async def duplicate_task(
    body: TaskRef,
    current_user: CurrentUser = Depends(get_current_user),
    repo: TaskRepository = Depends(get_task_repository),
):
    """Copy one of the caller's tasks under a new id."""
    require("Task ID is required", body.task_id)
    owner_id = ensure_owner(current_user, body.user_id)

    with store_errors("Error duplicating task", user_id=owner_id, task_id=body.task_id):
        result = repo.duplicate(body.task_id, owner_id)

    require_affected(result, "Task not found")
    api_logger.info("Task duplicated", user_id=owner_id, source=body.task_id, task_id=result.id)
    return {"success": True, "message": "Task duplicated successfully", "task_id": result.id}


@router.post("/edit", status_code=status.HTTP_201_CREATED)
async def edit_task(
    body: TaskEdit,
    current_user: CurrentUser = Depends(get_current_user),
    repo: TaskRepository = Depends(get_task_repository),
):
    """Update the supplied fields of one of the caller's tasks."""
    require("Task ID is required", body.task_id)
    owner_id = ensure_owner(current_user, body.user_id)

    with store_errors("Error editing task", user_id=owner_id, task_id=body.task_id):
        result = repo.edit(body.model_dump(exclude_none=True, exclude=ID_FIELDS), body.task_id, owner_id)

    require_affected(result, "No task updated. Check task_id/user_id.")
    return {"success": True, "message": "Task has been edited successfully", "task_id": body.task_id}
