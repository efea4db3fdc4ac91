"""Reminder router: add, render, delete, duplicate and edit reminders."""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from mindscript.db.config import get_session
from mindscript.middleware.auth import CurrentUser, ensure_owner, get_current_user
from mindscript.routers.common import removed_summary, require, require_affected, store_errors
from mindscript.schemas.task import OwnerRequest, ReminderCreate, ReminderEdit, ReminderRead, ReminderRef
from mindscript.services.repository import ReminderRepository
from mindscript.utils.logger import api_logger

router = APIRouter(tags=["Reminders"], dependencies=[Depends(get_current_user)])

ID_FIELDS = {"reminder_id", "user_id"}


def get_reminder_repository(session: Session = Depends(get_session)) -> ReminderRepository:
    """Dependency for getting ReminderRepository instance."""
    return ReminderRepository(session)


@router.post("/add", status_code=status.HTTP_201_CREATED)
async def create_reminder(
    body: ReminderCreate,
    current_user: CurrentUser = Depends(get_current_user),
    repo: ReminderRepository = Depends(get_reminder_repository),
):
    require(
        "All fields are required",
        body.title, body.description, body.due_date, body.status, body.user_id,
    )
    owner_id = ensure_owner(current_user, body.user_id)

    with store_errors("Server error", user_id=owner_id):
        reminder_id = repo.create(body.model_dump(exclude_none=True, exclude=ID_FIELDS), owner_id)

    api_logger.info("Reminder created", user_id=owner_id, reminder_id=reminder_id)
    return {"success": True, "message": "Reminder created successfully", "reminder_id": reminder_id}


@router.post("/render")
async def get_reminders(
    body: OwnerRequest,
    current_user: CurrentUser = Depends(get_current_user),
    repo: ReminderRepository = Depends(get_reminder_repository),
):
    require("User id is required", body.user_id)
    owner_id = ensure_owner(current_user, body.user_id)

    with store_errors("Server error", user_id=owner_id):
        reminders = repo.list_by_owner(owner_id)

    return {
        "success": True,
        "message": "Reminders fetched successfully",
        "reminders": [ReminderRead.model_validate(reminder) for reminder in reminders],
    }


@router.post("/delete")
async def remove_reminder(
    body: ReminderRef,
    current_user: CurrentUser = Depends(get_current_user),
    repo: ReminderRepository = Depends(get_reminder_repository),
):
    require("User ID is required", body.user_id)
    require("Reminder ID is required", body.reminder_id)
    owner_id = ensure_owner(current_user, body.user_id)

    with store_errors("Server error", user_id=owner_id, reminder_id=body.reminder_id):
        result = repo.remove(owner_id, body.reminder_id)

    require_affected(result, "Reminder not found", removed=removed_summary(result))
    api_logger.info("Reminder removed", user_id=owner_id, reminder_id=body.reminder_id)
    return {
        "success": True,
        "message": "Reminder has been removed successfully",
        "removed": removed_summary(result),
    }


@router.post("/duplicate")
async def duplicate_reminder(
    body: ReminderRef,
    current_user: CurrentUser = Depends(get_current_user),
    repo: ReminderRepository = Depends(get_reminder_repository),
):
    require("Reminder ID is required", body.reminder_id)
    owner_id = ensure_owner(current_user, body.user_id)

    with store_errors("Server error", user_id=owner_id, reminder_id=body.reminder_id):
        result = repo.duplicate(body.reminder_id, owner_id)

    require_affected(result, "Reminder not found")
    return {
        "success": True,
        "message": "Reminder has been duplicated successfully",
        "reminder_id": result.id,
    }


@router.post("/edit", status_code=status.HTTP_201_CREATED)
async def edit_reminder(
    body: ReminderEdit,
    current_user: CurrentUser = Depends(get_current_user),
    repo: ReminderRepository = Depends(get_reminder_repository),
):
    require("Reminder ID is required", body.reminder_id)
    owner_id = ensure_owner(current_user, body.user_id)

    with store_errors("Server error", user_id=owner_id, reminder_id=body.reminder_id):
        result = repo.edit(body.model_dump(exclude_none=True, exclude=ID_FIELDS), body.reminder_id, owner_id)

    require_affected(result, "No reminder updated. Check reminder_id/user_id.")
    return {
        "success": True,
        "message": "Reminder has been edited successfully",
        "reminder_id": body.reminder_id,
    }
