"""Request and response schemas for tasks, projects and reminders.

Request fields are optional at the schema level: the routers check presence
so that a missing field is reported with a message naming it.
"""
from datetime import date
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mindscript.models.status import Status

# Identifiers are stored as signed 64-bit integers
RowId = Annotated[int, Field(ge=-(2**63), le=2**63 - 1)]


class ItemFields(BaseModel):
    """Writable fields shared by tasks, projects and reminders."""
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    due_date: Optional[date] = Field(None, alias="dueDate")  # YYYY-MM-DD
    status: Optional[Status] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def blank_due_date_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class OwnerRequest(BaseModel):
    """Body of render requests."""
    user_id: Optional[RowId] = None


# Tasks

class TaskFields(ItemFields):
    project: Optional[str] = Field(None, max_length=100)
    team: Optional[str] = Field(None, max_length=100)


class TaskCreate(TaskFields):
    user_id: Optional[RowId] = None


class TaskEdit(TaskFields):
    task_id: Optional[RowId] = None
    user_id: Optional[RowId] = None


class TaskRef(BaseModel):
    """Identifies a task for delete and duplicate."""
    task_id: Optional[RowId] = None
    user_id: Optional[RowId] = None


# Projects

class ProjectCreate(ItemFields):
    user_id: Optional[RowId] = None


class ProjectEdit(ItemFields):
    project_id: Optional[RowId] = None
    user_id: Optional[RowId] = None


class ProjectRef(BaseModel):
    project_id: Optional[RowId] = None
    user_id: Optional[RowId] = None


# Reminders

class ReminderCreate(ItemFields):
    user_id: Optional[RowId] = None


class ReminderEdit(ItemFields):
    reminder_id: Optional[RowId] = None
    user_id: Optional[RowId] = None


class ReminderRef(BaseModel):
    reminder_id: Optional[RowId] = None
    user_id: Optional[RowId] = None


# Responses

class ItemRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: int
    title: str
    description: Optional[str] = None
    due_date: Optional[date] = Field(None, serialization_alias="dueDate")
    status: str


class TaskRead(ItemRead):
    task_id: int
    project: Optional[str] = None
    team: Optional[str] = None


class ProjectRead(ItemRead):
    project_id: int


class ReminderRead(ItemRead):
    reminder_id: int
