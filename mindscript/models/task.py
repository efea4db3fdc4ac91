"""Task, project and reminder models for SQLModel.

The three tables share one shape: an owner, a title, a description, a due date
and a lifecycle status. Tasks additionally carry a project and a team label.
"""
from datetime import date, datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from mindscript.models.status import Status
from mindscript.models.user import utc_now


class OwnedItem(SQLModel):
    """Columns common to every user-owned item."""

    user_id: int = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)
    due_date: Optional[date] = Field(default=None)
    status: str = Field(default=Status.PENDING.value, max_length=20, index=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class Task(OwnedItem, table=True):
    """A unit of work, optionally labelled with a project and a team."""

    __tablename__ = "tasks"

    task_id: Optional[int] = Field(default=None, primary_key=True)
    project: Optional[str] = Field(default=None, max_length=100)
    team: Optional[str] = Field(default=None, max_length=100)


class Project(OwnedItem, table=True):
    __tablename__ = "projects"

    project_id: Optional[int] = Field(default=None, primary_key=True)


class Reminder(OwnedItem, table=True):
    __tablename__ = "reminders"

    reminder_id: Optional[int] = Field(default=None, primary_key=True)
