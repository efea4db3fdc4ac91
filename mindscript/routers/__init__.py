"""Routers package for the Mind-Script API."""

from .auth import router as auth_router
from .database import router as database_router
from .profile import router as profile_router
from .projects import router as projects_router
from .reminders import router as reminders_router
from .tasks import router as tasks_router

__all__ = [
    "auth_router",
    "database_router",
    "profile_router",
    "projects_router",
    "reminders_router",
    "tasks_router",
]
