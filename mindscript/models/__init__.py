"""SQLModel tables for Mind-Script."""
from mindscript.models.status import Status
from mindscript.models.task import Project, Reminder, Task
from mindscript.models.user import User

__all__ = ["Project", "Reminder", "Status", "Task", "User"]
