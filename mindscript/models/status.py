"""Lifecycle status shared by tasks, projects and reminders."""
from enum import Enum
from typing import Dict, FrozenSet, Union

from mindscript.errors import ValidationError


class Status(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# completed and cancelled are terminal
TRANSITIONS: Dict[Status, FrozenSet[Status]] = {
    Status.PENDING: frozenset({Status.IN_PROGRESS, Status.COMPLETED, Status.CANCELLED}),
    Status.IN_PROGRESS: frozenset({Status.COMPLETED, Status.CANCELLED}),
    Status.COMPLETED: frozenset(),
    Status.CANCELLED: frozenset(),
}


def parse_status(value: Union[str, Status]) -> Status:
    """Coerce a raw string to a Status, rejecting unknown values."""
    try:
        return Status(value)
    except ValueError:
        allowed = ", ".join(s.value for s in Status)
        raise ValidationError(f"Status must be one of: {allowed}")


def can_transition(current: Union[str, Status], new: Union[str, Status]) -> bool:
    current, new = parse_status(current), parse_status(new)
    return current == new or new in TRANSITIONS[current]


def validate_transition(current: Union[str, Status], new: Union[str, Status]) -> Status:
    """Return the new status, or raise ValidationError if the move is not allowed."""
    if not can_transition(current, new):
        raise ValidationError(
            f"Cannot change status from {Status(current).value} to {Status(new).value}"
        )
    return Status(new)
