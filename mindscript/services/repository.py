"""Repositories for the user-owned items: tasks, projects and reminders.

All three expose the same operations (create, list by owner, remove, edit,
duplicate) and differ only in their model, identifier column and the set of
fields a client may write.
"""
import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from sqlalchemy import delete, update
from sqlmodel import Session, select

from mindscript.errors import ValidationError
from mindscript.models import Project, Reminder, Task
from mindscript.models.status import parse_status, validate_transition
from mindscript.models.task import OwnedItem
from mindscript.models.user import utc_now

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=OwnedItem)


@dataclass(frozen=True)
class WriteResult:
    """Outcome of a write. ``affected == 0`` means the row was not found or not owned."""

    affected: int
    id: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.affected > 0


class OwnedItemRepository(Generic[ItemT]):
    """Parameterized statements for one user-owned table."""

    model: ClassVar[Type[OwnedItem]]
    id_field: ClassVar[str]
    required_fields: ClassVar[Tuple[str, ...]]
    mutable_fields: ClassVar[Tuple[str, ...]] = ("title", "description", "due_date", "status")

    def __init__(self, session: Session):
        self.session = session

    @property
    def id_column(self):
        return getattr(self.model, self.id_field)

    def create(self, fields: Dict[str, Any], owner_id: int) -> int:
        """Insert one row owned by ``owner_id`` and return its identifier."""
        missing = [name for name in self.required_fields if _is_blank(fields.get(name))]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        values = {name: fields[name] for name in self.mutable_fields if fields.get(name) is not None}
        if "status" in values:
            values["status"] = parse_status(values["status"]).value

        item = self.model(user_id=owner_id, **values)
        self.session.add(item)
        self.session.commit()
        self.session.refresh(item)
        new_id = getattr(item, self.id_field)
        logger.info("Created %s %s for user %s", self.model.__tablename__, new_id, owner_id)
        return new_id

    def get(self, entity_id: int, owner_id: Optional[int] = None) -> Optional[ItemT]:
        statement = select(self.model).where(self.id_column == entity_id)
        if owner_id is not None:
            statement = statement.where(self.model.user_id == owner_id)
        return self.session.exec(statement).first()

    def list_by_owner(self, owner_id: int) -> List[ItemT]:
        """Rows owned by ``owner_id`` in insertion order, empty when there are none."""
        statement = (
            select(self.model)
            .where(self.model.user_id == owner_id)
            .order_by(self.id_column)
        )
        return list(self.session.exec(statement).all())

    def remove(self, owner_id: int, entity_id: int) -> WriteResult:
        """Delete the row only when both owner and identifier match."""
        statement = (
            delete(self.model)
            .where(self.model.user_id == owner_id)
            .where(self.id_column == entity_id)
        )
        result = self.session.exec(statement)
        self.session.commit()
        return WriteResult(affected=result.rowcount, id=entity_id)

    def edit(
        self,
        fields: Dict[str, Any],
        entity_id: int,
        owner_id: Optional[int] = None,
    ) -> WriteResult:
        """Update the supplied mutable fields of one row.

        The owner clause is only added when ``owner_id`` is given. A status
        change is checked against the current status before the update runs.
        """
        values = {name: fields[name] for name in self.mutable_fields if name in fields}
        if not values:
            raise ValidationError("No fields to update")
        if "title" in values and _is_blank(values["title"]):
            raise ValidationError("Title cannot be empty")

        if "status" in values:
            current = self.get(entity_id, owner_id)
            if current is None:
                return WriteResult(affected=0, id=entity_id)
            values["status"] = validate_transition(current.status, values["status"]).value

        values["updated_at"] = utc_now()
        statement = update(self.model).where(self.id_column == entity_id)
        if owner_id is not None:
            statement = statement.where(self.model.user_id == owner_id)
        statement = statement.values({getattr(self.model, name): value for name, value in values.items()})

        result = self.session.exec(statement)
        self.session.commit()
        if result.rowcount == 0:
            logger.info("No %s row updated for id %s", self.model.__tablename__, entity_id)
        return WriteResult(affected=result.rowcount, id=entity_id)

    def duplicate(self, entity_id: int, owner_id: Optional[int] = None) -> WriteResult:
        """Copy every non-identifier field of a row into a new row with the same owner.

        The source row is read with a row lock and the copy is inserted in the
        same transaction.
        """
        statement = select(self.model).where(self.id_column == entity_id).with_for_update()
        if owner_id is not None:
            statement = statement.where(self.model.user_id == owner_id)
        source = self.session.exec(statement).first()
        if source is None:
            self.session.rollback()
            return WriteResult(affected=0)

        copied = source.model_dump(exclude={self.id_field, "created_at", "updated_at"})
        item = self.model(**copied)
        self.session.add(item)
        self.session.commit()
        self.session.refresh(item)
        new_id = getattr(item, self.id_field)
        logger.info("Duplicated %s %s as %s", self.model.__tablename__, entity_id, new_id)
        return WriteResult(affected=1, id=new_id)


class TaskRepository(OwnedItemRepository[Task]):
    model = Task
    id_field = "task_id"
    required_fields = ("title", "description")
    mutable_fields = ("title", "description", "due_date", "status", "project", "team")


class ProjectRepository(OwnedItemRepository[Project]):
    model = Project
    id_field = "project_id"
    required_fields = ("title", "description", "due_date", "status")


class ReminderRepository(OwnedItemRepository[Reminder]):
    model = Reminder
    id_field = "reminder_id"
    required_fields = ("title", "description", "due_date", "status")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())
