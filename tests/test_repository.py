from datetime import date, datetime, timedelta, timezone

import pytest
from sqlalchemy import delete
from sqlmodel import select

from mindscript.errors import ValidationError
from mindscript.models import Project, Reminder, Task, User
from mindscript.services.repository import (
    ProjectRepository,
    ReminderRepository,
    TaskRepository,
    WriteResult,
)

TASK = {
    "title": "T",
    "description": "D",
    "due_date": date(2025, 1, 1),
    "status": "pending",
    "project": "Website",
    "team": "Core",
}


@pytest.fixture
def tasks(session):
    return TaskRepository(session)


def test_create_then_list_round_trip(tasks, user):
    task_id = tasks.create(TASK, user.id)

    rows = tasks.list_by_owner(user.id)
    assert [row.task_id for row in rows] == [task_id]
    row = rows[0]
    assert row.user_id == user.id
    assert row.title == "T"
    assert row.description == "D"
    assert row.due_date == date(2025, 1, 1)
    assert row.status == "pending"
    assert row.project == "Website"
    assert row.team == "Core"


def test_create_defaults_status_to_pending(tasks, user):
    task_id = tasks.create({"title": "T", "description": "D"}, user.id)
    assert tasks.get(task_id).status == "pending"


def test_create_requires_fields(tasks, user):
    with pytest.raises(ValidationError) as exc_info:
        tasks.create({"title": "T", "description": "  "}, user.id)
    assert "description" in exc_info.value.message


def test_project_requires_due_date_and_status(session, user):
    with pytest.raises(ValidationError) as exc_info:
        ProjectRepository(session).create({"title": "P", "description": "D"}, user.id)
    assert "due_date" in exc_info.value.message
    assert "status" in exc_info.value.message


def test_list_by_owner_is_empty_for_user_without_rows(tasks, user):
    assert tasks.list_by_owner(user.id) == []


def test_list_by_owner_keeps_insertion_order_and_isolation(tasks, make_user):
    alice, bob = make_user(), make_user()
    first = tasks.create({**TASK, "title": "first"}, alice.id)
    tasks.create({**TASK, "title": "bob's"}, bob.id)
    second = tasks.create({**TASK, "title": "second"}, alice.id)

    assert [row.task_id for row in tasks.list_by_owner(alice.id)] == [first, second]


def test_remove_deletes_owned_row(tasks, user):
    task_id = tasks.create(TASK, user.id)

    result = tasks.remove(user.id, task_id)

    assert result == WriteResult(affected=1, id=task_id)
    assert tasks.list_by_owner(user.id) == []


def test_remove_by_other_owner_is_soft_failure(tasks, make_user):
    owner, other = make_user(), make_user()
    task_id = tasks.create(TASK, owner.id)

    result = tasks.remove(other.id, task_id)

    assert result.affected == 0
    assert not result.ok
    assert [row.task_id for row in tasks.list_by_owner(owner.id)] == [task_id]


def test_edit_updates_only_supplied_fields(tasks, user):
    task_id = tasks.create(TASK, user.id)

    result = tasks.edit({"status": "completed"}, task_id)

    assert result.ok
    row = tasks.get(task_id)
    assert row.status == "completed"
    assert row.title == "T"
    assert row.team == "Core"


def _naive_utc(value):
    return value.astimezone(timezone.utc).replace(tzinfo=None) if value.tzinfo else value


def test_timestamps_are_utc_and_refreshed_on_edit(tasks, user):
    before = datetime.now(timezone.utc).replace(tzinfo=None)
    task_id = tasks.create(TASK, user.id)

    created = tasks.get(task_id)
    created_at = _naive_utc(created.created_at)
    first_update = _naive_utc(created.updated_at)
    assert before - timedelta(seconds=1) <= created_at <= before + timedelta(minutes=1)

    assert tasks.edit({"title": "T2"}, task_id).ok
    edited = tasks.get(task_id)
    assert _naive_utc(edited.created_at) == created_at
    assert _naive_utc(edited.updated_at) >= first_update


def test_edit_with_wrong_owner_affects_nothing(tasks, make_user):
    owner, other = make_user(), make_user()
    task_id = tasks.create(TASK, owner.id)

    result = tasks.edit({"title": "stolen"}, task_id, owner_id=other.id)

    assert result.affected == 0
    assert tasks.get(task_id).title == "T"


def test_edit_missing_row_affects_nothing(tasks, user):
    assert tasks.edit({"title": "x"}, 999, owner_id=user.id).affected == 0
    assert tasks.edit({"status": "completed"}, 999).affected == 0


def test_edit_rejects_invalid_transition(tasks, user):
    task_id = tasks.create({**TASK, "status": "completed"}, user.id)

    with pytest.raises(ValidationError):
        tasks.edit({"status": "pending"}, task_id, owner_id=user.id)
    assert tasks.get(task_id).status == "completed"


def test_edit_requires_a_field(tasks, user):
    task_id = tasks.create(TASK, user.id)
    with pytest.raises(ValidationError):
        tasks.edit({}, task_id)


def test_duplicate_copies_every_field(tasks, user):
    task_id = tasks.create(TASK, user.id)

    result = tasks.duplicate(task_id)

    assert result.ok
    assert result.id != task_id
    original, copy = tasks.get(task_id), tasks.get(result.id)
    for field in ("user_id", "title", "description", "due_date", "status", "project", "team"):
        assert getattr(copy, field) == getattr(original, field)
    assert len(tasks.list_by_owner(user.id)) == 2


def test_duplicate_missing_row_is_not_found(tasks):
    result = tasks.duplicate(12345)
    assert result == WriteResult(affected=0)


def test_duplicate_with_other_owner_is_not_found(tasks, make_user):
    owner, other = make_user(), make_user()
    task_id = tasks.create(TASK, owner.id)

    assert tasks.duplicate(task_id, owner_id=other.id).affected == 0
    assert len(tasks.list_by_owner(owner.id)) == 1


@pytest.mark.parametrize(
    "repository_class,id_field",
    [(ProjectRepository, "project_id"), (ReminderRepository, "reminder_id")],
)
def test_projects_and_reminders_share_the_contract(session, user, repository_class, id_field):
    repo = repository_class(session)
    fields = {"title": "Q1", "description": "D", "due_date": date(2025, 3, 31), "status": "in-progress"}

    new_id = repo.create(fields, user.id)
    copy = repo.duplicate(new_id, owner_id=user.id)
    edited = repo.edit({"status": "cancelled"}, copy.id, owner_id=user.id)

    rows = repo.list_by_owner(user.id)
    assert [getattr(row, id_field) for row in rows] == [new_id, copy.id]
    assert edited.ok
    assert rows[1].status == "cancelled"
    assert repo.remove(user.id, new_id).affected == 1


def test_deleting_user_cascades_to_owned_rows(session, user):
    TaskRepository(session).create(TASK, user.id)
    ProjectRepository(session).create(
        {"title": "P", "description": "D", "due_date": date(2025, 1, 1), "status": "pending"}, user.id
    )
    ReminderRepository(session).create(
        {"title": "R", "description": "D", "due_date": date(2025, 1, 1), "status": "pending"}, user.id
    )

    session.exec(delete(User).where(User.id == user.id))
    session.commit()

    for model in (Task, Project, Reminder):
        assert session.exec(select(model)).all() == []
