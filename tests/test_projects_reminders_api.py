import pytest

ITEM = {"title": "Launch", "description": "Ship v1", "dueDate": "2025-06-30", "status": "pending"}

ENTITIES = [
    pytest.param("projects", "project_id", id="projects"),
    pytest.param("reminders", "reminder_id", id="reminders"),
]


@pytest.mark.parametrize("entity,id_field", ENTITIES)
def test_lifecycle(client, user, headers, entity, id_field):
    response = client.post(f"/api/{entity}/add", json={**ITEM, "user_id": user.id}, headers=headers)
    assert response.status_code == 201
    item_id = response.json()[id_field]

    response = client.post(f"/api/{entity}/duplicate", json={id_field: item_id}, headers=headers)
    assert response.status_code == 200
    copy_id = response.json()[id_field]
    assert copy_id != item_id

    response = client.post(
        f"/api/{entity}/edit",
        json={id_field: copy_id, "status": "in-progress", "title": "Launch again"},
        headers=headers,
    )
    assert response.status_code == 201
    assert response.json()[id_field] == copy_id

    response = client.post(f"/api/{entity}/render", json={"user_id": user.id}, headers=headers)
    assert response.status_code == 200
    rows = response.json()[entity]
    assert [row[id_field] for row in rows] == [item_id, copy_id]
    assert rows[0]["title"] == "Launch"
    assert rows[1]["title"] == "Launch again"
    assert rows[1]["status"] == "in-progress"
    assert rows[1]["dueDate"] == "2025-06-30"

    response = client.post(
        f"/api/{entity}/delete", json={"user_id": user.id, id_field: item_id}, headers=headers
    )
    assert response.status_code == 200
    assert response.json()["removed"] == {"affectedRows": 1}


@pytest.mark.parametrize("entity,id_field", ENTITIES)
def test_add_requires_all_fields(client, user, headers, entity, id_field):
    response = client.post(
        f"/api/{entity}/add",
        json={"title": "Launch", "description": "Ship v1", "user_id": user.id},
        headers=headers,
    )

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "All fields are required"}


@pytest.mark.parametrize("entity,id_field", ENTITIES)
def test_add_with_blank_due_date_is_missing_field(client, user, headers, entity, id_field):
    response = client.post(
        f"/api/{entity}/add",
        json={**ITEM, "dueDate": "", "user_id": user.id},
        headers=headers,
    )

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "All fields are required"}


@pytest.mark.parametrize("entity,id_field", ENTITIES)
def test_delete_foreign_item_leaves_it_in_place(client, make_user, bearer, entity, id_field):
    owner, other = make_user(), make_user()
    response = client.post(f"/api/{entity}/add", json={**ITEM, "user_id": owner.id}, headers=bearer(owner))
    item_id = response.json()[id_field]

    response = client.post(
        f"/api/{entity}/delete", json={"user_id": other.id, id_field: item_id}, headers=bearer(other)
    )
    assert response.status_code == 404
    assert response.json()["removed"] == {"affectedRows": 0}

    response = client.post(f"/api/{entity}/render", json={"user_id": owner.id}, headers=bearer(owner))
    assert len(response.json()[entity]) == 1


@pytest.mark.parametrize("entity,id_field", ENTITIES)
def test_edit_foreign_item_is_not_applied(client, make_user, bearer, entity, id_field):
    owner, other = make_user(), make_user()
    response = client.post(f"/api/{entity}/add", json={**ITEM, "user_id": owner.id}, headers=bearer(owner))
    item_id = response.json()[id_field]

    response = client.post(
        f"/api/{entity}/edit", json={id_field: item_id, "title": "mine now"}, headers=bearer(other)
    )
    assert response.status_code == 404

    response = client.post(f"/api/{entity}/render", json={"user_id": owner.id}, headers=bearer(owner))
    assert response.json()[entity][0]["title"] == "Launch"


@pytest.mark.parametrize("entity,id_field", ENTITIES)
def test_duplicate_requires_id(client, headers, entity, id_field):
    response = client.post(f"/api/{entity}/duplicate", json={}, headers=headers)

    assert response.status_code == 400
    assert response.json()["success"] is False
