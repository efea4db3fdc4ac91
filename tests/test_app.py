def test_root_health(client):
    response = client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "API is running successfully"
    assert "timestamp" in body


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"


def test_unknown_api_route(client):
    response = client.post("/api/nothing/here")

    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "message": "API endpoint not found",
        "path": "/api/nothing/here",
    }


def test_database_check_and_setup(client, headers):
    response = client.get("/api/database/check", headers=headers)
    assert response.status_code == 200
    body = response.json()
    assert {"users", "tasks", "projects", "reminders"} <= set(body["tables"])
    assert "dueDate" not in body["structure"]["tasks"]
    assert {"task_id", "user_id", "due_date", "status"} <= set(body["structure"]["tasks"])

    response = client.post("/api/database/setup", headers=headers)
    assert response.status_code == 200
    assert response.json()["success"] is True


def test_database_routes_are_protected(client):
    assert client.get("/api/database/check").status_code == 401


def test_serverless_handler_wraps_app():
    from mindscript.main import app
    from mindscript.wsgi import handler

    assert handler.app is app
