from app.core.config import settings

API = settings.API_PREFIX


def first_user_id(client):
    return client.get(f"{API}/users").json()["data"][0]["id"]


def test_health(client):
    response = client.get(f"{API}/health")

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "API is healthy"
    assert data["timestamp"]


def test_root_lists_endpoints(client):
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["version"] == "1.0.0"
    assert data["endpoints"]["users"]["stats"] == f"GET {API}/users/stats"


def test_process_time_header(client):
    response = client.get(f"{API}/health")

    assert float(response.headers["X-Process-Time"]) >= 0


def test_list_users_returns_seed_data(client):
    response = client.get(f"{API}/users")

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Users retrieved successfully"
    assert len(data["data"]) == 2
    assert set(data["data"][0]) == {"id", "name", "email", "age", "createdAt", "updatedAt"}


def test_get_user(client):
    user_id = first_user_id(client)

    response = client.get(f"{API}/users/{user_id}")

    assert response.status_code == 200
    assert response.json()["data"]["id"] == user_id


def test_get_unknown_user(client):
    response = client.get(f"{API}/users/non-existent-id")

    assert response.status_code == 404
    assert response.json()["error"] == "User not found"


def test_create_invalid_payload(client):
    response = client.post(f"{API}/users", json={"name": "A", "email": "invalid", "age": 200})

    assert response.status_code == 400
    error = response.json()["error"]
    assert "Name must be at least 2 characters long" in error
    assert "Valid email is required" in error
    assert "Age must be a number between 0 and 150" in error


def test_create_empty_body(client):
    response = client.post(f"{API}/users", json={})

    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed"


def test_create_duplicate_email(client):
    response = client.post(f"{API}/users", json={"name": "Duplicate", "email": "john@example.com", "age": 30})

    assert response.status_code == 409
    assert response.json()["error"] == "User with this email already exists"


def test_create_boundary_ages(client):
    for age, email in ((0, "zero@example.com"), (150, "max@example.com")):
        response = client.post(f"{API}/users", json={"name": "Boundary", "email": email, "age": age})
        assert response.status_code == 201
        assert response.json()["data"]["age"] == age

    for age, email in ((-1, "neg@example.com"), (151, "over@example.com")):
        response = client.post(f"{API}/users", json={"name": "Boundary", "email": email, "age": age})
        assert response.status_code == 400
        assert response.json()["error"] == "Age must be a number between 0 and 150"


def test_update_invalid_patch(client):
    response = client.put(f"{API}/users/{first_user_id(client)}", json={"age": 200})

    assert response.status_code == 400
    assert "Age must be a number between 0 and 150" in response.json()["error"]


def test_update_unknown_user(client):
    response = client.put(f"{API}/users/non-existent-id", json={"name": "Updated Name"})

    assert response.status_code == 404
    assert response.json()["error"] == "User not found"


def test_update_to_taken_email(client):
    response = client.put(f"{API}/users/{first_user_id(client)}", json={"email": "jane@example.com"})

    assert response.status_code == 409
    assert response.json()["message"] == "Failed to update user"


def test_update_without_body_refreshes_timestamp(client):
    user = client.get(f"{API}/users").json()["data"][0]

    response = client.put(f"{API}/users/{user['id']}")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["updatedAt"] != user["updatedAt"]
    assert {k: data[k] for k in ("name", "email", "age", "createdAt")} == {
        k: user[k] for k in ("name", "email", "age", "createdAt")
    }


def test_delete_unknown_user(client):
    response = client.delete(f"{API}/users/non-existent-id")

    assert response.status_code == 404
    assert response.json()["error"] == "User not found"


def test_stats(client):
    response = client.get(f"{API}/users/stats")

    assert response.status_code == 200
    assert response.json()["data"] == {"totalUsers": 2, "averageAge": 27.5, "youngestUser": 25, "oldestUser": 30}


def test_user_lifecycle(client):
    created = client.post(f"{API}/users", json={"name": "Test User", "email": "test@example.com", "age": 25})
    assert created.status_code == 201
    assert created.json()["success"] is True
    assert created.json()["data"]["age"] == 25
    user_id = created.json()["data"]["id"]

    fetched = client.get(f"{API}/users/{user_id}")
    assert fetched.status_code == 200
    assert fetched.json()["data"]["name"] == "Test User"

    updated = client.put(f"{API}/users/{user_id}", json={"age": 26})
    assert updated.status_code == 200
    assert updated.json()["data"]["age"] == 26
    assert updated.json()["data"]["email"] == "test@example.com"

    deleted = client.delete(f"{API}/users/{user_id}")
    assert deleted.status_code == 200
    assert deleted.json() == {"success": True, "message": "User deleted successfully"}

    gone = client.get(f"{API}/users/{user_id}")
    assert gone.status_code == 404
    assert gone.json()["error"] == "User not found"
