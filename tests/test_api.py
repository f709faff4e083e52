"""Health and authentication endpoint tests."""

from fastapi.testclient import TestClient

from achievify.api.dependencies import get_todo_service
from achievify.main import app
from achievify.models.user import User


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_register_user(client):
    """Test user registration."""
    response = client.post(
        "/api/register",
        json={
            "fullName": "  New User ",
            "username": " newuser ",
            "email": "newuser@example.com",
            "phone": "555-0100",
            "password": "password123",
        },
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Registered"}


def test_register_trims_fields_and_stores_missing_phone_as_null(client, db):
    """Test that strings are trimmed and an absent phone is NULL."""
    client.post(
        "/api/register",
        json={
            "fullName": "  Trim Me ",
            "username": " trimmed ",
            "email": " trimmed@example.com ",
            "phone": "   ",
            "password": "password123",
        },
    )
    user = db.query(User).filter(User.username == "trimmed").one()
    assert user.full_name == "Trim Me"
    assert user.email == "trimmed@example.com"
    assert user.phone is None
    assert user.password_hash != "password123"


def test_register_missing_fields(client):
    """Test registration without a password fails validation."""
    response = client.post(
        "/api/register",
        json={"fullName": "No Pass", "username": "nopass", "email": "nopass@example.com"},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Missing required fields"


def test_register_duplicate_username(client, user):
    """Test registering the same username twice fails with a conflict."""
    response = client.post(
        "/api/register",
        json={
            "fullName": "Other Alice",
            "username": user["username"],
            "email": "another@example.com",
            "password": "password123",
        },
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Username already taken"


def test_register_duplicate_email(client, user):
    """Test registration with duplicate email fails."""
    response = client.post(
        "/api/register",
        json={
            "fullName": "Email Clash",
            "username": "someone-else",
            "email": user["email"],
            "password": "password123",
        },
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Email already registered"


def test_register_username_conflict_reported_before_email(client, user):
    """Test that a username conflict wins when both username and email are taken."""
    response = client.post(
        "/api/register",
        json={
            "fullName": "Both Taken",
            "username": user["username"],
            "email": user["email"],
            "password": "password123",
        },
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Username already taken"


def test_login_with_username(client, user):
    """Test login returns only the public user projection."""
    response = client.post(
        "/api/login", json={"userOrEmail": "alice", "password": "s3cret-pass"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Logged in"
    assert set(data["user"]) == {"id", "fullName", "username", "email"}
    assert data["user"]["fullName"] == "Alice Tester"
    assert "password_hash" not in response.text


def test_login_with_email(client, user):
    """Test login accepts the email as identifier."""
    response = client.post(
        "/api/login", json={"userOrEmail": "alice@example.com", "password": "s3cret-pass"}
    )
    assert response.status_code == 200
    assert response.json()["user"]["id"] == user["id"]


def test_login_is_case_sensitive(client, user):
    """Test that identifiers are matched exactly."""
    response = client.post(
        "/api/login", json={"userOrEmail": "ALICE", "password": "s3cret-pass"}
    )
    assert response.status_code == 400
    assert response.json()["message"] == "User not found"


def test_login_wrong_password(client, user):
    """Test login with wrong password."""
    response = client.post("/api/login", json={"userOrEmail": "alice", "password": "wrongpass"})
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid password"


def test_login_missing_credentials(client):
    """Test login without a password."""
    response = client.post("/api/login", json={"userOrEmail": "alice"})
    assert response.status_code == 400
    assert response.json()["message"] == "Missing credentials"


def test_malformed_body_is_bad_request(client):
    """Test that type errors in the body are reported as 400 with a message."""
    response = client.post("/api/login", json={"userOrEmail": ["not", "a", "string"]})
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid request"}


def test_unexpected_error_is_generic_server_error(client):
    """Test that an unhandled exception becomes a 500 without leaking its text."""

    class BrokenTodoService:
        def list_todos(self, user_id, done):
            raise RuntimeError("db exploded secret")

    app.dependency_overrides[get_todo_service] = BrokenTodoService
    failing_client = TestClient(app, raise_server_exceptions=False)

    response = failing_client.get("/api/todos", params={"userId": 1})
    assert response.status_code == 500
    assert response.json() == {"message": "Server error"}
    assert "secret" not in response.text
