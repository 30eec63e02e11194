"""Authentication endpoint tests."""

from sqlalchemy import select

from app.models import User


def test_register_returns_user_and_token(client, session_local) -> None:
    response = client.post(
        "/api/v1/auth/register",
        json={"emailAddress": "new@example.com", "password": "secret123", "firstName": "Ada", "lastName": "Cook"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["user"]["emailAddress"] == "new@example.com"
    assert body["user"]["firstName"] == "Ada"
    assert "passwordHash" not in body["user"]
    assert body["token"]

    with session_local() as db:
        user = db.scalar(select(User).where(User.email_address == "new@example.com"))
        assert user is not None
        assert user.password_hash != "secret123"


def test_register_duplicate_email_is_bad_request(client, api_user) -> None:
    api_user("dup@example.com")

    response = client.post(
        "/api/v1/auth/register",
        json={"emailAddress": "dup@example.com", "password": "secret123", "firstName": "A", "lastName": "B"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["status"] == 400


def test_token_returns_token_and_id(client, api_user) -> None:
    user_id, _ = api_user("login@example.com", password="hunter22")

    response = client.post("/api/v1/auth/token", json={"emailAddress": "login@example.com", "password": "hunter22"})

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == user_id
    assert body["token"]

    me = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {body['token']}"})
    assert me.status_code == 200
    assert me.json()["user"]["id"] == user_id


def test_token_rejects_bad_password(client, api_user) -> None:
    api_user("login@example.com", password="hunter22")

    response = client.post("/api/v1/auth/token", json={"emailAddress": "login@example.com", "password": "wrong"})

    assert response.status_code == 401
    assert response.json() == {"error": {"message": "Invalid email/password.", "status": 401}}


def test_protected_route_requires_token(client) -> None:
    response = client.post("/api/v1/restaurants", json={"name": "Nope"})

    assert response.status_code == 401
    assert response.json()["error"]["status"] == 401


def test_garbage_token_is_unauthorized(client) -> None:
    response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401


def test_validation_errors_are_bad_requests(client) -> None:
    response = client.post("/api/v1/auth/register", json={"emailAddress": "x@example.com"})

    assert response.status_code == 400
    assert response.json()["error"]["status"] == 400


def test_token_of_deleted_user_is_unauthorized(client, api_user) -> None:
    user_id, headers = api_user("ghost@example.com")
    assert client.delete(f"/api/v1/users/{user_id}", headers=headers).status_code == 200

    response = client.get("/api/v1/auth/me", headers=headers)

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Invalid authentication token."
