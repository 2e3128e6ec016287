import pytest
from httpx import AsyncClient
from sqlalchemy import select

from scholarfolio.models import User


async def test_register_then_login(client: AsyncClient) -> None:
    response = await client.post("/register", json={"email": "Ada@Example.com ", "password": "secret1"})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["email"] == "ada@example.com"
    assert body["message"] == "Account created successfully!"
    assert isinstance(body["id"], int)

    response = await client.post("/login", json={"email": "ADA@example.com", "password": "secret1"})
    assert response.status_code == 200
    assert response.json() == {"success": True, "email": "ada@example.com", "message": "Login successful!"}


async def test_signup_is_an_alias_of_register(client: AsyncClient) -> None:
    response = await client.post("/signup", json={"name": "Ada", "email": "ada@example.com", "password": "secret1"})
    assert response.status_code == 200
    assert response.json()["success"] is True


async def test_duplicate_email_is_rejected(client: AsyncClient) -> None:
    await client.post("/register", json={"email": "ada@example.com", "password": "secret1"})
    response = await client.post("/signup", json={"email": " ADA@example.com", "password": "another1"})
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "User already exists."}


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"email": "ada@example.com"}, "Email and password are required."),
        ({"password": "secret1"}, "Email and password are required."),
        ({"email": "ada@example.com", "password": "12345"}, "Password must be at least 6 characters long."),
    ],
)
async def test_register_validation(client: AsyncClient, payload: dict, message: str) -> None:
    response = await client.post("/register", json=payload)
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": message}


async def test_login_failures_are_uniform(client: AsyncClient) -> None:
    await client.post("/register", json={"email": "ada@example.com", "password": "secret1"})

    wrong_password = await client.post("/login", json={"email": "ada@example.com", "password": "nope123"})
    unknown_user = await client.post("/login", json={"email": "bob@example.com", "password": "secret1"})

    assert wrong_password.status_code == unknown_user.status_code == 400
    assert wrong_password.json() == unknown_user.json() == {"success": False, "message": "Invalid credentials."}


async def test_login_requires_both_fields(client: AsyncClient) -> None:
    response = await client.post("/login", json={"email": "ada@example.com"})
    assert response.status_code == 400
    assert response.json()["message"] == "Email and password are required."


async def test_password_is_stored_hashed(client: AsyncClient, db) -> None:
    await client.post("/register", json={"email": "ada@example.com", "password": "secret1"})
    user = (await db.execute(select(User))).scalar_one()
    assert user.password != "secret1"
    assert user.password.startswith("$2")


async def test_six_character_password_is_enough(client: AsyncClient) -> None:
    response = await client.post("/register", json={"email": "ada@example.com", "password": "abcdef"})
    assert response.status_code == 200
    assert (await client.post("/login", json={"email": "ada@example.com", "password": "abcdef"})).status_code == 200


@pytest.mark.parametrize("path", ["/register", "/signup", "/login"])
@pytest.mark.parametrize(
    "request_kwargs",
    [
        {},
        {"json": ["ada@example.com", "secret1"]},
        {"content": "null", "headers": {"Content-Type": "application/json"}},
        {"content": "{not json", "headers": {"Content-Type": "application/json"}},
        {"json": {"email": 42, "password": ["secret1"]}},
    ],
    ids=["no-body", "list-body", "null-body", "malformed-json", "wrong-types"],
)
async def test_unusable_bodies_keep_the_auth_envelope(
    client: AsyncClient, path: str, request_kwargs: dict
) -> None:
    response = await client.post(path, **request_kwargs)
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Email and password are required."}


async def test_correct_password_logs_in_after_failures(client: AsyncClient) -> None:
    await client.post("/register", json={"email": "ada@example.com", "password": "secret1"})
    for _ in range(10):
        response = await client.post("/login", json={"email": "ada@example.com", "password": "wrong12"})
        assert response.status_code == 400

    response = await client.post("/login", json={"email": "ada@example.com", "password": "secret1"})
    assert response.status_code == 200
    assert response.json()["success"] is True
