import pytest

from hanuram.utils.security import verify_password


@pytest.mark.anyio
async def test_create_account_logs_the_user_in(client, users):
    resp = await client.post(
        "/home/createaccount",
        json={"name": "Asha", "email": "Asha@X.com", "password": "secret1"},
    )

    assert resp.status_code == 201
    assert resp.json()["email"] == "asha@x.com"
    assert verify_password("secret1", users.users["asha@x.com"].password_hash)

    status = await client.get("/api/user-status")
    assert status.json() == {"loggedIn": True, "name": "Asha"}


@pytest.mark.anyio
async def test_logout_clears_the_session(client):
    await client.post(
        "/home/createaccount",
        json={"name": "Asha", "email": "asha@x.com", "password": "secret1"},
    )

    resp = await client.post("/api/logout")
    assert resp.status_code == 200

    status = await client.get("/api/user-status")
    assert status.json() == {"loggedIn": False, "name": None}


@pytest.mark.anyio
async def test_duplicate_account_is_409(client, users):
    users.add_user("asha@x.com")

    resp = await client.post(
        "/home/createaccount",
        json={"name": "Asha", "email": "asha@x.com", "password": "secret1"},
    )

    assert resp.status_code == 409


@pytest.mark.anyio
async def test_create_account_requires_all_fields(client):
    resp = await client.post("/home/createaccount", json={"name": "Asha", "email": "asha@x.com"})

    assert resp.status_code == 400
    assert resp.json()["message"] == "All fields are required to create an account."


@pytest.mark.anyio
async def test_create_account_rejects_short_password(client):
    resp = await client.post(
        "/home/createaccount",
        json={"name": "Asha", "email": "asha@x.com", "password": "abc"},
    )

    assert resp.status_code == 400


@pytest.mark.anyio
async def test_login(client, users):
    users.add_user("asha@x.com", password="secret1", name="Asha")

    resp = await client.post("/home/login", json={"email": "asha@x.com", "password": "secret1"})

    assert resp.status_code == 200
    assert resp.json()["name"] == "Asha"


@pytest.mark.anyio
async def test_login_with_wrong_password_is_401(client, users):
    users.add_user("asha@x.com", password="secret1")

    resp = await client.post("/home/login", json={"email": "asha@x.com", "password": "nope"})

    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid email or password."


@pytest.mark.anyio
async def test_login_requires_both_fields(client):
    resp = await client.post("/home/login", json={"email": "asha@x.com"})

    assert resp.status_code == 400
