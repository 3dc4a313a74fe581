from datetime import timedelta

import asyncpg
import jwt

from shopfront_api.auth.tokens import TokenCodec
from shopfront_api.users import repository as user_repository


def test_missing_header_is_unauthenticated(client):
    response = client.get("/user")

    assert response.status_code == 401
    assert response.json() == {"error": "Access Denied. No token provided."}


def test_header_without_token_is_unauthenticated(client):
    for header in ("Bearer", "Bearer   ", "Basic dXNlcjpwYXNz"):
        response = client.get("/user", headers={"Authorization": header})
        assert response.status_code == 401


def test_garbage_token_is_forbidden(client):
    response = client.get("/user", headers={"Authorization": "Bearer not.a.token"})

    assert response.status_code == 403
    assert response.json() == {"error": "Invalid or Expired Token."}


def test_expired_token_is_forbidden(client, store, context):
    user = store.add_user(mobile_number="9876543210")
    stale = TokenCodec(
        context.settings.jwt_secret,
        clock=lambda: context.tokens.now_epoch_s() - timedelta(days=8).total_seconds(),
    ).issue(user)

    response = client.get("/user", headers={"Authorization": f"Bearer {stale}"})

    assert response.status_code == 403
    assert response.json() == {"error": "Invalid or Expired Token."}


def test_token_with_wrong_signature_is_forbidden(client, store):
    user = store.add_user(mobile_number="9876543210")
    forged = jwt.encode({"sub": str(user["id"]), "iat": 0, "exp": 2**31}, "not-the-secret", algorithm="HS256")

    response = client.get("/user", headers={"Authorization": f"Bearer {forged}"})

    assert response.status_code == 403


def test_token_for_deleted_user_is_forbidden(client, store, auth_header):
    user = store.add_user(mobile_number="9876543210")
    headers = auth_header(user)
    del store.users[user["id"]]

    response = client.get("/user", headers=headers)

    assert response.status_code == 403
    assert response.json() == {"error": "User not found or token invalid."}


def test_guard_short_circuits_the_handler(client, store):
    response = client.post("/address", json={"full_name": "x"})

    assert response.status_code == 401
    assert store.addresses == {}


def test_profile_includes_addresses(client, store, auth_header):
    user = store.add_user(mobile_number="9876543210", name="Asha")
    store.add_address(user_id=user["id"], full_name="Asha", city="Pune")
    other = store.add_user(mobile_number="1111111111")
    store.add_address(user_id=other["id"], full_name="Ravi", city="Delhi")

    response = client.get("/user", headers=auth_header(user))

    assert response.status_code == 200
    profile = response.json()["user"]
    assert profile["id"] == user["id"]
    assert profile["name"] == "Asha"
    assert [a["city"] for a in profile["addresses"]] == ["Pune"]


def test_database_failure_during_lookup_is_server_error(client, store, auth_header, monkeypatch):
    user = store.add_user(mobile_number="9876543210")

    async def unavailable(_db, user_id):
        raise asyncpg.PostgresError("connection reset")

    monkeypatch.setattr(user_repository, "get_user_by_id", unavailable)

    response = client.get("/user", headers=auth_header(user))

    assert response.status_code == 500
    assert response.json() == {"error": "connection reset"}
