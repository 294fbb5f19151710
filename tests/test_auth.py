import datetime
import time
import uuid
from unittest.mock import patch

import jwt
import pytest

from birja.controllers.auth import DUMMY_PASSWORD_HASH, AuthController
from birja.core.exceptions import UnauthorizedException
from birja.core.password import PasswordHandler
from birja.core.security import JWTHandler
from birja.models import User
from birja.repositories.user import UserRepository


def test_register_returns_public_fields(client):
    response = client.post("/api/auth/register", json={"username": "acme", "password": "pw123"})

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"id", "username", "role"}
    assert body["username"] == "acme"
    assert body["role"] == "EMPLOYER"
    uuid.UUID(body["id"])


def test_register_stores_hash_not_plaintext(client, run_db):
    client.post("/api/auth/register", json={"username": "acme", "password": "pw123"})

    user: User = run_db(lambda session: UserRepository(session).get_by_username("acme"))
    assert user.password != "pw123"
    assert PasswordHandler.verify(user.password, "pw123")


def test_register_same_username_twice_conflicts(client):
    first = client.post("/api/auth/register", json={"username": "acme", "password": "pw123"})
    second = client.post("/api/auth/register", json={"username": "acme", "password": "other"})

    assert first.status_code == 200
    assert second.status_code == 409
    assert second.json() == {"error": "Username already taken"}


@pytest.mark.parametrize("payload", [
    {},
    {"username": "acme"},
    {"password": "pw123"},
    {"username": "", "password": "pw123"},
    {"username": "acme", "password": ""},
])
def test_register_requires_both_fields(client, payload):
    response = client.post("/api/auth/register", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "username and password required"}


def test_login_returns_token_and_user(client):
    registered = client.post("/api/auth/register", json={"username": "acme", "password": "pw123"}).json()

    response = client.post("/api/auth/login", json={"username": "acme", "password": "pw123"})

    assert response.status_code == 200
    body = response.json()
    assert body["user"] == registered
    claims = JWTHandler.decode(body["token"])
    assert claims["id"] == registered["id"]
    assert claims["username"] == "acme"
    assert claims["role"] == "EMPLOYER"


def test_login_token_expires_in_seven_days(client):
    client.post("/api/auth/register", json={"username": "acme", "password": "pw123"})
    token = client.post("/api/auth/login", json={"username": "acme", "password": "pw123"}).json()["token"]

    claims = jwt.decode(token, options={"verify_signature": False})
    assert abs(claims["exp"] - (time.time() + 7 * 24 * 3600)) < 60


def test_wrong_password_and_unknown_user_share_error(client):
    client.post("/api/auth/register", json={"username": "acme", "password": "pw123"})

    wrong_password = client.post("/api/auth/login", json={"username": "acme", "password": "nope"})
    unknown_user = client.post("/api/auth/login", json={"username": "ghost", "password": "pw123"})

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json() == {"error": "Invalid credentials"}


def test_login_requires_both_fields(client):
    response = client.post("/api/auth/login", json={"username": "acme"})

    assert response.status_code == 400
    assert response.json() == {"error": "username and password required"}


def test_decode_rejects_expired_token():
    token = JWTHandler.encode_access_token(
        {"id": str(uuid.uuid4()), "username": "acme", "role": "EMPLOYER"},
        expires_delta=datetime.timedelta(seconds=-5),
    )

    with pytest.raises(UnauthorizedException) as exc_info:
        JWTHandler.decode(token)
    assert exc_info.value.message == "Invalid token"


def test_decode_rejects_foreign_signature():
    token = jwt.encode({"id": "x", "username": "acme", "role": "EMPLOYER", "type": "access"}, "other-secret")

    with pytest.raises(UnauthorizedException):
        JWTHandler.decode(token)


def test_decode_rejects_garbage():
    with pytest.raises(UnauthorizedException):
        JWTHandler.decode("not-a-jwt")


def test_password_handler_round_trip():
    hashed = PasswordHandler.hash("secret")

    assert hashed != "secret"
    assert PasswordHandler.verify(hashed, "secret")
    assert not PasswordHandler.verify(hashed, "Secret")
    assert not PasswordHandler.verify("not-a-bcrypt-hash", "secret")


def test_auth_controller_verify_returns_claims(client):
    client.post("/api/auth/register", json={"username": "acme", "password": "pw123"})
    token = client.post("/api/auth/login", json={"username": "acme", "password": "pw123"}).json()["token"]

    claims = AuthController.verify(token)

    assert claims["username"] == "acme"
    with pytest.raises(UnauthorizedException):
        AuthController.verify(token + "x")


def test_unknown_user_still_runs_password_check(client):
    client.post("/api/auth/register", json={"username": "acme", "password": "pw123"})

    with patch.object(PasswordHandler, "verify", wraps=PasswordHandler.verify) as verify:
        unknown = client.post("/api/auth/login", json={"username": "ghost", "password": "unknown-user"})
        wrong = client.post("/api/auth/login", json={"username": "acme", "password": "nope"})

    assert unknown.status_code == wrong.status_code == 401
    assert verify.call_count == 2
    assert verify.call_args_list[0].args == (DUMMY_PASSWORD_HASH, "unknown-user")
