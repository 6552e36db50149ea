"""Authentication: token helpers, login route and bearer guard."""

import pytest

from docstore_api.app.core.security import (
    create_access_token,
    create_token_for_user,
    decode_access_token,
    verify_credentials,
)

LOGIN = "/api/v1/auth/login"
DOCS = "/api/v1/documents"


def test_token_round_trip(settings):
    token = create_token_for_user("admin", settings)
    payload = decode_access_token(token, settings.secret_key)
    assert payload["sub"] == "admin"
    assert payload["exp"] > 0


def test_token_rejected_with_wrong_secret(settings):
    token = create_token_for_user("admin", settings)
    assert decode_access_token(token, "another-secret") is None


def test_expired_token_rejected():
    token = create_access_token({"sub": "admin"}, "secret", expires_delta=-10)
    assert decode_access_token(token, "secret") is None


@pytest.mark.parametrize("token", ["", "invalid", "invalid.token.here", "a.b.c.d"])
def test_malformed_token_rejected(token):
    assert decode_access_token(token, "secret") is None


def test_tampered_payload_rejected(settings):
    header, _, signature = create_token_for_user("admin", settings).split(".")
    forged = create_access_token({"sub": "mallory"}, "other", 3600).split(".")[1]
    assert decode_access_token(f"{header}.{forged}.{signature}", settings.secret_key) is None


def test_verify_credentials(settings):
    assert verify_credentials("admin", "password123", settings)
    assert not verify_credentials("admin", "wrong", settings)
    assert not verify_credentials("someone", "password123", settings)


def test_login_success_returns_usable_token(client):
    response = client.post(LOGIN, json={"username": "admin", "password": "password123"})
    assert response.status_code == 200
    body = response.json()
    assert body["user"] == "admin"
    docs = client.get(DOCS, headers={"Authorization": f"Bearer {body['token']}"})
    assert docs.status_code == 200


@pytest.mark.parametrize(
    "credentials",
    [
        {"username": "wronguser", "password": "password123"},
        {"username": "admin", "password": "wrongpassword"},
    ],
)
def test_login_invalid_credentials_returns_401(client, credentials):
    response = client.post(LOGIN, json=credentials)
    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid credentials"}


@pytest.mark.parametrize(
    "credentials",
    [{"password": "password123"}, {"username": "admin"}, {}],
    ids=["missing-username", "missing-password", "empty"],
)
def test_login_missing_fields_returns_400(client, credentials):
    assert client.post(LOGIN, json=credentials).status_code == 400


@pytest.mark.parametrize(
    "header",
    [
        None,
        "InvalidFormat token",
        "Bearer",
        "Bearer ",
        "Bearer invalid.token.here",
    ],
)
def test_bad_authorization_header_returns_401(client, header):
    headers = {"Authorization": header} if header is not None else {}
    response = client.get(DOCS, headers=headers)
    assert response.status_code == 401


def test_token_signed_with_other_secret_returns_401(client):
    token = create_access_token({"sub": "admin"}, "not-the-app-secret", 3600)
    response = client.get(DOCS, headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid or expired token"}
