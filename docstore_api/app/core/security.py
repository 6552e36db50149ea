"""
Security helpers for JWT authentication.

This module implements a lightweight JSON Web Token (JWT) mechanism
using HMAC‑SHA256 signatures and base64url encoding.  Tokens carry the
subject (``sub``) and an expiration timestamp (``exp``) and are signed
with ``JWT_SECRET`` from the application settings.

``get_current_user`` is the FastAPI dependency guarding the document
routes.  It reads the signing key from the settings stored on
``app.state`` so that several applications with different settings can
live side by side (as they do in the test suite).
"""

import base64
import hashlib
import hmac
import json
import time
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import Settings


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(data: Dict[str, Any], secret: str, expires_delta: int) -> str:
    """Create a signed JWT token with the given payload.

    The payload is extended with an ``exp`` field set ``expires_delta``
    seconds in the future.  The token has the form
    ``header.payload.signature`` with each part base64url encoded.
    Clients send it as ``Authorization: Bearer <token>``.

    Parameters
    ----------
    data : dict
        Claims to embed in the token (e.g. ``{"sub": "admin"}``).
    secret : str
        HMAC signing key.
    expires_delta : int
        Lifetime of the token in seconds.  Zero or negative values
        produce an already expired token.
    """
    to_encode = data.copy()
    to_encode["exp"] = int(time.time()) + expires_delta
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, secret))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def create_token_for_user(username: str, settings: Settings) -> str:
    """Issue an access token for ``username`` using the configured lifetime."""
    return create_access_token(
        {"sub": username},
        settings.secret_key,
        settings.access_token_expire_minutes * 60,
    )


def decode_access_token(token: str, secret: str) -> Optional[Dict[str, Any]]:
    """Verify and decode a JWT token.

    Checks the structure, the HS256 header, the HMAC signature and the
    ``exp`` claim.  Returns the payload on success and ``None`` for any
    token that fails validation.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    try:
        header = json.loads(_b64_url_decode(header_b64).decode("utf-8"))
        actual_sig = _b64_url_decode(signature_b64)
    except (ValueError, UnicodeDecodeError):
        return None
    if not isinstance(header, dict) or header.get("alg") != "HS256":
        return None

    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    # Constant‑time comparison to prevent timing attacks
    if not hmac.compare_digest(_sign(signing_input, secret), actual_sig):
        return None

    try:
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except (ValueError, UnicodeDecodeError):
        return None
    if not isinstance(data, dict):
        return None
    exp = data.get("exp")
    if not isinstance(exp, (int, float)) or exp < time.time():
        return None
    return data


def verify_credentials(username: str, password: str, settings: Settings) -> bool:
    """Compare login credentials with the configured administrator account."""
    user_ok = hmac.compare_digest(username.encode("utf-8"), settings.admin_username.encode("utf-8"))
    pass_ok = hmac.compare_digest(password.encode("utf-8"), settings.admin_password.encode("utf-8"))
    return user_ok and pass_ok


security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Dict[str, Any]:
    """Dependency that returns the decoded token of the current caller.

    Raises HTTP 401 when the ``Authorization`` header is missing, does
    not use the Bearer scheme, or carries an invalid or expired token.
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Not authenticated")
    settings: Settings = request.app.state.settings
    payload = decode_access_token(credentials.credentials, settings.secret_key)
    if not payload or not payload.get("sub"):
        raise _unauthorized("Invalid or expired token")
    return payload
