"""
Authentication endpoint for API v1.

A single administrator account is configured through the settings.
Successful logins receive a signed bearer token that authorises the
document routes.
"""

import logging

from fastapi import APIRouter, HTTPException, Request, status

from docstore_api.app.core.config import Settings
from docstore_api.app.core.security import create_token_for_user, verify_credentials
from docstore_api.app.schemas.auth import LoginRequest, LoginResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(credentials: LoginRequest, request: Request) -> LoginResponse:
    """Authenticate the administrator and return an access token.

    Returns HTTP 401 if the username or password does not match.
    """
    settings: Settings = request.app.state.settings
    if not verify_credentials(credentials.username, credentials.password, settings):
        logger.warning("Failed login attempt for user %s", credentials.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    token = create_token_for_user(credentials.username, settings)
    logger.info("User %s logged in", credentials.username)
    return LoginResponse(token=token, user=credentials.username)
