"""Pydantic schemas for the login endpoint."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials submitted to ``POST /auth/login``."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    token: str = Field(..., description="Bearer token for the document routes")
    user: str
