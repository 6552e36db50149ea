"""Pydantic schema for the health probe."""

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness information returned by ``GET /health``."""

    status: str
    timestamp: datetime
    service: str
    version: str
    environment: str
