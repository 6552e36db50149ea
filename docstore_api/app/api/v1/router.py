"""
Top‑level router for version 1 of the API.

Mounted by ``create_app`` under ``/api/v1``.
"""

from fastapi import APIRouter

from .endpoints import auth, documents

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(documents.router, prefix="/documents", tags=["documents"])
