"""Shared test configuration and fixtures."""

import os

# Must be set before ``docstore_api.app.main`` is imported: the module
# level app reads the process settings on import.
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("JWT_SECRET", "test-secret-key")
os.environ.setdefault("ADMIN_PASSWORD", "password123")

import pytest
from fastapi.testclient import TestClient

from docstore_api.app.core.config import Settings
from docstore_api.app.core.security import create_token_for_user
from docstore_api.app.core.store import DocumentStore
from docstore_api.app.main import create_app
from docstore_api.app.services.document_service import DocumentService


@pytest.fixture
def store():
    return DocumentStore()


@pytest.fixture
def service(store):
    return DocumentService(store)


@pytest.fixture
def settings():
    return Settings(
        environment="test",
        project_name="DocStore API",
        api_version="1.0.0",
        log_file=None,
        secret_key="test-secret-key",
        access_token_expire_minutes=60,
        admin_username="admin",
        admin_password="password123",
        enable_cors=False,
    )


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def auth_headers(settings):
    return {"Authorization": f"Bearer {create_token_for_user('admin', settings)}"}
