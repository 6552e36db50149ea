"""
Configuration management.

The ``Settings`` dataclass reads configuration from environment
variables.  Before the values are read, ``load_settings`` loads
dotenv files from the ``environments`` directory: first the
environment specific ``.env.<APP_ENV>`` file, then the general
``.env`` file.  Variables already present in the process environment
always take precedence over values from files.

``JWT_SECRET`` and ``ADMIN_PASSWORD`` must be provided explicitly in
production.  Other environments fall back to insecure development
defaults and log a warning.
"""

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent

DEV_JWT_SECRET = "dev-insecure-jwt-secret"
DEV_ADMIN_PASSWORD = "admin"


def _env(key: str, default: str = "") -> str:
    value = os.getenv(key)
    return value if value else default


def _env_flag(key: str, default: str) -> bool:
    return _env(key, default).lower() in {"1", "true", "yes"}


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    environment: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "DocStore API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Signing key for access tokens.  Empty means "not configured"; see
    # ``load_settings`` for how that is resolved.
    secret_key: str = field(default_factory=lambda: _env("JWT_SECRET"))
    access_token_expire_minutes: int = field(
        default_factory=lambda: int(_env("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))
    )

    # Single administrator account accepted by the login endpoint.
    admin_username: str = field(default_factory=lambda: _env("ADMIN_USERNAME", "admin"))
    admin_password: str = field(default_factory=lambda: _env("ADMIN_PASSWORD"))

    server_host: str = field(default_factory=lambda: _env("SERVER_HOST", "0.0.0.0"))
    server_port: int = field(default_factory=lambda: int(_env("SERVER_PORT", "8080")))

    enable_cors: bool = field(default_factory=lambda: _env_flag("ENABLE_CORS", "true"))
    cors_origins: List[str] = field(default_factory=lambda: _split_origins(_env("CORS_ORIGINS", "*")))

    enable_https: bool = field(default_factory=lambda: _env_flag("ENABLE_HTTPS", "false"))
    cert_file: str = field(default_factory=lambda: _env("CERT_FILE", "ssl/cert.pem"))
    key_file: str = field(default_factory=lambda: _env("KEY_FILE", "ssl/key.pem"))

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def load_env_files(environment: str, base_dir: Path = PROJECT_ROOT) -> List[Path]:
    """Load ``.env.<environment>`` and ``.env`` from ``base_dir/environments``.

    Returns the files that were found and loaded.  Existing environment
    variables are never overridden.
    """
    loaded = []
    for name in (f".env.{environment}", ".env"):
        path = base_dir / "environments" / name
        if path.is_file():
            load_dotenv(path, override=False)
            logger.info("Loaded environment variables from %s", path)
            loaded.append(path)
        else:
            logger.debug("Environment file not found: %s", path)
    return loaded


def load_settings(base_dir: Path = PROJECT_ROOT) -> Settings:
    """Load dotenv files and build a ``Settings`` instance.

    Raises
    ------
    RuntimeError
        If a required secret is missing while running in production.
    """
    load_env_files(_env("APP_ENV", "development"), base_dir)
    settings = Settings()

    missing = [
        name
        for name, value in (("JWT_SECRET", settings.secret_key), ("ADMIN_PASSWORD", settings.admin_password))
        if not value
    ]
    if missing and settings.is_production:
        raise RuntimeError(f"Required environment variables are not set: {', '.join(missing)}")
    if missing:
        logger.warning(
            "Using development defaults for %s (environment: %s)",
            ", ".join(missing),
            settings.environment,
        )
        settings.secret_key = settings.secret_key or DEV_JWT_SECRET
        settings.admin_password = settings.admin_password or DEV_ADMIN_PASSWORD

    logger.info(
        "Configuration loaded - Environment: %s, Port: %s, Admin User: %s",
        settings.environment,
        settings.server_port,
        settings.admin_username,
    )
    return settings


@lru_cache()
def get_settings() -> Settings:
    """Return the process‑wide settings, loading them on first use."""
    return load_settings()
