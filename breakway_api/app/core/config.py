"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, so no ``pydantic_settings`` dependency is
needed.  Defaults are provided for all fields and reproduce the demo
storefront setup (seeded administrator, permissive CORS, 2 MiB request
bodies for profile pictures).  In a production deployment you should
override these via environment variables.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Breakway Gas API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Header carrying the caller's user identifier.  The value is trusted
    # as-is: an upstream gateway is expected to authenticate callers.
    user_id_header: str = os.getenv("USER_ID_HEADER", "X-User-Id")

    # ``plain`` keeps credentials as opaque strings compared by equality.
    # ``pbkdf2`` stores salted PBKDF2 hashes instead.
    password_scheme: str = os.getenv("PASSWORD_SCHEME", "plain")

    # Comma-separated list of allowed CORS origins.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Largest accepted request body.  Profile pictures are sent inline as
    # data URLs, hence the generous default.
    max_body_bytes: int = int(os.getenv("MAX_BODY_BYTES", str(2 * 1024 * 1024)))

    # Default administrator created when the in-memory store is built.
    seed_admin: bool = _env_flag("SEED_ADMIN", "true")
    admin_id: str = os.getenv("ADMIN_ID", "U-1670000000000")
    admin_name: str = os.getenv("ADMIN_NAME", "Admin")
    admin_email: str = os.getenv("ADMIN_EMAIL", "admin@breakway.com")
    admin_password: str = os.getenv("ADMIN_PASSWORD", "admin")

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
