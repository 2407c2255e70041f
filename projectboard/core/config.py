"""
Configuration helpers for the projectboard backend.

Exposes a Settings object that reads environment variables (database URL,
admin password hash, session secret, listening address) so that
routers/services do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    public_base_url: str
    database_url: str
    admin_password_hash: str
    session_secret: str
    session_ttl_seconds: int
    host: str
    port: int
    log_level: str
    log_file: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        public_base_url=(os.getenv("PUBLIC_BASE_URL") or "").rstrip("/"),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./projectboard.db"),
        admin_password_hash=(os.getenv("ADMIN_PASSWORD_HASH") or "").strip(),
        session_secret=os.getenv("SESSION_SECRET") or "secret_default",
        session_ttl_seconds=max(60, _int(os.getenv("SESSION_TTL_SECONDS", "43200"), 43200)),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=(os.getenv("LOG_FILE") or "").strip(),
    )
