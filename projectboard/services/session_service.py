"""Admin session helpers (login, cookies, validation)."""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Request, Response

from projectboard.core.config import get_settings
from projectboard.core.errors import AuthenticationError, AuthorizationError, ValidationError
from projectboard.core.security import sign_token, unsign_token, verify_password
from projectboard.db.models import AdminSession
from projectboard.repositories.sql_repository import SQLRepository

logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = "admin_session"

_repo = SQLRepository()


def _aware(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def login(password: Optional[str]) -> str:
    """Check the admin password and return a new session token."""
    if not password:
        raise ValidationError("Falta contraseña")
    settings = get_settings()
    if not settings.admin_password_hash:
        logger.warning("ADMIN_PASSWORD_HASH is not configured; rejecting login")
    if not verify_password(password, settings.admin_password_hash):
        logger.warning("Admin login rejected")
        raise AuthenticationError("Contraseña incorrecta")
    expires_at = datetime.now(timezone.utc) + timedelta(seconds=settings.session_ttl_seconds)
    token = _repo.create_admin_session(expires_at)
    logger.info("Admin session opened")
    return token


def _load_session(token: Optional[str]) -> Optional[AdminSession]:
    if not token:
        return None
    sess = _repo.get_admin_session(token)
    if not sess:
        return None
    if sess.expires_at and _aware(sess.expires_at) < datetime.now(timezone.utc):
        _repo.delete_admin_session(token)
        return None
    return sess


def _cookie_token(request: Request) -> Optional[str]:
    return unsign_token(request.cookies.get(SESSION_COOKIE_NAME), get_settings().session_secret)


def is_admin(request: Request) -> bool:
    sess = _load_session(_cookie_token(request))
    return bool(sess and sess.is_admin)


def require_admin(request: Request) -> None:
    """FastAPI dependency guarding every mutating route."""
    if not is_admin(request):
        raise AuthorizationError("No autorizado")


def logout(request: Request) -> None:
    token = _cookie_token(request)
    if token:
        _repo.delete_admin_session(token)
        logger.info("Admin session closed")


def set_session_cookie(response: Response, token: str) -> None:
    settings = get_settings()
    response.set_cookie(
        SESSION_COOKIE_NAME,
        sign_token(token, settings.session_secret),
        httponly=True,
        secure=settings.app_env == "prod",
        samesite="strict",
        max_age=settings.session_ttl_seconds,
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(SESSION_COOKIE_NAME, path="/")
