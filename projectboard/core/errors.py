"""Error taxonomy shared by services and routers.

Every error carries the HTTP status it maps to; the application converts
them into ``{"error": message}`` JSON bodies at the request boundary.
"""
from __future__ import annotations


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Missing or empty required field."""

    status_code = 400


class AuthenticationError(AppError):
    """Wrong admin password."""

    status_code = 401


class AuthorizationError(AppError):
    """Mutation attempted without an authenticated session."""

    status_code = 401


class NotFoundError(AppError):
    status_code = 404


class StoreError(AppError):
    """Database failure. The message is safe to show to clients."""

    status_code = 500
