"""Database helpers (engine/session export) and ORM models."""

from .session import Base, get_engine, get_session
from .models import AdminSession, Project

__all__ = ["AdminSession", "Base", "Project", "get_engine", "get_session"]
