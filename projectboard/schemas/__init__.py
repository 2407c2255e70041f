"""Pydantic request bodies for the JSON API."""

from .project import LoginRequest, MoveRequest, ProjectCreate, ProjectUpdate

__all__ = ["LoginRequest", "MoveRequest", "ProjectCreate", "ProjectUpdate"]
