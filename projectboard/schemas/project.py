"""
Pydantic schemas for project and login payloads.

Required-field checks live in the services so that a missing ``nombre``
or ``password`` yields the same 400 message whether the key is absent,
null or blank. The schemas enforce types and the ``orden`` range.
"""

from typing import Optional

from pydantic import BaseModel, Field

from projectboard.domain.ordering import MAX_ORDEN, MIN_ORDEN


class ProjectCreate(BaseModel):
    """Body of ``POST /api/projects``."""

    nombre: Optional[str] = Field(None, description="Display name")
    codigo: Optional[str] = Field(None, description="Human-facing code, not unique")
    descripcion: Optional[str] = Field(None, description="Free text shown under the name")


class ProjectUpdate(BaseModel):
    """Body of ``PUT /api/projects/{id}``.

    All fields are optional; only provided values are written. A new
    ``orden`` shifts the other projects to keep the sequence dense.
    """

    nombre: Optional[str] = None
    codigo: Optional[str] = None
    descripcion: Optional[str] = None
    orden: Optional[int] = Field(None, ge=MIN_ORDEN, le=MAX_ORDEN)


class MoveRequest(BaseModel):
    direction: int = Field(..., description="-1 moves up, 1 moves down")


class LoginRequest(BaseModel):
    password: Optional[str] = None
