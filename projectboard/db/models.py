"""SQLAlchemy models for projects and admin sessions."""
from __future__ import annotations

import uuid

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Integer,
    String,
    Text,
    func,
)

from .session import Base


NOMBRE_MAX_LENGTH = 255
CODIGO_MAX_LENGTH = 64


def _new_id() -> str:
    return uuid.uuid4().hex


class Project(Base):
    __tablename__ = "projects"

    id = Column(String(64), primary_key=True, default=_new_id)
    nombre = Column(String(NOMBRE_MAX_LENGTH), nullable=False)
    codigo = Column(String(CODIGO_MAX_LENGTH), nullable=False)
    descripcion = Column(Text, nullable=False, default="")
    # nullable: legacy rows may lack a position and sort last
    orden = Column(Integer, nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nombre": self.nombre,
            "codigo": self.codigo,
            "descripcion": self.descripcion or "",
            "orden": self.orden,
        }


class AdminSession(Base):
    __tablename__ = "sessions_admin"

    token = Column(String(128), primary_key=True)
    is_admin = Column(Boolean, default=False, nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
