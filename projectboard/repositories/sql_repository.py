"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

import logging
import secrets
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterable, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError

from projectboard.core.errors import StoreError
from projectboard.db.models import AdminSession, Project
from projectboard.db.session import get_session

logger = logging.getLogger(__name__)


@contextmanager
def _store_errors(message: str):
    """Translate driver failures into an opaque StoreError."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("Store failure: %s", message)
        raise StoreError(message) from exc


class SQLRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    # -------------------------- projects --------------------------
    def list_projects(self) -> list[Project]:
        """All projects in store order (callers sort by ``orden``)."""
        with _store_errors("Error leyendo proyectos"), get_session() as session:
            return list(session.execute(select(Project).order_by(Project.created_at, Project.id)).scalars().all())

    def get_project(self, project_id: str) -> Optional[Project]:
        with _store_errors("Error leyendo proyectos"), get_session() as session:
            return session.get(Project, project_id)

    def create_project(self, nombre: str, codigo: str, descripcion: str = "") -> Project:
        """Insert a project at the end of the list (``orden = count + 1``).

        Count and insert share one transaction; two concurrent creates can
        still read the same count.
        """
        now = datetime.now(timezone.utc)
        with _store_errors("Error creando proyecto"), get_session() as session:
            total = int(session.execute(select(func.count()).select_from(Project)).scalar_one())
            entity = Project(
                nombre=nombre,
                codigo=codigo,
                descripcion=descripcion or "",
                orden=total + 1,
                created_at=now,
                updated_at=now,
            )
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def update_project_fields(self, project_id: str, values: dict) -> None:
        if not values:
            return
        with _store_errors("Error actualizando proyecto"), get_session() as session:
            stmt = (
                update(Project)
                .where(Project.id == project_id)
                .values(**values, updated_at=datetime.now(timezone.utc))
            )
            session.execute(stmt)
            session.commit()

    def commit_batch(
        self,
        updates: dict[str, dict],
        deletes: Iterable[str] = (),
        *,
        message: str = "Error actualizando proyecto",
    ) -> None:
        """Apply every update and delete in one transaction.

        ``updates`` maps project id to the column values to write. Either all
        statements commit or the session is rolled back on close.
        """
        now = datetime.now(timezone.utc)
        with _store_errors(message), get_session() as session:
            for project_id in deletes:
                session.execute(delete(Project).where(Project.id == project_id))
            for project_id, values in updates.items():
                stmt = update(Project).where(Project.id == project_id).values(**values, updated_at=now)
                session.execute(stmt)
            session.commit()

    # -------------------------- admin sessions --------------------------
    def create_admin_session(self, expires_at: datetime, *, is_admin: bool = True) -> str:
        token = secrets.token_urlsafe(32)
        entity = AdminSession(token=token, is_admin=is_admin, expires_at=expires_at)
        with _store_errors("Error en login"), get_session() as session:
            session.add(entity)
            session.commit()
        return token

    def get_admin_session(self, token: str) -> Optional[AdminSession]:
        with _store_errors("Error leyendo sesion"), get_session() as session:
            return session.get(AdminSession, token)

    def delete_admin_session(self, token: str) -> None:
        with _store_errors("Error cerrando sesion"), get_session() as session:
            session.execute(delete(AdminSession).where(AdminSession.token == token))
            session.commit()
