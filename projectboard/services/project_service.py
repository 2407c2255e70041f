"""
Project use cases: listing, creation, field updates, reordering,
deletion with compaction and adjacent swaps.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from projectboard.core.errors import NotFoundError, ValidationError
from projectboard.db.models import CODIGO_MAX_LENGTH, NOMBRE_MAX_LENGTH, Project
from projectboard.domain import ordering
from projectboard.repositories.sql_repository import SQLRepository

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Proyecto no encontrado"


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


_MAX_LENGTHS = {"nombre": NOMBRE_MAX_LENGTH, "codigo": CODIGO_MAX_LENGTH}


def _check_length(name: str, value: str) -> None:
    if len(value) > _MAX_LENGTHS[name]:
        raise ValidationError(f"El campo {name} admite hasta {_MAX_LENGTHS[name]} caracteres")


def _check_orden(orden: int) -> None:
    if not ordering.MIN_ORDEN <= orden <= ordering.MAX_ORDEN:
        raise ValidationError("Orden fuera de rango")


@dataclass
class ProjectService:
    """Maintains the ``orden`` sequence across project mutations."""

    repository: SQLRepository = field(default_factory=SQLRepository)

    def list_projects(self) -> list[Project]:
        return ordering.sort_by_orden(self.repository.list_projects(), lambda p: p.orden)

    def create_project(self, nombre: Optional[str], codigo: Optional[str], descripcion: Optional[str] = None) -> Project:
        nombre, codigo = _clean(nombre), _clean(codigo)
        if not nombre or not codigo:
            raise ValidationError("Faltan campos")
        _check_length("nombre", nombre)
        _check_length("codigo", codigo)
        project = self.repository.create_project(nombre, codigo, _clean(descripcion))
        logger.info("Project %s created at orden %s", project.id, project.orden)
        return project

    def update_project(
        self,
        project_id: str,
        *,
        nombre: Optional[str] = None,
        codigo: Optional[str] = None,
        descripcion: Optional[str] = None,
        orden: Optional[int] = None,
    ) -> None:
        """Overwrite the supplied fields; a new ``orden`` re-sequences the list."""
        values: dict = {}
        for name, value in (("nombre", nombre), ("codigo", codigo)):
            if value is None:
                continue
            if not _clean(value):
                raise ValidationError(f"El campo {name} no puede estar vacio")
            _check_length(name, _clean(value))
            values[name] = _clean(value)
        if descripcion is not None:
            values["descripcion"] = _clean(descripcion)
        if orden is not None:
            _check_orden(orden)

        current = self.repository.get_project(project_id)
        if current is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)

        if orden is None or orden == current.orden:
            self.repository.update_project_fields(project_id, values)
            if values:
                logger.info("Project %s updated (%s)", project_id, ", ".join(sorted(values)))
            return

        self._reorder(current, orden, values)

    def _reorder(self, moved: Project, new_orden: int, values: dict) -> None:
        old_orden = ordering.sort_key(moved.orden)
        others = [(p.id, p.orden) for p in self.repository.list_projects() if p.id != moved.id]
        updates = {
            ident: {"orden": value}
            for ident, value in ordering.reorder_shifts(others, old_orden, new_orden).items()
        }
        updates[moved.id] = {**values, "orden": new_orden}
        self.repository.commit_batch(updates)
        logger.info(
            "Project %s moved from orden %s to %s (%d shifted)",
            moved.id,
            moved.orden,
            new_orden,
            len(updates) - 1,
        )

    def delete_project(self, project_id: str) -> None:
        target = self.repository.get_project(project_id)
        if target is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        remaining = [(p.id, p.orden) for p in self.repository.list_projects() if p.id != project_id]
        shifts = ordering.compaction_shifts(remaining, target.orden)
        self.repository.commit_batch(
            {ident: {"orden": value} for ident, value in shifts.items()},
            deletes=[project_id],
            message="Error borrando proyecto",
        )
        logger.info("Project %s deleted (%d compacted)", project_id, len(shifts))

    def move_project(self, project_id: str, direction: int) -> bool:
        """Swap with the previous (-1) or next (+1) project. Returns False at the edges."""
        if direction not in (-1, 1):
            raise ValidationError("Direccion invalida")
        ordered = [(p.id, p.orden) for p in self.list_projects()]
        swap = ordering.swap_adjacent(ordered, project_id, direction)
        if swap is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        if not swap:
            return False
        self.repository.commit_batch({ident: {"orden": value} for ident, value in swap.items()})
        logger.info("Project %s swapped %s", project_id, "up" if direction < 0 else "down")
        return True
