from __future__ import annotations

import json
from typing import Type, TypeVar

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, ValidationError as PydanticValidationError

from projectboard.core.errors import ValidationError
from projectboard.schemas import MoveRequest, ProjectCreate, ProjectUpdate
from projectboard.services.project_service import ProjectService
from projectboard.services.session_service import require_admin

router = APIRouter(prefix="/api/projects", tags=["projects"])
service = ProjectService()

M = TypeVar("M", bound=BaseModel)


def admin_body(model: Type[M]):
    """Parse the JSON body only after the session check has passed.

    Declaring the model as a route parameter would make FastAPI decode the
    body before ``require_admin`` runs, so a malformed request from an
    anonymous client would answer 400 instead of 401.
    """

    async def _parse(request: Request, _admin: None = Depends(require_admin)):
        try:
            payload = json.loads(await request.body() or b"null")
            return model.model_validate(payload)
        except (ValueError, PydanticValidationError) as exc:
            raise ValidationError("Datos invalidos") from exc

    return _parse


@router.get("")
def list_projects():
    return [project.to_dict() for project in service.list_projects()]


@router.post("")
def create_project(body: ProjectCreate = Depends(admin_body(ProjectCreate))):
    project = service.create_project(body.nombre, body.codigo, body.descripcion)
    return project.to_dict()


@router.put("/{project_id}")
def update_project(project_id: str, body: ProjectUpdate = Depends(admin_body(ProjectUpdate))):
    service.update_project(
        project_id,
        nombre=body.nombre,
        codigo=body.codigo,
        descripcion=body.descripcion,
        orden=body.orden,
    )
    return {"ok": True}


@router.post("/{project_id}/move")
def move_project(project_id: str, body: MoveRequest = Depends(admin_body(MoveRequest))):
    moved = service.move_project(project_id, body.direction)
    return {"ok": True, "moved": moved}


@router.delete("/{project_id}", dependencies=[Depends(require_admin)])
def delete_project(project_id: str):
    service.delete_project(project_id)
    return {"ok": True}
