from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from projectboard.schemas import LoginRequest
from projectboard.services import session_service

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login")
def login(request: Request, body: Optional[LoginRequest] = None):
    token = session_service.login(body.password if body else None)
    response = JSONResponse({"ok": True})
    # a stale cookie is replaced, its server row is dropped
    session_service.logout(request)
    session_service.set_session_cookie(response, token)
    return response


@router.post("/logout")
def logout(request: Request):
    session_service.logout(request)
    response = JSONResponse({"ok": True})
    session_service.clear_session_cookie(response)
    return response


@router.get("/session")
def session_status(request: Request):
    return {"isAdmin": session_service.is_admin(request)}
