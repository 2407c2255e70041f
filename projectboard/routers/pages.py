from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

router = APIRouter(prefix="", tags=["pages"])


def _templates(request: Request):
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates no configurados")


def _asset_href(request: Request, name: str, default: str) -> str:
    return getattr(getattr(request.app, "state", None), name, default)


@router.get("/", response_class=HTMLResponse)
def index(request: Request):
    templates = _templates(request)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "css_href": _asset_href(request, "css_href", "/static/style.css"),
            "js_href": _asset_href(request, "js_href", "/static/main.js"),
        },
    )

