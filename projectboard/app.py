"""Application factory: middleware, static assets, error handlers and routers."""
import hashlib
import logging
import os
import pathlib
import shutil
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.middleware.base import BaseHTTPMiddleware

from projectboard.core.config import get_settings
from projectboard.core.errors import AppError
from projectboard.core.logging_config import setup_logging
from projectboard.db.create_tables import create_all
from projectboard.routers import auth as auth_router
from projectboard.routers import pages as pages_router
from projectboard.routers import projects as projects_router

logger = logging.getLogger(__name__)

BASE = os.path.dirname(__file__)
WEB = os.path.join(BASE, "web")
TEMPLATES = os.path.join(BASE, "templates")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (CSP, anti clickjacking, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault(
            "Content-Security-Policy",
            "default-src 'self'; "
            "img-src 'self' data:; "
            "style-src 'self' 'unsafe-inline' https://cdnjs.cloudflare.com; "
            "font-src 'self' https://cdnjs.cloudflare.com; "
            "script-src 'self'",
        )
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer-when-downgrade")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


class CachedStaticFiles(StaticFiles):
    def set_headers(self, scope, resp, path, stat_result):
        # Cache fuerte para assets versionados por fingerprint
        resp.headers["Cache-Control"] = "public, max-age=31536000, immutable"


def _fingerprint_asset(rel_path: str) -> str:
    """
    Copy an asset under a short content hash: "style.css" -> "style.<hash8>.css".
    Returns the versioned file name (without /static).
    """
    src = pathlib.Path(WEB) / rel_path
    if not src.exists():
        return rel_path.replace("\\", "/")
    h = hashlib.sha1(src.read_bytes()).hexdigest()[:8]
    dst = src.with_name(f"{src.stem}.{h}{src.suffix}")
    if not dst.exists():
        shutil.copy2(src, dst)
    return dst.name


def _static_href(rel_path: str) -> str:
    try:
        return f"/static/{_fingerprint_asset(rel_path)}"
    except OSError:
        logger.warning("Could not fingerprint %s; serving it unversioned", rel_path)
        return f"/static/{rel_path}"


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.debug("Rejected payload on %s: %s", request.url.path, exc.errors())
        return JSONResponse({"error": "Datos invalidos"}, status_code=400)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse({"error": "Error interno"}, status_code=500)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    create_all()
    yield


def create_app() -> FastAPI:
    """Factory compatible with uvicorn/gunicorn."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title="Projectboard API", lifespan=_lifespan)

    app.mount("/static", CachedStaticFiles(directory=WEB), name="static")
    app.state.templates = Jinja2Templates(directory=TEMPLATES)
    app.state.css_href = _static_href("style.css")
    app.state.js_href = _static_href("main.js")

    if settings.public_base_url:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[settings.public_base_url],
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")

    _register_error_handlers(app)

    app.include_router(auth_router.router)
    app.include_router(projects_router.router)
    app.include_router(pages_router.router)
    return app


app = create_app()
