"""
Back Office Access Control — Main application.

Assembles all packages: config, middleware, role audit view, navigation.
"""

import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from backoffice.config import settings
from backoffice.middleware import AuthPermissionMiddleware
from backoffice.rbac import RBACError, list_roles
from backoffice.utils import Logger, error_response

# ── Route imports ────────────────────────────────────────────────
from backoffice.roles import roles_router, permissions_router
from backoffice.navigation import navigation_router

logger = Logger("request")


# ── Request Logging Middleware ───────────────────────────────────
class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every request: method, path, status code, and duration."""

    async def dispatch(self, request: Request, call_next):
        start = time.time()
        method = request.method
        path = request.url.path
        client = request.client.host if request.client else "unknown"

        logger.info(f"--> {method} {path} (from {client})")

        try:
            response = await call_next(request)
        except Exception as exc:
            duration = round((time.time() - start) * 1000, 2)
            logger.exception(f"<-- {method} {path} | 500 | {duration}ms | {exc}")
            raise

        duration = round((time.time() - start) * 1000, 2)
        status = response.status_code

        if status >= 500:
            logger.error(f"<-- {method} {path} | {status} | {duration}ms")
        elif status >= 400:
            logger.warning(f"<-- {method} {path} | {status} | {duration}ms")
        else:
            logger.info(f"<-- {method} {path} | {status} | {duration}ms")

        return response


# ── App factory ──────────────────────────────────────────────────
def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Role-based access control for the point-of-sale back office",
        docs_url="/api/docs",
    )

    # ── CORS (must be first) ─────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allowed_methods,
        allow_headers=settings.cors_allowed_headers,
    )

    # ── Request logging (runs on every request) ──────────────
    app.add_middleware(RequestLoggingMiddleware)

    # ── Auth middleware ──────────────────────────────────────
    app.add_middleware(AuthPermissionMiddleware)

    # ── Exception handlers ───────────────────────────────────
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return error_response(str(exc.detail), code=exc.status_code)

    @app.exception_handler(RBACError)
    async def rbac_exception_handler(request: Request, exc: RBACError):
        # Integrity fault: surface it, never turn it into a silent denial.
        logger.error(f"RBAC integrity error on {request.method} {request.url.path}: {exc}")
        return error_response(str(exc), code=500, error_code=exc.code)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}",
            exc_info=exc,
        )
        return error_response(
            str(exc) if settings.debug else "Internal server error", code=500
        )

    # ── Routes ───────────────────────────────────────────────
    v = settings.api_version  # "v1"

    app.include_router(
        roles_router,
        prefix=f"/api/{v}/roles",
        tags=["Roles & Permissions"],
    )
    app.include_router(
        permissions_router,
        prefix=f"/api/{v}/permissions",
        tags=["Roles & Permissions"],
    )
    app.include_router(
        navigation_router,
        prefix=f"/api/{v}/navigation",
        tags=["Navigation"],
    )

    # ── Health check ─────────────────────────────────────────
    @app.get("/health")
    async def health():
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": settings.app_version,
            "roles": [role.value for role in list_roles()],
        }

    return app


# ── Create the app instance ──────────────────────────────────────
app = create_app()
