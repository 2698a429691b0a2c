"""
Authentication middleware.

Runs on every request (except DISABLED_ROUTES):
  1. Decode JWT → extract sub and role
  2. Resolve the role against the closed registry
  3. Set request.state.user, request.state.user_role

Per-route permission checks are done by @require_permission.
"""

from fastapi import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from backoffice.auth.helpers import decode_access_token, extract_bearer_token
from backoffice.rbac import UnknownRoleError, parse_role
from backoffice.utils import Logger, error_response

logger = Logger("auth")

# Routes that skip all auth / permission checks
DISABLED_ROUTES = [
    "/health",
    "/openapi.json",
    "/api/docs",
    "/redoc",
]


class AuthPermissionMiddleware(BaseHTTPMiddleware):
    """Verifies the bearer token and attaches the caller's Role to the request."""

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin", "*")

        # ── Preflight ────────────────────────────────────────────
        if request.method == "OPTIONS":
            return JSONResponse(
                status_code=200,
                content={"message": "CORS preflight ok"},
                headers={
                    "Access-Control-Allow-Origin": origin,
                    "Access-Control-Allow-Methods": "GET,OPTIONS",
                    "Access-Control-Allow-Headers": "Authorization,Content-Type",
                    "Access-Control-Allow-Credentials": "true",
                },
            )

        path = request.url.path

        # ── Skip disabled routes ─────────────────────────────────
        if any(path.endswith(route) for route in DISABLED_ROUTES):
            return await call_next(request)

        # ── Extract & decode JWT ─────────────────────────────────
        try:
            token = extract_bearer_token(request.headers.get("Authorization"))
            payload = decode_access_token(token)
        except HTTPException as e:
            logger.warning(f"Rejected {request.method} {path}: {e.detail}")
            return error_response(e.detail, code=e.status_code)

        # An unknown role is a registry/issuer mismatch: fail loudly, never
        # degrade to "no permissions".
        try:
            role = parse_role(payload["role"])
        except UnknownRoleError as exc:
            logger.error(f"Token for sub={payload.get('sub')!r} rejected: {exc}")
            return error_response(str(exc), code=500, error_code=exc.code)

        # ── Populate request.state ───────────────────────────────
        request.state.user = payload
        request.state.user_role = role

        return await call_next(request)
