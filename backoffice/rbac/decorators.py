"""
Declarative permission decorators for route handlers.

Usage:
    @router.get("/")
    @require_permission(PermissionKey.MANAGE_SETTINGS)
    async def list_roles(request: Request):
        ...
"""

from functools import wraps
from fastapi import HTTPException, status
from starlette.requests import Request

from backoffice.utils import Logger
from .permissions import has_permission
from .roles import PermissionKey, parse_permission

logger = Logger("rbac")


def require_permission(permission: PermissionKey | str):
    """
    Decorator that checks the current user's role (set by middleware on
    request.state) is granted `permission`.

    Must be applied AFTER the route decorator. The key is validated when the
    decorator is applied, so a typo fails at import time.
    """
    key = parse_permission(permission)

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            # Find the Request object from args/kwargs
            request: Request | None = kwargs.get("request")
            if request is None:
                for arg in args:
                    if isinstance(arg, Request):
                        request = arg
                        break

            if request is None:
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail="Request object not found in handler",
                )

            role = getattr(request.state, "user_role", None)
            if role is None:
                raise HTTPException(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    detail="Not authenticated",
                )

            if not has_permission(role, key):
                logger.warning(
                    f"Denied {request.method} {request.url.path} for role "
                    f"'{role.value}' (requires {key.value})"
                )
                raise HTTPException(
                    status_code=status.HTTP_403_FORBIDDEN,
                    detail=f"Permission denied. Requires: {key.value}",
                )

            return await func(*args, **kwargs)

        return wrapper

    return decorator
