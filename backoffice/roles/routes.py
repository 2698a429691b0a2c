"""
Role Routes — read-only audit view of roles and their permissions.

Endpoints:
    GET  /roles               Every role with its grant for every permission key
    GET  /roles/me            The caller's own role and granted keys
    GET  /roles/{role}        A single role section
    GET  /permissions         Every permission key with its display label

There is no write path: roles and grants are compiled into the application.
"""

from fastapi import APIRouter, HTTPException, Request, status

from backoffice.rbac import PermissionKey, UnknownRoleError, parse_role
from backoffice.rbac.decorators import require_permission
from backoffice.utils import success_response
from .service import RoleAuditService

roles_router = APIRouter()
permissions_router = APIRouter()


@roles_router.get("/")
@require_permission(PermissionKey.MANAGE_SETTINGS)
async def list_roles(request: Request):
    """
    Full audit grid.

    Permission: canManageSettings (owner/manager)
    """
    svc = RoleAuditService()
    sections = svc.list_sections()
    return success_response(
        data={
            "roles": [s.model_dump(mode="json") for s in sections],
            "total": len(sections),
        }
    )


@roles_router.get("/me")
async def my_access(request: Request):
    """Role, display data and granted keys of the logged-in user."""
    svc = RoleAuditService()
    access = svc.my_access(request.state.user_role)
    return success_response(data=access.model_dump(mode="json"))


@roles_router.get("/{role}")
@require_permission(PermissionKey.MANAGE_SETTINGS)
async def get_role(request: Request, role: str):
    """
    Single role section.

    Permission: canManageSettings
    """
    try:
        resolved = parse_role(role)
    except UnknownRoleError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Role '{role}' not found",
        )
    svc = RoleAuditService()
    return success_response(data=svc.get_section(resolved).model_dump(mode="json"))


@permissions_router.get("/")
@require_permission(PermissionKey.MANAGE_SETTINGS)
async def list_permissions(request: Request):
    """
    Every permission key known to the system, with its label.

    Permission: canManageSettings
    """
    svc = RoleAuditService()
    definitions = svc.list_permission_definitions()
    return success_response(
        data={"permissions": [d.model_dump() for d in definitions]}
    )
