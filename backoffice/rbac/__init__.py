from .exceptions import (
    RBACError,
    UnknownRoleError,
    UnknownPermissionError,
    IncompletePermissionSetError,
)
from .roles import (
    Role,
    PermissionKey,
    PermissionSet,
    RoleRegistry,
    REGISTRY,
    list_roles,
    permissions_for,
    parse_role,
    parse_permission,
)
from .permissions import has_permission, granted_permissions, has_any_permission
from .presentation import VisualTier, RoleDisplay, label_for, display_metadata_for

__all__ = [
    "RBACError",
    "UnknownRoleError",
    "UnknownPermissionError",
    "IncompletePermissionSetError",
    "Role",
    "PermissionKey",
    "PermissionSet",
    "RoleRegistry",
    "REGISTRY",
    "list_roles",
    "permissions_for",
    "parse_role",
    "parse_permission",
    "has_permission",
    "granted_permissions",
    "has_any_permission",
    "VisualTier",
    "RoleDisplay",
    "label_for",
    "display_metadata_for",
]
