"""
Permission checking utilities.

Answers "can this role do X" against the static registry. Unknown roles and
unknown keys raise; a known key that is not granted simply returns False.
"""

from .roles import PermissionKey, Role, parse_permission, permissions_for


def has_permission(role: Role | str, key: PermissionKey | str) -> bool:
    """
    Check a single grant.

    Raises UnknownRoleError / UnknownPermissionError for values outside the
    closed enumerations. There is no default-allow or default-deny path.
    """
    grants = permissions_for(role)
    return grants[parse_permission(key)]


def granted_permissions(role: Role | str) -> frozenset[PermissionKey]:
    """Return exactly the keys that are granted to `role`."""
    return permissions_for(role).granted()


def has_any_permission(role: Role | str, *keys: PermissionKey | str) -> bool:
    """True if at least one of `keys` is granted (used for grouped menu sections)."""
    required = {parse_permission(k) for k in keys}
    return bool(required & granted_permissions(role))
