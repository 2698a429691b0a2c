"""
Role definitions and permission matrix.

Roles      : owner > admin > manager > cashier   (descending authority)
Keys       : "can{Capability}" camelCase identifiers shared by every role
Invariant  : every role defines a boolean for every key, checked when the
             registry is built at import time.
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Iterator

from .exceptions import (
    IncompletePermissionSetError,
    UnknownPermissionError,
    UnknownRoleError,
)


class Role(str, Enum):
    OWNER = "owner"
    ADMIN = "admin"
    MANAGER = "manager"
    CASHIER = "cashier"
    STAFF = "cashier"  # alias: the basic staff tier


class PermissionKey(str, Enum):
    PROCESS_SALES = "canProcessSales"
    VOID_SALES = "canVoidSales"
    MANAGE_INVENTORY = "canManageInventory"
    VIEW_REPORTS = "canViewReports"
    MANAGE_USERS = "canManageUsers"
    MANAGE_SHIFTS = "canManageShifts"
    MANAGE_SETTINGS = "canManageSettings"
    MANAGE_BUSINESS = "canManageBusiness"
    VIEW_AUDIT = "canViewAudit"


def parse_role(value) -> Role:
    """Return the Role named by `value` (case-insensitive) or raise UnknownRoleError."""
    if isinstance(value, Role):
        return value
    if isinstance(value, str):
        try:
            return Role(value.strip().lower())
        except ValueError:
            pass
    raise UnknownRoleError(value)


def parse_permission(value) -> PermissionKey:
    """Return the PermissionKey named by `value` or raise UnknownPermissionError."""
    if isinstance(value, PermissionKey):
        return value
    if isinstance(value, str):
        try:
            return PermissionKey(value.strip())
        except ValueError:
            pass
    raise UnknownPermissionError(value)


class PermissionSet(Mapping):
    """Complete, read-only PermissionKey -> bool map for one role."""

    __slots__ = ("role", "_grants")

    def __init__(self, role: Role, grants: Mapping):
        resolved: dict[PermissionKey, bool] = {}
        extra = []
        for key, value in grants.items():
            try:
                resolved[parse_permission(key)] = bool(value)
            except UnknownPermissionError:
                extra.append(key)

        missing = [k.value for k in PermissionKey if k not in resolved]
        if missing or extra:
            raise IncompletePermissionSetError(
                f"role '{role.value}'", missing=missing, extra=extra
            )

        object.__setattr__(self, "role", role)
        # stored in declaration order so renderers get a stable sequence
        object.__setattr__(
            self, "_grants", MappingProxyType({k: resolved[k] for k in PermissionKey})
        )

    def __setattr__(self, name, value):
        raise AttributeError(f"PermissionSet is read-only (cannot set {name!r})")

    def __getitem__(self, key) -> bool:
        return self._grants[parse_permission(key)]

    def __contains__(self, key) -> bool:
        try:
            return parse_permission(key) in self._grants
        except UnknownPermissionError:
            return False

    def __iter__(self) -> Iterator[PermissionKey]:
        return iter(self._grants)

    def __len__(self) -> int:
        return len(self._grants)

    def __eq__(self, other) -> bool:
        if isinstance(other, PermissionSet):
            return self.role == other.role and dict(self._grants) == dict(other._grants)
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash((self.role, tuple(self._grants.items())))

    def __repr__(self) -> str:
        granted = [k.value for k, v in self._grants.items() if v]
        return f"PermissionSet({self.role.value}, granted={granted})"

    def granted(self) -> frozenset[PermissionKey]:
        return frozenset(k for k, v in self._grants.items() if v)

    def to_dict(self) -> dict[str, bool]:
        return {k.value: v for k, v in self._grants.items()}


class RoleRegistry(Mapping):
    """
    Closed Role -> PermissionSet table.

    Built once from plain data; raises IncompletePermissionSetError unless
    every Role has a complete set and `order` lists every Role exactly once.
    """

    def __init__(self, grants: Mapping, order: Iterable[Role]):
        order = tuple(order)
        roles = list(Role)

        missing = [r.value for r in roles if r not in grants]
        extra = [r for r in grants if not isinstance(r, Role)]
        if missing or extra:
            raise IncompletePermissionSetError("role registry", missing=missing, extra=extra)

        if len(order) != len(roles) or set(order) != set(roles):
            raise IncompletePermissionSetError(
                "role display order",
                missing=[r.value for r in roles if r not in order],
                extra=[r for r in order if r not in roles],
            )

        object.__setattr__(self, "_order", order)
        object.__setattr__(
            self,
            "_sets",
            MappingProxyType({role: PermissionSet(role, grants[role]) for role in order}),
        )

    def __setattr__(self, name, value):
        raise AttributeError(f"RoleRegistry is read-only (cannot set {name!r})")

    def __getitem__(self, role) -> PermissionSet:
        return self._sets[parse_role(role)]

    def __contains__(self, role) -> bool:
        try:
            return parse_role(role) in self._sets
        except UnknownRoleError:
            return False

    def __iter__(self) -> Iterator[Role]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def list_roles(self) -> tuple[Role, ...]:
        return self._order

    def permissions_for(self, role) -> PermissionSet:
        return self._sets[parse_role(role)]


# ── Permission matrix ────────────────────────────────────────────
_ALL = {key: True for key in PermissionKey}

ROLES: dict[Role, dict[PermissionKey, bool]] = {
    Role.OWNER: dict(_ALL),
    Role.ADMIN: dict(_ALL),
    Role.MANAGER: {
        **_ALL,
        PermissionKey.MANAGE_BUSINESS: False,
        PermissionKey.VIEW_AUDIT: False,
    },
    Role.CASHIER: {
        **{key: False for key in PermissionKey},
        PermissionKey.PROCESS_SALES: True,
    },
}

ROLE_ORDER: tuple[Role, ...] = (Role.OWNER, Role.ADMIN, Role.MANAGER, Role.CASHIER)

REGISTRY = RoleRegistry(ROLES, ROLE_ORDER)


def list_roles() -> tuple[Role, ...]:
    """Every role, highest authority first."""
    return REGISTRY.list_roles()


def permissions_for(role) -> PermissionSet:
    """Return the complete permission set for a role name."""
    return REGISTRY.permissions_for(role)
