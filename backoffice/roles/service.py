"""Role audit service — assembles the read-only audit grid from the RBAC core."""

from backoffice.rbac import (
    PermissionKey,
    Role,
    display_metadata_for,
    label_for,
    list_roles,
    permissions_for,
    granted_permissions,
)
from backoffice.rbac.presentation import role_title
from .schemas import (
    MyAccessResponse,
    PermissionDefinition,
    PermissionEntry,
    RoleAuditEntry,
)


class RoleAuditService:
    def list_sections(self) -> list[RoleAuditEntry]:
        """One section per role, highest authority first."""
        return [self.get_section(role) for role in list_roles()]

    def get_section(self, role: Role | str) -> RoleAuditEntry:
        grants = permissions_for(role)
        display = display_metadata_for(grants.role)
        return RoleAuditEntry(
            role=grants.role.value,
            title=role_title(grants.role),
            description=display.description,
            visual_tier=display.visual_tier,
            icon=display.icon,
            color_class=display.color_class,
            permissions=[
                PermissionEntry(key=key.value, label=label_for(key), granted=value)
                for key, value in grants.items()
            ],
        )

    def my_access(self, role: Role) -> MyAccessResponse:
        display = display_metadata_for(role)
        granted = granted_permissions(role)
        return MyAccessResponse(
            role=role.value,
            title=role_title(role),
            description=display.description,
            visual_tier=display.visual_tier,
            # declaration order keeps the list stable between calls
            granted=[key.value for key in PermissionKey if key in granted],
        )

    def list_permission_definitions(self) -> list[PermissionDefinition]:
        return [
            PermissionDefinition(key=key.value, label=label_for(key))
            for key in PermissionKey
        ]
