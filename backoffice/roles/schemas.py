"""
Role audit schemas — read-only view of the role registry.
"""

from pydantic import BaseModel, Field

from backoffice.rbac import VisualTier


class PermissionEntry(BaseModel):
    key: str = Field(..., description="Stable permission identifier, e.g. canVoidSales")
    label: str
    granted: bool


class PermissionDefinition(BaseModel):
    key: str
    label: str


class RoleAuditEntry(BaseModel):
    """One section of the audit grid: a role and its grant for every key."""

    role: str
    title: str
    description: str
    visual_tier: VisualTier
    icon: str
    color_class: str
    permissions: list[PermissionEntry]


class MyAccessResponse(BaseModel):
    role: str
    title: str
    description: str
    visual_tier: VisualTier
    granted: list[str]
