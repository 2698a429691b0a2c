"""
Navigation schemas — dashboard modules and sidebar entries gated by permission.
"""

from pydantic import BaseModel, Field


class DashboardModule(BaseModel):
    id: str
    name: str
    description: str
    icon: str
    href: str
    color: str
    permission: str = Field(..., description="PermissionKey that unlocks the module")


class SidebarEntry(BaseModel):
    label: str
    icon: str
    href: str
    permissions: list[str] = Field(
        default_factory=list,
        description="Any one of these unlocks the entry; empty means every role",
    )
