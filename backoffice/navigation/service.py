"""
Navigation service — feature gating for the dashboard and sidebar.

Each entry names the permission key(s) that unlock it; visibility is a
straight lookup against the caller's granted permissions.
"""

from backoffice.rbac import PermissionKey, Role, granted_permissions, has_any_permission
from .schemas import DashboardModule, SidebarEntry


# ── Dashboard tiles ──────────────────────────────────────────────
DASHBOARD_MODULES: tuple[DashboardModule, ...] = (
    DashboardModule(
        id="pos",
        name="Point of Sale",
        description="Process new sales and orders",
        icon="shopping-cart",
        href="/dashboard/pos",
        color="teal",
        permission=PermissionKey.PROCESS_SALES.value,
    ),
    DashboardModule(
        id="inventory",
        name="Inventory",
        description="Manage products and stock",
        icon="package",
        href="/dashboard/inventory",
        color="purple",
        permission=PermissionKey.MANAGE_INVENTORY.value,
    ),
    DashboardModule(
        id="reports",
        name="Sales Reports",
        description="Analyze business performance",
        icon="bar-chart-3",
        href="/dashboard/reports",
        color="blue",
        permission=PermissionKey.VIEW_REPORTS.value,
    ),
    DashboardModule(
        id="staff",
        name="Staff Management",
        description="Manage your team members",
        icon="users",
        href="/dashboard/staff",
        color="orange",
        permission=PermissionKey.MANAGE_USERS.value,
    ),
    DashboardModule(
        id="shifts",
        name="Shifts",
        description="Track staff work hours",
        icon="clock",
        href="/dashboard/shifts",
        color="amber",
        permission=PermissionKey.MANAGE_SHIFTS.value,
    ),
    DashboardModule(
        id="settings",
        name="Settings",
        description="Configure system preferences",
        icon="settings",
        href="/dashboard/settings",
        color="slate",
        permission=PermissionKey.MANAGE_SETTINGS.value,
    ),
    DashboardModule(
        id="subscription",
        name="Subscription",
        description="Manage billing and plans",
        icon="credit-card",
        href="/dashboard/subscription",
        color="pink",
        permission=PermissionKey.MANAGE_SETTINGS.value,
    ),
)


# ── Sidebar ──────────────────────────────────────────────────────
SIDEBAR_ENTRIES: tuple[SidebarEntry, ...] = (
    SidebarEntry(label="Dashboard", icon="layout-dashboard", href="/dashboard"),
    SidebarEntry(
        label="POS Terminal",
        icon="shopping-cart",
        href="/dashboard/pos",
        permissions=[PermissionKey.PROCESS_SALES.value],
    ),
    SidebarEntry(
        label="Inventory",
        icon="package",
        href="/dashboard/inventory",
        permissions=[PermissionKey.MANAGE_INVENTORY.value],
    ),
    SidebarEntry(
        label="Reports",
        icon="bar-chart-3",
        href="/dashboard/reports",
        permissions=[PermissionKey.VIEW_REPORTS.value],
    ),
    SidebarEntry(
        label="Staff",
        icon="users",
        href="/dashboard/staff",
        permissions=[PermissionKey.MANAGE_USERS.value],
    ),
    SidebarEntry(label="How It Works", icon="book-open", href="/dashboard/how-it-works"),
    SidebarEntry(
        label="Settings",
        icon="settings",
        href="/dashboard/settings",
        permissions=[
            PermissionKey.MANAGE_SETTINGS.value,
            PermissionKey.MANAGE_BUSINESS.value,
        ],
    ),
)


class NavigationService:
    def __init__(self, role: Role):
        self.role = role

    def visible_modules(self) -> list[DashboardModule]:
        granted = granted_permissions(self.role)
        return [m for m in DASHBOARD_MODULES if m.permission in granted]

    def visible_sidebar(self) -> list[SidebarEntry]:
        return [
            entry
            for entry in SIDEBAR_ENTRIES
            if not entry.permissions or has_any_permission(self.role, *entry.permissions)
        ]
