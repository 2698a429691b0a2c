"""
Display helpers for the role audit view.

Turns permission keys into labels and roles into rendering hints so the
resolver stays free of presentation concerns.
"""

import re
from dataclasses import dataclass
from enum import Enum

from .roles import PermissionKey, Role, parse_permission, parse_role
from .exceptions import UnknownRoleError


_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_BOOLEAN_PREFIX = "can"


class VisualTier(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    DEFAULT = "default"


@dataclass(frozen=True)
class RoleDisplay:
    description: str
    visual_tier: VisualTier
    icon: str
    color_class: str


_ROLE_DISPLAY: dict[Role, RoleDisplay] = {
    Role.OWNER: RoleDisplay(
        description="Full business control and administration",
        visual_tier=VisualTier.PRIMARY,
        icon="rocket",
        color_class="bg-purple-50 text-purple-700 border-purple-100",
    ),
    Role.ADMIN: RoleDisplay(
        description="Business administration on behalf of the owner",
        visual_tier=VisualTier.PRIMARY,
        icon="shield-check",
        color_class="bg-purple-50 text-purple-700 border-purple-100",
    ),
    Role.MANAGER: RoleDisplay(
        description="Operational management and oversight",
        visual_tier=VisualTier.SECONDARY,
        icon="briefcase",
        color_class="bg-blue-50 text-blue-700 border-blue-100",
    ),
    Role.CASHIER: RoleDisplay(
        description="Day-to-day sales and basic operations",
        visual_tier=VisualTier.DEFAULT,
        icon="user",
        color_class="bg-slate-50 text-slate-700 border-slate-100",
    ),
}


def label_for(key: PermissionKey | str) -> str:
    """
    Human label for a permission key.

        "canManageInventory" → "Manage Inventory"
        "canViewReports"     → "View Reports"
    """
    words = _WORD_BOUNDARY.split(parse_permission(key).value)
    if len(words) > 1 and words[0] == _BOOLEAN_PREFIX:
        words = words[1:]
    label = " ".join(words)
    return label[:1].upper() + label[1:]


def display_metadata_for(role: Role | str) -> RoleDisplay:
    """Fixed rendering hints for a role; UnknownRoleError outside the closed set."""
    resolved = parse_role(role)
    try:
        return _ROLE_DISPLAY[resolved]
    except KeyError:
        raise UnknownRoleError(role) from None


def role_title(role: Role | str) -> str:
    return parse_role(role).value.upper()
