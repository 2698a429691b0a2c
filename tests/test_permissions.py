import pytest

from backoffice.rbac import (
    PermissionKey,
    Role,
    UnknownPermissionError,
    UnknownRoleError,
    granted_permissions,
    has_any_permission,
    has_permission,
    list_roles,
)


def test_has_permission_matches_granted_permissions():
    for role in list_roles():
        granted = granted_permissions(role)
        for key in PermissionKey:
            assert has_permission(role, key) == (key in granted)


def test_staff_only_processes_sales():
    assert granted_permissions(Role.STAFF) == {PermissionKey.PROCESS_SALES}
    assert granted_permissions(Role.STAFF) == {'canProcessSales'}
    assert has_permission(Role.STAFF, 'canManageInventory') is False
    assert has_permission(Role.OWNER, 'canManageInventory') is True


def test_manager_grants():
    granted = granted_permissions('manager')
    assert PermissionKey.VOID_SALES in granted
    assert PermissionKey.MANAGE_SETTINGS in granted
    assert PermissionKey.MANAGE_BUSINESS not in granted
    assert PermissionKey.VIEW_AUDIT not in granted


def test_false_grant_is_not_an_error():
    assert has_permission(Role.CASHIER, PermissionKey.VOID_SALES) is False


def test_unknown_role_raises():
    with pytest.raises(UnknownRoleError):
        has_permission('kitchen', PermissionKey.PROCESS_SALES)


def test_unknown_permission_raises():
    with pytest.raises(UnknownPermissionError) as exc:
        has_permission(Role.OWNER, 'canLaunchRockets')
    assert exc.value.key == 'canLaunchRockets'


def test_unknown_role_checked_before_key():
    with pytest.raises(UnknownRoleError):
        has_permission('kitchen', 'canLaunchRockets')


def test_has_any_permission():
    assert has_any_permission(Role.MANAGER, 'canManageBusiness', 'canManageSettings')
    assert not has_any_permission(Role.CASHIER, 'canManageBusiness', 'canManageSettings')
    with pytest.raises(UnknownPermissionError):
        has_any_permission(Role.OWNER, 'canProcessSales', 'nope')
