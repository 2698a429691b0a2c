import pytest

from backoffice.rbac import (
    IncompletePermissionSetError,
    PermissionKey,
    PermissionSet,
    Role,
    RoleRegistry,
    UnknownRoleError,
    list_roles,
    permissions_for,
    parse_role,
)
from backoffice.rbac.roles import ROLES, ROLE_ORDER


def test_list_roles_descending_authority():
    assert list_roles() == (Role.OWNER, Role.ADMIN, Role.MANAGER, Role.CASHIER)
    # prior queries never disturb the order
    permissions_for(Role.CASHIER)
    permissions_for('manager')
    assert list(list_roles()) == [Role.OWNER, Role.ADMIN, Role.MANAGER, Role.CASHIER]


def test_every_role_has_complete_permission_set():
    all_keys = set(PermissionKey)
    for role in list_roles():
        pset = permissions_for(role)
        assert set(pset.keys()) == all_keys
        assert len(pset) == len(all_keys)
        assert all(isinstance(v, bool) for v in pset.values())


def test_permissions_for_is_deterministic():
    for role in list_roles():
        assert permissions_for(role) == permissions_for(role)
        assert permissions_for(role).to_dict() == permissions_for(role.value).to_dict()


def test_owner_has_everything():
    assert all(permissions_for(Role.OWNER).values())


def test_staff_is_cashier_alias():
    assert Role.STAFF is Role.CASHIER
    assert list_roles().count(Role.CASHIER) == 1
    assert permissions_for(Role.STAFF) == permissions_for(Role.CASHIER)


@pytest.mark.parametrize('value', ['OWNER', ' Manager ', 'cashier', Role.OWNER])
def test_parse_role_accepts_role_names(value):
    assert isinstance(parse_role(value), Role)


@pytest.mark.parametrize('value', ['super_admin', 'kitchen', '', None, 3])
def test_unknown_role_raises(value):
    with pytest.raises(UnknownRoleError) as exc:
        permissions_for(value)
    assert exc.value.role == value


def test_permission_set_rejects_missing_key():
    grants = {k: True for k in PermissionKey if k is not PermissionKey.VIEW_AUDIT}
    with pytest.raises(IncompletePermissionSetError) as exc:
        PermissionSet(Role.OWNER, grants)
    assert 'canViewAudit' in exc.value.missing


def test_permission_set_rejects_extra_key():
    grants = {k: False for k in PermissionKey}
    grants['canFlyToTheMoon'] = True
    with pytest.raises(IncompletePermissionSetError) as exc:
        PermissionSet(Role.CASHIER, grants)
    assert exc.value.extra == ('canFlyToTheMoon',)


def test_permission_set_is_read_only():
    pset = permissions_for(Role.MANAGER)
    with pytest.raises(TypeError):
        pset[PermissionKey.VIEW_AUDIT] = True


def test_registry_requires_every_role():
    partial = {Role.OWNER: ROLES[Role.OWNER], Role.MANAGER: ROLES[Role.MANAGER]}
    with pytest.raises(IncompletePermissionSetError):
        RoleRegistry(partial, ROLE_ORDER)


def test_registry_requires_full_display_order():
    with pytest.raises(IncompletePermissionSetError):
        RoleRegistry(ROLES, (Role.OWNER, Role.MANAGER))


def test_registry_membership():
    registry = RoleRegistry(ROLES, ROLE_ORDER)
    assert 'owner' in registry
    assert 'kitchen' not in registry
    assert list(registry) == list(ROLE_ORDER)


def test_admin_matches_owner_grants():
    assert permissions_for('admin').to_dict() == permissions_for(Role.OWNER).to_dict()
    assert permissions_for(Role.ADMIN).role is Role.ADMIN


def test_cashier_cannot_manage_shifts():
    assert permissions_for(Role.CASHIER)[PermissionKey.MANAGE_SHIFTS] is False


def test_shared_permission_set_cannot_be_reassigned():
    pset = permissions_for(Role.CASHIER)
    with pytest.raises(AttributeError):
        pset.role = Role.OWNER
    with pytest.raises(AttributeError):
        pset._grants = {}
    assert permissions_for(Role.CASHIER).role is Role.CASHIER


def test_registry_attributes_cannot_be_reassigned():
    registry = RoleRegistry(ROLES, ROLE_ORDER)
    with pytest.raises(AttributeError):
        registry._order = (Role.CASHIER,)
    assert registry.list_roles() == ROLE_ORDER
