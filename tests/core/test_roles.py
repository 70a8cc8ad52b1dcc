from __future__ import annotations

import itertools

import pytest

from school_attendance.core.enums import Role
from school_attendance.core.roles import (
    ROLE_HIERARCHY,
    can_change_role,
    get_managed_roles,
    has_minimum_role,
    has_role_permission,
    is_valid_role,
    parse_role,
)

ALL_ROLES = list(Role)


def test_role_values_match_stored_strings():
    assert {r.value for r in Role} == {"user", "admin", "superadmin"}
    assert ROLE_HIERARCHY[Role.USER] < ROLE_HIERARCHY[Role.ADMIN] < ROLE_HIERARCHY[Role.SUPERADMIN]


def test_hierarchy_is_read_only():
    with pytest.raises(TypeError):
        ROLE_HIERARCHY[Role.USER] = 99  # type: ignore[index]


@pytest.mark.parametrize("role", ALL_ROLES)
def test_no_role_outranks_itself(role):
    assert has_role_permission(role, role) is False


def test_permission_is_a_strict_total_order():
    for a, b in itertools.product(ALL_ROLES, repeat=2):
        assert has_role_permission(a, b) == (ROLE_HIERARCHY[a] > ROLE_HIERARCHY[b])
        if has_role_permission(a, b):
            assert not has_role_permission(b, a)
        if a != b:
            assert has_role_permission(a, b) or has_role_permission(b, a)

    for a, b, c in itertools.product(ALL_ROLES, repeat=3):
        if has_role_permission(a, b) and has_role_permission(b, c):
            assert has_role_permission(a, c)


def test_managed_roles():
    assert get_managed_roles(Role.USER) == frozenset()
    assert get_managed_roles(Role.ADMIN) == {Role.USER}
    assert get_managed_roles(Role.SUPERADMIN) == {Role.USER, Role.ADMIN}


@pytest.mark.parametrize("role", ALL_ROLES)
def test_managed_roles_agree_with_permission(role):
    assert get_managed_roles(role) == {r for r in ALL_ROLES if has_role_permission(role, r)}


def test_can_change_role():
    assert can_change_role(Role.ADMIN, Role.USER, Role.SUPERADMIN) is False
    assert can_change_role(Role.SUPERADMIN, Role.ADMIN, Role.USER) is True
    assert can_change_role(Role.ADMIN, Role.ADMIN, Role.USER) is False
    assert can_change_role(Role.SUPERADMIN, Role.USER, Role.ADMIN) is True
    assert can_change_role(Role.SUPERADMIN, Role.USER, Role.SUPERADMIN) is False


def test_minimum_role_is_inclusive():
    assert has_minimum_role(Role.SUPERADMIN, Role.ADMIN) is True
    assert has_minimum_role(Role.ADMIN, Role.ADMIN) is True
    assert has_minimum_role(Role.USER, Role.ADMIN) is False


@pytest.mark.parametrize("value", ["user", "admin", "superadmin", Role.ADMIN])
def test_valid_roles(value):
    assert is_valid_role(value) is True


@pytest.mark.parametrize("value", ["owner", "", "Admin", "SUPERADMIN", " user", None, 2])
def test_invalid_roles(value):
    assert is_valid_role(value) is False


def test_unknown_roles_fall_back_to_lowest_privilege():
    assert parse_role("superadmin") is Role.SUPERADMIN
    assert parse_role(None) is Role.USER
    assert parse_role("owner") is Role.USER
    assert parse_role("", default=Role.USER) is Role.USER


def test_calls_are_repeatable():
    for a, b, c in itertools.product(ALL_ROLES, repeat=3):
        assert can_change_role(a, b, c) == can_change_role(a, b, c)
        assert has_role_permission(a, b) == has_role_permission(a, b)
        assert has_minimum_role(a, b) == has_minimum_role(a, b)
    assert get_managed_roles(Role.SUPERADMIN) == get_managed_roles(Role.SUPERADMIN)
