"""Role hierarchy and permission checks.

A higher rank means more privileges. Permission over another role is strict:
an admin cannot act on another admin, only on roles ranked below it.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, FrozenSet, Mapping

from .enums import Role


ROLE_HIERARCHY: Mapping[Role, int] = MappingProxyType(
    {
        Role.USER: 1,
        Role.ADMIN: 2,
        Role.SUPERADMIN: 3,
    }
)

_ROLE_VALUES = frozenset(role.value for role in ROLE_HIERARCHY)


def has_role_permission(actor_role: Role, target_role: Role) -> bool:
    """True if ``actor_role`` ranks strictly above ``target_role``."""
    return ROLE_HIERARCHY[actor_role] > ROLE_HIERARCHY[target_role]


def has_minimum_role(user_role: Role, required_role: Role) -> bool:
    """True if ``user_role`` meets or exceeds ``required_role``."""
    return ROLE_HIERARCHY[user_role] >= ROLE_HIERARCHY[required_role]


def is_valid_role(value: Any) -> bool:
    """True if ``value`` is exactly one of the stored role strings."""
    if isinstance(value, Role):
        return True
    return isinstance(value, str) and value in _ROLE_VALUES


def parse_role(value: Any, default: Role = Role.USER) -> Role:
    """Turn an untrusted role value into a Role.

    Missing or unknown values fall back to ``default`` (the lowest privilege),
    so corrupt data loses privileges instead of gaining them.
    """
    if not is_valid_role(value):
        return default
    return Role(value)


def get_managed_roles(user_role: Role) -> FrozenSet[Role]:
    """All roles ranked below ``user_role``. Empty means: manage nobody."""
    level = ROLE_HIERARCHY[user_role]
    return frozenset(role for role, rank in ROLE_HIERARCHY.items() if rank < level)


def sorted_roles(roles) -> list[Role]:
    """Roles ordered from lowest to highest rank (stable output for APIs)."""
    return sorted(roles, key=lambda role: ROLE_HIERARCHY[role])


def can_change_role(actor_role: Role, from_role: Role, to_role: Role) -> bool:
    # Actor must outrank both the current and the requested role.
    return has_role_permission(actor_role, from_role) and has_role_permission(actor_role, to_role)
