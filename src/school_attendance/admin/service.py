from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..auth.model import AuthContext
from ..common.validators import require_email, require_int_range, require_non_empty, require_uuid
from ..core.constants import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from ..core.roles import (
    can_change_role,
    get_managed_roles,
    has_minimum_role,
    has_role_permission,
    is_valid_role,
    sorted_roles,
)
from ..profiles.model import UserProfile
from ..profiles.repository import ProfileRepository

logger = logging.getLogger(__name__)

_CREATABLE_ROLES = frozenset({Role.ADMIN, Role.USER})


@dataclass(frozen=True)
class PageMeta:
    total: int
    limit: int
    offset: int
    has_more: bool

    def to_dict(self) -> dict:
        return {"total": self.total, "limit": self.limit, "offset": self.offset, "has_more": self.has_more}


@dataclass(frozen=True)
class ManagedUsersPage:
    data: list[UserProfile] = field(default_factory=list)
    meta: PageMeta = PageMeta(total=0, limit=DEFAULT_PAGE_LIMIT, offset=0, has_more=False)

    def to_dict(self) -> dict:
        return {"data": [p.to_dict() for p in self.data], "meta": self.meta.to_dict()}


def _role_input(value, field_name: str = "Role") -> Role:
    if not is_valid_role(value):
        raise ValidationError(f"{field_name} must be one of: user, admin, superadmin")
    return Role(value)


def _same_person(actor: AuthContext, target: UserProfile) -> bool:
    # Identity comes from the verified session, never from an email match.
    if actor.profile is not None and actor.profile.id == target.id:
        return True
    return actor.session.user_id == target.user_id


class AdminService:
    """Use cases: manage user profiles according to the role hierarchy.

    Superadmin manages admins and users, admin manages users only.
    """

    def __init__(self, profiles: ProfileRepository):
        self._profiles = profiles

    @staticmethod
    def _require_admin(actor: AuthContext) -> Role:
        if not has_minimum_role(actor.role, Role.ADMIN):
            raise AuthorizationError("Admin access required")
        return actor.role

    def _get_existing(self, profile_id: str) -> UserProfile:
        profile = self._profiles.get_by_id(require_uuid(profile_id))
        if not profile:
            raise NotFoundError("User not found")
        return profile

    def get_my_role(self, actor: AuthContext) -> dict:
        if actor.profile is None:
            return {"role": Role.USER.value, "managed_roles": []}
        return {
            "role": actor.role.value,
            "managed_roles": [r.value for r in sorted_roles(get_managed_roles(actor.role))],
        }

    def list_managed_users(
        self,
        actor: AuthContext,
        *,
        limit: int = DEFAULT_PAGE_LIMIT,
        offset: int = 0,
        search: Optional[str] = None,
        role_filter: Optional[str] = None,
    ) -> ManagedUsersPage:
        actor_role = self._require_admin(actor)
        limit = require_int_range(limit, "limit", min_value=1, max_value=MAX_PAGE_LIMIT)
        offset = require_int_range(offset, "offset", min_value=0)
        wanted = _role_input(role_filter, "roleFilter") if role_filter else None

        managed = get_managed_roles(actor_role)
        if not managed:
            # Managing nobody is not the same as "no filter".
            return ManagedUsersPage(meta=PageMeta(total=0, limit=limit, offset=offset, has_more=False))

        roles = {wanted} if wanted in managed else managed
        term = (search or "").strip() or None

        rows = list(self._profiles.search(roles=roles, search=term, limit=limit, offset=offset))
        total = int(self._profiles.count(roles=roles, search=term))
        return ManagedUsersPage(
            data=rows,
            meta=PageMeta(total=total, limit=limit, offset=offset, has_more=offset + len(rows) < total),
        )

    def get_user_by_id(self, actor: AuthContext, profile_id: str) -> UserProfile:
        actor_role = self._require_admin(actor)
        profile = self._get_existing(profile_id)
        if not has_role_permission(actor_role, profile.role):
            raise AuthorizationError("You don't have permission to view this user")
        return profile

    def update_user_role(self, actor: AuthContext, *, user_id: str, new_role) -> UserProfile:
        actor_role = self._require_admin(actor)
        new_role = _role_input(new_role, "newRole")
        target = self._get_existing(user_id)
        current_role = target.role

        if _same_person(actor, target) and new_role != actor_role:
            raise AuthorizationError("You cannot change your own role")

        if not can_change_role(actor_role, current_role, new_role):
            raise AuthorizationError(
                f"You don't have permission to change role from {current_role.value} to {new_role.value}"
            )

        updated = self._profiles.update_role(target.id, new_role)
        if not updated:
            raise NotFoundError("User not found")
        logger.info(
            "role changed: %s %s -> %s by %s", target.id, current_role.value, new_role.value, actor.email
        )
        return updated

    def delete_user(self, actor: AuthContext, *, user_id: str) -> UserProfile:
        actor_role = self._require_admin(actor)
        target = self._get_existing(user_id)

        if _same_person(actor, target):
            raise AuthorizationError("You cannot delete your own account")

        if not has_role_permission(actor_role, target.role):
            raise AuthorizationError(f"You don't have permission to delete {target.role.value} users")

        deleted = self._profiles.delete_by_id(target.id)
        if not deleted:
            raise NotFoundError("User not found")
        logger.info("user deleted: %s (%s) by %s", target.id, target.role.value, actor.email)
        return deleted

    def create_user(
        self,
        actor: AuthContext,
        *,
        email: str,
        full_name: str,
        role=Role.USER,
        class_name: Optional[str] = None,
        nis: Optional[str] = None,
    ) -> UserProfile:
        actor_role = self._require_admin(actor)
        email = require_email(email)
        full_name = require_non_empty(full_name, "Full name")
        role = _role_input(role or Role.USER.value)
        if role not in _CREATABLE_ROLES:
            raise ValidationError("Role must be one of: admin, user")

        if not has_role_permission(actor_role, role):
            raise AuthorizationError(f"You don't have permission to create {role.value} users")

        if self._profiles.get_by_email(email):
            raise ConflictError("User with this email already exists")

        created = self._profiles.create(
            email=email,
            full_name=full_name,
            role=role,
            class_name=(class_name or "").strip() or None,
            nis=(nis or "").strip() or None,
        )
        logger.info("user created: %s (%s) by %s", created.id, role.value, actor.email)
        return created

    def get_dashboard_stats(self, actor: AuthContext) -> dict:
        actor_role = self._require_admin(actor)
        stats = {"total_users": self._profiles.count_by_role(Role.USER)}
        if actor_role == Role.SUPERADMIN:
            stats["total_admins"] = self._profiles.count_by_role(Role.ADMIN)
            stats["total_superadmins"] = self._profiles.count_by_role(Role.SUPERADMIN)
            stats["total_all"] = stats["total_users"] + stats["total_admins"] + stats["total_superadmins"]
        return stats
