from __future__ import annotations

from typing import Collection, Optional, Protocol, Sequence

from ..core.enums import Role
from .model import UserProfile


class ProfileRepository(Protocol):
    """Repository interface for UserProfile.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, profile_id: str) -> Optional[UserProfile]:
        raise NotImplementedError

    def get_by_user_id(self, user_id: str) -> Optional[UserProfile]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[UserProfile]:
        raise NotImplementedError

    def search(
        self,
        *,
        roles: Collection[Role],
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Sequence[UserProfile]:
        """Profiles whose role is in ``roles``, ordered by role then full name."""

        raise NotImplementedError

    def count(self, *, roles: Collection[Role], search: Optional[str] = None) -> int:
        raise NotImplementedError

    def count_by_role(self, role: Role) -> int:
        raise NotImplementedError

    def create(
        self,
        *,
        email: str,
        full_name: str,
        role: Role,
        class_name: Optional[str] = None,
        nis: Optional[str] = None,
    ) -> UserProfile:
        raise NotImplementedError

    def update_role(self, profile_id: str, role: Role) -> Optional[UserProfile]:
        raise NotImplementedError

    def update_role_by_email(self, email: str, role: Role) -> Optional[UserProfile]:
        raise NotImplementedError

    def delete_by_id(self, profile_id: str) -> Optional[UserProfile]:
        """Delete and return the removed row, or None if it did not exist."""

        raise NotImplementedError
