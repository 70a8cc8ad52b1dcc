from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role
from ..profiles.model import UserProfile


@dataclass(frozen=True)
class AuthSession:
    """What the identity provider tells us about the signed-in account."""

    user_id: str
    email: Optional[str]


@dataclass(frozen=True)
class AuthContext:
    """Authenticated actor of a request: session plus its stored profile."""

    session: AuthSession
    profile: Optional[UserProfile]

    @property
    def role(self) -> Role:
        # No profile yet means no privileges.
        return self.profile.role if self.profile else Role.USER

    @property
    def email(self) -> Optional[str]:
        return self.session.email or (self.profile.email if self.profile else None)
