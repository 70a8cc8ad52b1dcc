from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import isoformat_or_none
from ..core.enums import Role


@dataclass(frozen=True)
class UserProfile:
    """Domain entity: a user's profile row (one per identity-provider account).

    Note: plain data object, no DB access here.
    """

    id: str
    user_id: str
    email: Optional[str]
    full_name: Optional[str]
    role: Role
    nis: Optional[str] = None
    class_name: Optional[str] = None
    absence_number: Optional[str] = None
    gender: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "email": self.email,
            "full_name": self.full_name,
            "role": self.role.value,
            "nis": self.nis,
            "class_name": self.class_name,
            "absence_number": self.absence_number,
            "gender": self.gender,
            "avatar_url": self.avatar_url,
            "created_at": isoformat_or_none(self.created_at),
            "updated_at": isoformat_or_none(self.updated_at),
        }
