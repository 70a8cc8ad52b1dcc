from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import isoformat_or_none
from ..core.constants import DEFAULT_PAGE_LIMIT
from ..core.enums import AbsenceStatus, SortOrder
from ..profiles.model import UserProfile


@dataclass(frozen=True)
class Absence:
    """One check-in/check-out record of a student (absensi)."""

    id: str
    user_id: str
    date: date
    status: AbsenceStatus
    created_at: datetime
    reason: Optional[str] = None
    photo_url: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    profile: Optional[UserProfile] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "date": isoformat_or_none(self.date),
            "status": self.status.value,
            "reason": self.reason,
            "photo_url": self.photo_url,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "created_at": isoformat_or_none(self.created_at),
            "profile": self.profile.to_dict() if self.profile else None,
        }


@dataclass(frozen=True)
class AbsenceFilters:
    user_id: Optional[str] = None
    status: Optional[AbsenceStatus] = None
    on_date: Optional[date] = None
    sort: SortOrder = SortOrder.ASC
    limit: int = DEFAULT_PAGE_LIMIT
    offset: int = 0
